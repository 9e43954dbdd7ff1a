# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI da API Akdemia (gestão de academia).
"""

import os
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from akdemia.database import engine, Base
from akdemia.exceptions import registrar_handlers

# Todos os modelos precisam estar registrados antes do create_all
from akdemia.models import aluno, plano, matricula, instrutor, exercicio, treino, avaliacao  # noqa: F401

from akdemia.routes import alunos_fastapi, planos_fastapi, matriculas_fastapi, health_fastapi


log_file = os.getenv("LOG_FILE", "app.log")
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=log_file or None
)

# Cria as tabelas no banco de dados com tratamento de erros
try:
    Base.metadata.create_all(bind=engine)
    logging.info("Tabelas criadas com sucesso!")
except Exception as e:
    logging.error(f"Erro ao criar tabelas: {e}")


env = os.getenv("ENVIRONMENT", "development")

docs_url = "/docs" if env != "production" else None
redoc_url = "/redoc" if env != "production" else None

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Akdemia",
    description="API para gerenciamento de academia: alunos, planos e matrículas",
    version="1.0.0",
    docs_url=docs_url,
    redoc_url=redoc_url,
    openapi_url="/openapi.json" if env != "production" else None
)

frontend_url = os.getenv("FRONTEND_URL", "http://localhost:5700")

origins = [
    frontend_url,
    "http://localhost:5700",
    "http://localhost",
    "http://localhost:8080",
    "http://127.0.0.1",
    "http://127.0.0.1:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

registrar_handlers(app)

# Montagem dos routers
app.include_router(alunos_fastapi.router, prefix="/api/v1/alunos")
app.include_router(planos_fastapi.router, prefix="/api/v1/planos")
app.include_router(matriculas_fastapi.router, prefix="/api/v1/matriculas")
app.include_router(health_fastapi.router)


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Akdemia - Sistema de Gerenciamento de Academia",
        "documentacao": "/docs",
        "endpoints": [
            {"alunos": "/api/v1/alunos"},
            {"planos": "/api/v1/planos"},
            {"matriculas": "/api/v1/matriculas"},
            {"health": "/health"}
        ]
    }
