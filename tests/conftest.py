"""Fixtures compartilhadas para os testes."""

import os

# Antes de importar a aplicação: banco em memória e log no stderr
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from akdemia.database import Base, get_db
from akdemia.enums import TipoUsuario
from akdemia.schemas.aluno import AlunoCreate


@pytest.fixture
def engine():
    motor = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=motor)
    yield motor
    Base.metadata.drop_all(bind=motor)
    motor.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    sessao = session_factory()
    yield sessao
    sessao.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        sessao = session_factory()
        try:
            yield sessao
        finally:
            sessao.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as cliente:
        yield cliente
    app.dependency_overrides.clear()


@pytest.fixture
def novo_aluno():
    """Fábrica de payloads de criação com email e CPF derivados de um sufixo."""
    def _novo_aluno(sufixo=1, nome="João Silva", tipo=TipoUsuario.ALUNO, **extras):
        dados = {
            "nome": nome,
            "email": f"aluno{sufixo}@email.com",
            "cpf": str(sufixo).rjust(11, "0"),
            "telefone": "11987654321",
            "tipo": tipo,
        }
        dados.update(extras)
        return AlunoCreate(**dados)
    return _novo_aluno


@pytest.fixture
def aluno_payload():
    return {
        "nome": "Maria Santos",
        "email": "maria.santos@email.com",
        "cpf": "11888888888",
        "telefone": "12345678902",
        "tipo": "ALUNO",
    }
