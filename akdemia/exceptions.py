# -*- coding: utf-8 -*-
"""
Exceções de negócio da API e seus tradutores para respostas HTTP.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class AkdemiaError(Exception):
    """Base das exceções de negócio."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem


class InvalidInputError(AkdemiaError):
    """Campo obrigatório ausente ou malformado."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AkdemiaError):
    """Registro inexistente ou excluído pelo filtro de ativos."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AkdemiaError):
    """Violação de unicidade ou transição de estado inválida."""

    status_code = status.HTTP_409_CONFLICT


async def akdemia_exception_handler(request: Request, exc: AkdemiaError):
    logging.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.mensagem}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.mensagem})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Erros de schema/parâmetro viram 400, com os campos problemáticos enumerados
    problemas = []
    for erro in exc.errors():
        campo = ".".join(str(parte) for parte in erro.get("loc", ()) if parte not in ("body", "query", "path"))
        problemas.append(f"{campo or 'requisição'}: {erro.get('msg')}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Dados inválidos - " + "; ".join(problemas)}
    )


def registrar_handlers(app: FastAPI):
    app.add_exception_handler(AkdemiaError, akdemia_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
