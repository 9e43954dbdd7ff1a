# -*- coding: utf-8 -*-
"""
Rotas FastAPI para Matrículas.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from akdemia.database import get_db
from akdemia.enums import StatusMatricula
from akdemia.schemas.matricula import MatriculaCreate, MatriculaRead, MatriculaStatusUpdate
from akdemia.services.matricula_service import MatriculaService


router = APIRouter(
    tags=["Matrículas"],
    responses={404: {"description": "Matrícula não encontrada"}},
)


def get_matricula_service(db: Session = Depends(get_db)) -> MatriculaService:
    return MatriculaService(db)


@router.post("", response_model=MatriculaRead, status_code=status.HTTP_201_CREATED)
def create_matricula(matricula: MatriculaCreate, service: MatriculaService = Depends(get_matricula_service)):
    """
    Matricula um aluno ativo em um plano ativo.
    """
    return service.criar(matricula)


@router.get("", response_model=List[MatriculaRead])
def read_matriculas(
    aluno_id: Optional[int] = None,
    status: Optional[StatusMatricula] = None,
    skip: int = 0,
    limit: int = 100,
    service: MatriculaService = Depends(get_matricula_service)
):
    return service.listar(aluno_id, status, skip, limit)


@router.get("/{matricula_id}", response_model=MatriculaRead)
def read_matricula(matricula_id: int, service: MatriculaService = Depends(get_matricula_service)):
    return service.buscar_por_id(matricula_id)


@router.patch("/{matricula_id}/status", response_model=MatriculaRead)
def update_matricula_status(
    matricula_id: int,
    payload: MatriculaStatusUpdate,
    service: MatriculaService = Depends(get_matricula_service)
):
    """
    Suspende, cancela, encerra ou reativa uma matrícula.
    """
    return service.alterar_status(matricula_id, payload.status)
