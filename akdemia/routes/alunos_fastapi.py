# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Alunos.

Rotas com caminho fixo ficam antes de "/{aluno_id}".
"""
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from akdemia.database import get_db
from akdemia.enums import TipoUsuario
from akdemia.schemas.aluno import (AlunoCreate, AlunoDetalhe, AlunoEstatisticas,
                                   AlunoPaginated, AlunoRead, AlunoUpdate)
from akdemia.services.aluno_service import AlunoService


router = APIRouter(
    tags=["Alunos"],
    responses={404: {"description": "Aluno não encontrado"}},
)


def get_aluno_service(db: Session = Depends(get_db)) -> AlunoService:
    return AlunoService(db)


@router.post("", response_model=AlunoDetalhe, status_code=status.HTTP_201_CREATED)
def create_aluno(aluno: AlunoCreate, service: AlunoService = Depends(get_aluno_service)):
    """
    Cria um novo aluno. O número de matrícula é gerado automaticamente.
    """
    return service.criar(aluno)


@router.get("", response_model=List[AlunoRead])
def read_alunos(service: AlunoService = Depends(get_aluno_service)):
    """
    Lista todos os alunos ativos.
    """
    return service.listar_todos()


@router.get("/paginado", response_model=AlunoPaginated)
def read_alunos_paginado(
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    service: AlunoService = Depends(get_aluno_service)
):
    return service.listar_com_paginacao(skip, limit)


@router.get("/filtro", response_model=AlunoPaginated)
def read_alunos_filtro(
    nome: Optional[str] = None,
    tipo: Optional[TipoUsuario] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    service: AlunoService = Depends(get_aluno_service)
):
    """
    Lista alunos ativos filtrando por nome e/ou tipo; filtros ausentes são ignorados.
    """
    return service.buscar_com_filtros(nome, tipo, skip, limit)


@router.get("/inativos", response_model=List[AlunoRead])
def read_alunos_inativos(service: AlunoService = Depends(get_aluno_service)):
    return service.listar_inativos()


@router.get("/sem-matricula", response_model=List[AlunoRead])
def read_alunos_sem_matricula(service: AlunoService = Depends(get_aluno_service)):
    """
    Alunos ativos que ainda não possuem nenhuma matrícula.
    """
    return service.buscar_sem_matricula()


@router.get("/cadastrados", response_model=List[AlunoRead])
def read_alunos_cadastrados(
    inicio: datetime,
    fim: datetime,
    service: AlunoService = Depends(get_aluno_service)
):
    return service.listar_cadastrados_no_periodo(inicio, fim)


@router.get("/desativados", response_model=List[AlunoRead])
def read_alunos_desativados(
    inicio: datetime,
    fim: datetime,
    service: AlunoService = Depends(get_aluno_service)
):
    return service.listar_desativados_no_periodo(inicio, fim)


@router.get("/estatisticas", response_model=AlunoEstatisticas)
def read_estatisticas(service: AlunoService = Depends(get_aluno_service)):
    """
    Totais de alunos ativos, inativos e ativos por tipo.
    """
    return service.estatisticas()


@router.get("/buscar", response_model=List[AlunoRead])
def search_alunos(nome: str, service: AlunoService = Depends(get_aluno_service)):
    """
    Busca alunos ativos cujo nome contenha o termo (sem diferenciar maiúsculas).
    """
    return service.buscar_por_nome(nome)


@router.get("/tipo/{tipo}", response_model=List[AlunoRead])
def read_alunos_por_tipo(tipo: TipoUsuario, service: AlunoService = Depends(get_aluno_service)):
    return service.listar_por_tipo(tipo)


@router.get("/email/{email}", response_model=AlunoDetalhe)
def read_aluno_por_email(email: str, service: AlunoService = Depends(get_aluno_service)):
    return service.buscar_por_email(email)


@router.get("/cpf/{cpf}", response_model=AlunoDetalhe)
def read_aluno_por_cpf(cpf: str, service: AlunoService = Depends(get_aluno_service)):
    return service.buscar_por_cpf(cpf)


@router.get("/matricula/{numero_matricula}", response_model=AlunoDetalhe)
def read_aluno_por_matricula(numero_matricula: str, service: AlunoService = Depends(get_aluno_service)):
    return service.buscar_por_matricula(numero_matricula)


@router.get("/{aluno_id}", response_model=AlunoDetalhe)
def read_aluno(
    aluno_id: int,
    apenas_ativos: bool = False,
    service: AlunoService = Depends(get_aluno_service)
):
    """
    Obtém os detalhes de um aluno, com os IDs de matrículas, treinos e avaliações.
    """
    return service.buscar_por_id(aluno_id, apenas_ativos)


@router.put("/{aluno_id}", response_model=AlunoDetalhe)
def update_aluno(
    aluno_id: int,
    aluno_update: AlunoUpdate,
    service: AlunoService = Depends(get_aluno_service)
):
    """
    Atualiza parcialmente um aluno ativo; campos não informados são mantidos.
    """
    return service.atualizar(aluno_id, aluno_update)


@router.delete("/{aluno_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_aluno(aluno_id: int, service: AlunoService = Depends(get_aluno_service)):
    """
    Desativa o aluno (soft delete). Os dados são preservados.
    """
    service.desativar(aluno_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{aluno_id}/reativar", response_model=AlunoDetalhe)
def reactivate_aluno(aluno_id: int, service: AlunoService = Depends(get_aluno_service)):
    return service.reativar(aluno_id)
