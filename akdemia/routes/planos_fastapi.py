# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o CRUD de Planos.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from akdemia.database import get_db
from akdemia.exceptions import ConflictError, NotFoundError
from akdemia.models.plano import Plano
from akdemia.schemas.plano import PlanoCreate, PlanoRead, PlanoUpdate

router = APIRouter(
    tags=["Planos"],
    responses={404: {"description": "Plano não encontrado"}},
)


def _obter_plano(db: Session, plano_id: int) -> Plano:
    db_plano = db.query(Plano).filter(Plano.id == plano_id).first()
    if db_plano is None:
        raise NotFoundError(f"Plano não encontrado com ID: {plano_id}")
    return db_plano


# --- CRUD Endpoints ---

@router.post("", response_model=PlanoRead, status_code=status.HTTP_201_CREATED)
def create_plano(plano: PlanoCreate, db: Session = Depends(get_db)):
    """
    Cria um novo plano.
    """
    db_plano = Plano(**plano.model_dump(), ativo=True)
    try:
        db.add(db_plano)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Erro de integridade ao criar plano: {e}")
        raise ConflictError("Já existe um plano com este nome.") from e
    db.refresh(db_plano)
    return db_plano


@router.get("", response_model=List[PlanoRead])
def read_planos(
    skip: int = 0,
    limit: int = 100,
    nome: Optional[str] = None,
    ativo: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """
    Lista planos com filtros opcionais.
    """
    query = db.query(Plano)
    if nome:
        query = query.filter(Plano.nome.ilike(f"%{nome}%"))
    if ativo is not None:
        query = query.filter(Plano.ativo.is_(ativo))

    return query.order_by(Plano.valor).offset(skip).limit(limit).all()


@router.get("/{plano_id}", response_model=PlanoRead)
def read_plano(plano_id: int, db: Session = Depends(get_db)):
    return _obter_plano(db, plano_id)


@router.put("/{plano_id}", response_model=PlanoRead)
def update_plano(
    plano_id: int,
    plano_update: PlanoUpdate,
    db: Session = Depends(get_db)
):
    """
    Atualiza os dados de um plano existente.
    """
    db_plano = _obter_plano(db, plano_id)

    update_data = plano_update.model_dump(exclude_unset=True, exclude_none=True)
    try:
        for key, value in update_data.items():
            setattr(db_plano, key, value)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logging.error(f"Erro de integridade ao atualizar plano {plano_id}: {e}")
        raise ConflictError("Já existe um plano com este nome.") from e

    db.refresh(db_plano)
    return db_plano


@router.delete("/{plano_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plano(plano_id: int, db: Session = Depends(get_db)):
    """
    Desativa um plano; matrículas existentes continuam apontando para ele.
    """
    db_plano = _obter_plano(db, plano_id)
    if not db_plano.ativo:
        raise ConflictError(f"Plano já está inativo. ID: {plano_id}")

    db_plano.ativo = False
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
