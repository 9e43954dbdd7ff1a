# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Matrícula.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import date

from akdemia.enums import StatusMatricula


# Schema para criação de Matrícula; datas ausentes são derivadas do plano
class MatriculaCreate(BaseModel):
    aluno_id: int
    plano_id: int
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None
    data_vencimento: Optional[date] = None


class MatriculaStatusUpdate(BaseModel):
    status: StatusMatricula


class MatriculaRead(BaseModel):
    id: int
    aluno_id: int
    plano_id: int
    data_inicio: date
    data_fim: date
    status: StatusMatricula
    data_matricula: Optional[date] = None
    data_vencimento: Optional[date] = None
    vencida: bool
    nome_aluno: Optional[str] = None
    nome_plano: Optional[str] = None
