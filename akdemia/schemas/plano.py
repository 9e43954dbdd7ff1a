# -*- coding: utf-8 -*-
"""
Schemas Pydantic para a entidade Plano.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


# Schema base para Plano
class PlanoBase(BaseModel):
    nome: str = Field(..., min_length=2, max_length=50)
    descricao: Optional[str] = Field(None, max_length=255)
    valor: float = Field(..., gt=0)
    duracao_dias: int = Field(..., ge=1)


# Schema para criação de Plano
class PlanoCreate(PlanoBase):
    pass


# Schema para atualização de Plano
class PlanoUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=2, max_length=50)
    descricao: Optional[str] = Field(None, max_length=255)
    valor: Optional[float] = Field(None, gt=0)
    duracao_dias: Optional[int] = Field(None, ge=1)
    ativo: Optional[bool] = None


# Schema para leitura/retorno de Plano
class PlanoRead(PlanoBase):
    id: int
    ativo: bool
    data_criacao: Optional[datetime] = None
    data_atualizacao: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
