# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Plano.
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from akdemia.database import Base


class Plano(Base):
    __tablename__ = 'planos'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(50), nullable=False, unique=True)
    descricao = Column(String(255), nullable=True)
    valor = Column(Float, nullable=False)
    duracao_dias = Column(Integer, nullable=False)
    ativo = Column(Boolean, nullable=False, default=True)
    data_criacao = Column(DateTime, nullable=False, default=datetime.now)
    data_atualizacao = Column(DateTime, nullable=True, onupdate=datetime.now)

    matriculas = relationship("Matricula", back_populates="plano")
