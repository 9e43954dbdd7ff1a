# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Instrutor (personal trainer).
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from akdemia.database import Base


class Instrutor(Base):
    __tablename__ = 'instrutores'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=True)
    cref = Column(String(20), unique=True, nullable=False)
    especialidade = Column(String(200), nullable=False)
    valor_hora = Column(Float, nullable=True)
    anos_experiencia = Column(Integer, nullable=True)
    ativo = Column(Boolean, nullable=False, default=True)
    criado_em = Column(DateTime, nullable=False, default=datetime.now)
    atualizado_em = Column(DateTime, nullable=True, onupdate=datetime.now)

    treinos = relationship("Treino", back_populates="instrutor", cascade="all, delete-orphan")
    avaliacoes = relationship("Avaliacao", back_populates="instrutor", cascade="all, delete-orphan")
