# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a Avaliação física.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from akdemia.database import Base
from akdemia.enums import Objetivo


class Avaliacao(Base):
    __tablename__ = 'avaliacoes'

    id = Column(Integer, primary_key=True, index=True)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False)
    instrutor_id = Column(Integer, ForeignKey("instrutores.id"), nullable=False)
    objetivo = Column(Enum(Objetivo), nullable=True)
    peso = Column(Float, nullable=True)                 # kg
    altura = Column(Float, nullable=True)               # metros
    percentual_gordura = Column(Float, nullable=True)
    massa_muscular = Column(Float, nullable=True)
    observacoes = Column(String(1000), nullable=True)
    criado_em = Column(DateTime, nullable=False, default=datetime.now)

    aluno = relationship("Aluno", back_populates="avaliacoes")
    instrutor = relationship("Instrutor", back_populates="avaliacoes")
