# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Treino.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from akdemia.database import Base
from akdemia.enums import NivelDificuldade, StatusTreino, TipoTreino


class Treino(Base):
    __tablename__ = 'treinos'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    descricao = Column(String(500), nullable=True)
    tipo = Column(Enum(TipoTreino), nullable=False)
    nivel = Column(Enum(NivelDificuldade), nullable=False)
    duracao_minutos = Column(Integer, nullable=True)
    status = Column(Enum(StatusTreino), nullable=False, default=StatusTreino.ATIVO)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False)
    instrutor_id = Column(Integer, ForeignKey("instrutores.id"), nullable=False)
    criado_em = Column(DateTime, nullable=False, default=datetime.now)
    atualizado_em = Column(DateTime, nullable=True, onupdate=datetime.now)

    aluno = relationship("Aluno", back_populates="treinos")
    instrutor = relationship("Instrutor", back_populates="treinos")
    # Ordem de execução dentro da ficha
    exercicios = relationship("ExercicioTreino", back_populates="treino",
                              cascade="all, delete-orphan", order_by="ExercicioTreino.ordem")
