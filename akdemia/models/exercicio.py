# -*- coding: utf-8 -*-
"""
Modelos SQLAlchemy para o catálogo de exercícios e sua prescrição em treinos.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from akdemia.database import Base
from akdemia.enums import GrupoMuscular, TipoExercicio


class Exercicio(Base):
    __tablename__ = 'exercicios'

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False)
    descricao = Column(String(1000), nullable=True)
    grupo_muscular = Column(Enum(GrupoMuscular), nullable=False)
    tipo = Column(Enum(TipoExercicio), nullable=False)
    equipamento = Column(String(200), nullable=True)
    instrucoes = Column(String(500), nullable=True)
    criado_em = Column(DateTime, nullable=False, default=datetime.now)
    atualizado_em = Column(DateTime, nullable=True, onupdate=datetime.now)

    exercicio_treinos = relationship("ExercicioTreino", back_populates="exercicio", cascade="all, delete-orphan")


class ExercicioTreino(Base):
    __tablename__ = 'exercicios_treino'

    id = Column(Integer, primary_key=True, index=True)
    treino_id = Column(Integer, ForeignKey("treinos.id"), nullable=False)
    exercicio_id = Column(Integer, ForeignKey("exercicios.id"), nullable=False)
    ordem = Column(Integer, nullable=False)
    series = Column(Integer, nullable=False)
    repeticoes = Column(Integer, nullable=False)
    peso = Column(Float, nullable=True)
    descanso_segundos = Column(Integer, nullable=True)
    observacoes = Column(String(200), nullable=True)

    treino = relationship("Treino", back_populates="exercicios")
    exercicio = relationship("Exercicio", back_populates="exercicio_treinos")
