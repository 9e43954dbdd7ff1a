# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Aluno.
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Enum, Index, Integer, String, text
from sqlalchemy.orm import relationship

from akdemia.database import Base
from akdemia.enums import TipoUsuario


class Aluno(Base):
    __tablename__ = "alunos"

    id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), nullable=False, index=True)
    email = Column(String(100), nullable=False, index=True)
    cpf = Column(String(11), nullable=False, index=True)
    telefone = Column(String(15), nullable=False)
    tipo = Column(Enum(TipoUsuario), nullable=False)
    numero_matricula = Column(String(20), nullable=False, unique=True)
    ativo = Column(Boolean, nullable=False, default=True)

    data_cadastro = Column(DateTime, nullable=False, default=datetime.now)
    data_atualizacao = Column(DateTime, nullable=True)
    data_desativacao = Column(DateTime, nullable=True)

    # Um aluno inativo libera email e CPF para reuso
    __table_args__ = (
        Index("ux_alunos_email_ativo", "email", unique=True,
              sqlite_where=text("ativo = 1"), postgresql_where=text("ativo = true")),
        Index("ux_alunos_cpf_ativo", "cpf", unique=True,
              sqlite_where=text("ativo = 1"), postgresql_where=text("ativo = true")),
    )

    matriculas = relationship("Matricula", back_populates="aluno", cascade="all, delete-orphan")
    treinos = relationship("Treino", back_populates="aluno", cascade="all, delete-orphan")
    avaliacoes = relationship("Avaliacao", back_populates="aluno", cascade="all, delete-orphan")
