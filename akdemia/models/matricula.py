# -*- coding: utf-8 -*-
"""
Modelo SQLAlchemy para a entidade Matrícula (vínculo aluno x plano).
"""
from datetime import date

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer
from sqlalchemy.orm import relationship

from akdemia.database import Base
from akdemia.enums import StatusMatricula


class Matricula(Base):
    __tablename__ = "matriculas"

    id = Column(Integer, primary_key=True, index=True)
    aluno_id = Column(Integer, ForeignKey("alunos.id"), nullable=False, index=True)
    plano_id = Column(Integer, ForeignKey("planos.id"), nullable=False)
    data_inicio = Column(Date, nullable=False)
    data_fim = Column(Date, nullable=False)
    status = Column(Enum(StatusMatricula), nullable=False, default=StatusMatricula.ATIVA)
    data_matricula = Column(Date, nullable=False, default=date.today)
    data_vencimento = Column(Date, nullable=True)

    aluno = relationship("Aluno", back_populates="matriculas")
    plano = relationship("Plano", back_populates="matriculas")

    @property
    def vencida(self) -> bool:
        return date.today() > self.data_fim
