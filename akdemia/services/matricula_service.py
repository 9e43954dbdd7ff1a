# -*- coding: utf-8 -*-
"""
Regras de negócio das matrículas (vínculo de um aluno a um plano).
"""
import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from akdemia.database import transacao
from akdemia.enums import StatusMatricula
from akdemia.exceptions import ConflictError, InvalidInputError, NotFoundError
from akdemia.models.aluno import Aluno
from akdemia.models.matricula import Matricula
from akdemia.models.plano import Plano
from akdemia.schemas.matricula import MatriculaCreate, MatriculaRead

logger = logging.getLogger(__name__)


def to_read(matricula: Matricula) -> MatriculaRead:
    return MatriculaRead(
        id=matricula.id,
        aluno_id=matricula.aluno_id,
        plano_id=matricula.plano_id,
        data_inicio=matricula.data_inicio,
        data_fim=matricula.data_fim,
        status=matricula.status,
        data_matricula=matricula.data_matricula,
        data_vencimento=matricula.data_vencimento,
        vencida=matricula.vencida,
        nome_aluno=matricula.aluno.nome if matricula.aluno else None,
        nome_plano=matricula.plano.nome if matricula.plano else None,
    )


class MatriculaService:

    def __init__(self, db: Session):
        self.db = db

    def criar(self, dados: MatriculaCreate) -> MatriculaRead:
        """
        Matricula um aluno ativo em um plano ativo.
        Sem datas informadas, o período começa hoje e dura `duracao_dias` do plano.
        """
        logger.info(f"Criando matrícula do aluno {dados.aluno_id} no plano {dados.plano_id}")

        aluno = self.db.query(Aluno).filter(Aluno.id == dados.aluno_id, Aluno.ativo.is_(True)).first()
        if not aluno:
            raise NotFoundError(f"Aluno ativo não encontrado com ID: {dados.aluno_id}")

        plano = self.db.query(Plano).filter(Plano.id == dados.plano_id, Plano.ativo.is_(True)).first()
        if not plano:
            raise NotFoundError(f"Plano ativo não encontrado com ID: {dados.plano_id}")

        data_inicio = dados.data_inicio or date.today()
        data_fim = dados.data_fim or data_inicio + timedelta(days=plano.duracao_dias)
        if data_fim < data_inicio:
            raise InvalidInputError("A data de fim não pode ser anterior à data de início.")

        try:
            with transacao(self.db):
                self._validar_sem_matricula_ativa(dados.aluno_id)
                matricula = Matricula(
                    aluno_id=aluno.id,
                    plano_id=plano.id,
                    data_inicio=data_inicio,
                    data_fim=data_fim,
                    data_vencimento=dados.data_vencimento,
                    status=StatusMatricula.ATIVA,
                    data_matricula=date.today(),
                )
                self.db.add(matricula)
        except IntegrityError as e:
            logger.error(f"Erro de integridade ao criar matrícula: {e}")
            raise ConflictError("Erro de integridade ao criar a matrícula.") from e

        self.db.refresh(matricula)
        logger.info(f"Matrícula criada. ID: {matricula.id}")
        return to_read(matricula)

    def buscar_por_id(self, matricula_id: int) -> MatriculaRead:
        return to_read(self._obter(matricula_id))

    def listar(self, aluno_id: Optional[int] = None, status: Optional[StatusMatricula] = None,
               skip: int = 0, limit: int = 100) -> List[MatriculaRead]:
        query = self.db.query(Matricula).options(
            joinedload(Matricula.aluno),
            joinedload(Matricula.plano)
        )
        if aluno_id is not None:
            query = query.filter(Matricula.aluno_id == aluno_id)
        if status is not None:
            query = query.filter(Matricula.status == status)
        matriculas = query.order_by(Matricula.data_inicio.desc(), Matricula.id.desc()).offset(skip).limit(limit).all()
        return [to_read(m) for m in matriculas]

    def alterar_status(self, matricula_id: int, novo_status: StatusMatricula) -> MatriculaRead:
        logger.info(f"Alterando status da matrícula {matricula_id} para {novo_status.value}")
        with transacao(self.db):
            matricula = self._obter(matricula_id)
            if matricula.status == novo_status:
                raise ConflictError(f"Matrícula já está com status {novo_status.value}.")
            if novo_status == StatusMatricula.ATIVA:
                self._validar_sem_matricula_ativa(matricula.aluno_id, excluir_id=matricula.id)
            matricula.status = novo_status

        self.db.refresh(matricula)
        return to_read(matricula)

    def _obter(self, matricula_id: int) -> Matricula:
        matricula = self.db.query(Matricula).filter(Matricula.id == matricula_id).first()
        if matricula is None:
            raise NotFoundError(f"Matrícula não encontrada com ID: {matricula_id}")
        return matricula

    def _validar_sem_matricula_ativa(self, aluno_id: int, excluir_id: Optional[int] = None):
        query = self.db.query(Matricula.id).filter(
            Matricula.aluno_id == aluno_id,
            Matricula.status == StatusMatricula.ATIVA
        )
        if excluir_id is not None:
            query = query.filter(Matricula.id != excluir_id)
        if query.first() is not None:
            raise ConflictError("Aluno já possui uma matrícula ativa.")


def expirar_vencidas(db: Session, data_referencia: date, dry_run: bool = False) -> List[Matricula]:
    """
    Marca como VENCIDA toda matrícula ATIVA cujo fim é anterior à data de referência.
    Retorna as matrículas afetadas; com dry_run nada é gravado.
    """
    vencidas = db.query(Matricula).options(joinedload(Matricula.aluno)).filter(
        Matricula.status == StatusMatricula.ATIVA,
        Matricula.data_fim < data_referencia
    ).all()

    if dry_run or not vencidas:
        return vencidas

    with transacao(db):
        for matricula in vencidas:
            matricula.status = StatusMatricula.VENCIDA
    return vencidas
