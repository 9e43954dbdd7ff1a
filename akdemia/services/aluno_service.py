# -*- coding: utf-8 -*-
"""
Regras de negócio do ciclo de vida do Aluno.

- Email e CPF únicos entre alunos ativos
- Número de matrícula gerado automaticamente (AKD001, AKD002, ...)
- Exclusão é sempre soft delete (desativação), com reativação possível
- Apenas alunos ativos aparecem nas listagens padrão
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from akdemia.database import transacao
from akdemia.enums import TipoUsuario
from akdemia.exceptions import ConflictError, InvalidInputError, NotFoundError
from akdemia.mappers import aluno_mapper
from akdemia.repositories.aluno_repository import PREFIXO_MATRICULA, AlunoRepository
from akdemia.schemas.aluno import (AlunoCreate, AlunoDetalhe, AlunoEstatisticas,
                                   AlunoPaginated, AlunoRead, AlunoUpdate)

logger = logging.getLogger(__name__)

CAMPOS_OBRIGATORIOS = {
    "nome": "Nome",
    "email": "Email",
    "cpf": "CPF",
    "telefone": "Telefone",
    "tipo": "Tipo de usuário",
}


def _agora() -> datetime:
    return datetime.now()


def _hora_local(instante: datetime) -> datetime:
    # Datas gravadas sem fuso (hora local); converte limites com offset
    if instante.tzinfo is not None:
        return instante.astimezone().replace(tzinfo=None)
    return instante


def formatar_numero_matricula(numero: int) -> str:
    return f"{PREFIXO_MATRICULA}{numero:03d}"


class AlunoService:

    def __init__(self, db: Session):
        self.db = db
        self.repository = AlunoRepository(db)

    # --- Criação ---

    def criar(self, dados: AlunoCreate) -> AlunoDetalhe:
        """
        Cria um novo aluno ativo com número de matrícula sequencial.

        Lança InvalidInputError se faltar campo obrigatório e ConflictError
        se já existir aluno ativo com o mesmo email ou CPF.
        """
        logger.info(f"Iniciando criação de novo aluno: {dados.email}")
        self._validar_dados_obrigatorios(dados)

        try:
            with transacao(self.db):
                self._validar_aluno_unico(dados.email, dados.cpf)
                numero_matricula = formatar_numero_matricula(self.repository.proximo_numero_matricula())

                aluno = aluno_mapper.to_entity_for_creation(dados, numero_matricula)
                agora = _agora()
                aluno.data_cadastro = agora
                aluno.data_atualizacao = agora
                self.repository.adicionar(aluno)
        except IntegrityError as e:
            logger.error(f"Erro de integridade ao salvar aluno: {e}")
            raise ConflictError("Conflito ao salvar aluno: email, CPF ou número de matrícula já em uso.") from e

        self.db.refresh(aluno)
        logger.info(f"Aluno criado com sucesso. ID: {aluno.id}, Matrícula: {aluno.numero_matricula}")
        return aluno_mapper.to_read(aluno)

    # --- Buscas ---

    def buscar_por_id(self, aluno_id: int, apenas_ativos: bool = False) -> AlunoDetalhe:
        if apenas_ativos:
            return self.buscar_ativo_por_id(aluno_id)
        logger.info(f"Buscando aluno por ID: {aluno_id}")
        aluno = self.repository.buscar_por_id(aluno_id)
        if aluno is None:
            raise NotFoundError(f"Aluno não encontrado com ID: {aluno_id}")
        return aluno_mapper.to_read(aluno)

    def buscar_ativo_por_id(self, aluno_id: int) -> AlunoDetalhe:
        logger.info(f"Buscando aluno ativo por ID: {aluno_id}")
        aluno = self.repository.buscar_ativo_por_id(aluno_id)
        if aluno is None:
            raise NotFoundError(f"Aluno ativo não encontrado com ID: {aluno_id}")
        return aluno_mapper.to_read(aluno)

    def buscar_por_email(self, email: str) -> AlunoDetalhe:
        logger.info(f"Buscando aluno por email: {email}")
        aluno = self.repository.buscar_por_email(email)
        if aluno is None:
            raise NotFoundError(f"Aluno não encontrado com email: {email}")
        return aluno_mapper.to_read(aluno)

    def buscar_por_cpf(self, cpf: str) -> AlunoDetalhe:
        logger.info(f"Buscando aluno por CPF: {cpf}")
        aluno = self.repository.buscar_por_cpf(cpf)
        if aluno is None:
            raise NotFoundError(f"Aluno não encontrado com CPF: {cpf}")
        return aluno_mapper.to_read(aluno)

    def buscar_por_matricula(self, numero_matricula: str) -> AlunoDetalhe:
        logger.info(f"Buscando aluno por matrícula: {numero_matricula}")
        aluno = self.repository.buscar_por_numero_matricula(numero_matricula)
        if aluno is None:
            raise NotFoundError(f"Aluno não encontrado com matrícula: {numero_matricula}")
        return aluno_mapper.to_read(aluno)

    # --- Listagens ---

    def listar_todos(self) -> List[AlunoRead]:
        logger.info("Listando todos os alunos ativos")
        return aluno_mapper.to_read_simple_list(self.repository.listar_ativos())

    def listar_com_paginacao(self, skip: int = 0, limit: int = 20) -> AlunoPaginated:
        logger.info(f"Listando alunos ativos com paginação: skip {skip}, limit {limit}")
        total, alunos = self.repository.listar_ativos_paginado(skip, limit)
        return AlunoPaginated(total=total, alunos=aluno_mapper.to_read_simple_list(alunos))

    def listar_por_tipo(self, tipo: TipoUsuario) -> List[AlunoRead]:
        logger.info(f"Listando alunos ativos por tipo: {tipo.value}")
        return aluno_mapper.to_read_simple_list(self.repository.listar_por_tipo(tipo))

    def listar_inativos(self) -> List[AlunoRead]:
        logger.info("Listando todos os alunos inativos")
        return aluno_mapper.to_read_simple_list(self.repository.listar_inativos())

    def buscar_por_nome(self, nome: str) -> List[AlunoRead]:
        logger.info(f"Buscando alunos ativos por nome: {nome}")
        return aluno_mapper.to_read_simple_list(self.repository.buscar_por_nome(nome))

    def buscar_com_filtros(self, nome: Optional[str] = None, tipo: Optional[TipoUsuario] = None,
                           skip: int = 0, limit: int = 20) -> AlunoPaginated:
        logger.info(f"Buscando alunos com filtros - Nome: {nome}, Tipo: {tipo}")
        total, alunos = self.repository.buscar_com_filtros(nome, tipo, skip, limit)
        return AlunoPaginated(total=total, alunos=aluno_mapper.to_read_simple_list(alunos))

    def buscar_sem_matricula(self) -> List[AlunoRead]:
        logger.info("Buscando alunos ativos sem matrícula")
        return aluno_mapper.to_read_simple_list(self.repository.listar_sem_matricula())

    def listar_cadastrados_no_periodo(self, inicio: datetime, fim: datetime) -> List[AlunoRead]:
        inicio, fim = self._validar_periodo(inicio, fim)
        logger.info(f"Listando alunos cadastrados entre {inicio} e {fim}")
        return aluno_mapper.to_read_simple_list(self.repository.listar_cadastrados_no_periodo(inicio, fim))

    def listar_desativados_no_periodo(self, inicio: datetime, fim: datetime) -> List[AlunoRead]:
        inicio, fim = self._validar_periodo(inicio, fim)
        logger.info(f"Listando alunos desativados entre {inicio} e {fim}")
        return aluno_mapper.to_read_simple_list(self.repository.listar_desativados_no_periodo(inicio, fim))

    # --- Atualização ---

    def atualizar(self, aluno_id: int, dados: AlunoUpdate) -> AlunoDetalhe:
        """
        Atualização parcial de um aluno ativo. Campos None são ignorados;
        email e CPF alterados são revalidados contra os demais alunos ativos.
        """
        logger.info(f"Iniciando atualização do aluno ID: {aluno_id}")

        try:
            with transacao(self.db):
                aluno = self.repository.buscar_ativo_por_id(aluno_id)
                if aluno is None:
                    raise NotFoundError(f"Aluno ativo não encontrado com ID: {aluno_id}")

                self._validar_sem_campos_em_branco(dados)
                self._validar_aluno_unico(dados.email, dados.cpf, excluir_id=aluno_id)
                aluno_mapper.update_entity(aluno, dados)
                aluno.data_atualizacao = _agora()
                self.db.flush()
        except IntegrityError as e:
            logger.error(f"Erro de integridade ao atualizar aluno {aluno_id}: {e}")
            raise ConflictError("Já existe outro aluno ativo com este email ou CPF.") from e

        self.db.refresh(aluno)
        logger.info(f"Aluno atualizado com sucesso. ID: {aluno_id}")
        return aluno_mapper.to_read(aluno)

    # --- Soft delete ---

    def desativar(self, aluno_id: int) -> None:
        logger.info(f"Iniciando desativação do aluno ID: {aluno_id}")
        if not self.repository.existe_por_id(aluno_id):
            raise NotFoundError(f"Aluno não encontrado com ID: {aluno_id}")

        with transacao(self.db):
            # Escrita condicional: só uma de duas desativações concorrentes afeta a linha
            afetados = self.repository.desativar(aluno_id, _agora())
            if afetados == 0:
                raise ConflictError(f"Aluno já está inativo. ID: {aluno_id}")

        logger.info(f"Aluno desativado com sucesso. ID: {aluno_id}")

    def reativar(self, aluno_id: int) -> AlunoDetalhe:
        logger.info(f"Iniciando reativação do aluno ID: {aluno_id}")
        if not self.repository.existe_por_id(aluno_id):
            raise NotFoundError(f"Aluno não encontrado com ID: {aluno_id}")

        try:
            with transacao(self.db):
                afetados = self.repository.reativar(aluno_id, _agora())
                if afetados == 0:
                    raise ConflictError(f"Aluno já está ativo. ID: {aluno_id}")
        except IntegrityError as e:
            # Email ou CPF reaproveitados por outro aluno ativo enquanto este estava inativo
            logger.error(f"Erro de integridade ao reativar aluno {aluno_id}: {e}")
            raise ConflictError("Já existe outro aluno ativo com este email ou CPF.") from e

        logger.info(f"Aluno reativado com sucesso. ID: {aluno_id}")
        return self.buscar_por_id(aluno_id)

    # --- Estatísticas ---

    def contar_ativos(self) -> int:
        logger.info("Contando alunos ativos")
        return self.repository.contar_ativos()

    def contar_por_tipo(self, tipo: TipoUsuario) -> int:
        logger.info(f"Contando alunos ativos por tipo: {tipo.value}")
        return self.repository.contar_ativos_por_tipo(tipo)

    def contar_todos(self) -> int:
        logger.info("Contando todos os alunos")
        return self.repository.contar_todos()

    def contar_inativos(self) -> int:
        logger.info("Contando alunos inativos")
        return self.repository.contar_inativos()

    def estatisticas(self) -> AlunoEstatisticas:
        agrupado = self.repository.contar_ativos_agrupado_por_tipo()
        return AlunoEstatisticas(
            ativos=self.contar_ativos(),
            inativos=self.contar_inativos(),
            total=self.contar_todos(),
            ativos_por_tipo={tipo: agrupado.get(tipo, 0) for tipo in TipoUsuario},
        )

    # --- Validações ---

    def _validar_dados_obrigatorios(self, dados: AlunoCreate):
        faltando = []
        for campo, rotulo in CAMPOS_OBRIGATORIOS.items():
            valor = getattr(dados, campo, None)
            if valor is None or (isinstance(valor, str) and not valor.strip()):
                faltando.append(rotulo)
        if faltando:
            raise InvalidInputError(f"Campos obrigatórios ausentes: {', '.join(faltando)}")

    def _validar_sem_campos_em_branco(self, dados: AlunoUpdate):
        em_branco = [rotulo for campo, rotulo in CAMPOS_OBRIGATORIOS.items()
                     if isinstance(getattr(dados, campo, None), str) and not getattr(dados, campo).strip()]
        if em_branco:
            raise InvalidInputError(f"Campos não podem ficar em branco: {', '.join(em_branco)}")

    def _validar_aluno_unico(self, email: Optional[str], cpf: Optional[str], excluir_id: Optional[int] = None):
        if email is not None and self.repository.existe_email_ativo(email, excluir_id):
            raise ConflictError(f"Já existe um aluno ativo com este email: {email}")
        if cpf is not None and self.repository.existe_cpf_ativo(cpf, excluir_id):
            raise ConflictError(f"Já existe um aluno ativo com este CPF: {cpf}")

    def _validar_periodo(self, inicio: datetime, fim: datetime):
        inicio, fim = _hora_local(inicio), _hora_local(fim)
        if inicio > fim:
            raise InvalidInputError("A data inicial deve ser anterior ou igual à data final.")
        return inicio, fim
