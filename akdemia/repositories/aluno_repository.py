# -*- coding: utf-8 -*-
"""
Consultas de persistência da entidade Aluno.

Cada consulta é uma função explícita com o predicado documentado.
Nenhuma função aqui faz commit: o escopo transacional pertence ao serviço.
"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from sqlalchemy import Integer, cast, func
from sqlalchemy.orm import Session

from akdemia.enums import TipoUsuario
from akdemia.models.aluno import Aluno

PREFIXO_MATRICULA = "AKD"
ESCAPE_LIKE = "\\"


def _padrao_substring(termo: str) -> str:
    """
    Monta o padrão ILIKE tratando % e _ do termo como literais.

    No SQLite o ILIKE só ignora maiúsculas em letras ASCII ("JOÃO" não casa
    com "João"); no PostgreSQL a comparação cobre todo o Unicode.
    """
    termo = termo.replace(ESCAPE_LIKE, ESCAPE_LIKE * 2).replace("%", ESCAPE_LIKE + "%").replace("_", ESCAPE_LIKE + "_")
    return f"%{termo}%"


class AlunoRepository:

    def __init__(self, db: Session):
        self.db = db

    # --- Buscas básicas ---

    def buscar_por_id(self, aluno_id: int) -> Optional[Aluno]:
        return self.db.query(Aluno).filter(Aluno.id == aluno_id).first()

    def buscar_ativo_por_id(self, aluno_id: int) -> Optional[Aluno]:
        """id = :id AND ativo = true"""
        return self.db.query(Aluno).filter(Aluno.id == aluno_id, Aluno.ativo.is_(True)).first()

    def buscar_por_email(self, email: str) -> Optional[Aluno]:
        return self.db.query(Aluno).filter(Aluno.email == email).order_by(Aluno.ativo.desc(), Aluno.id.desc()).first()

    def buscar_por_cpf(self, cpf: str) -> Optional[Aluno]:
        return self.db.query(Aluno).filter(Aluno.cpf == cpf).order_by(Aluno.ativo.desc(), Aluno.id.desc()).first()

    def buscar_por_numero_matricula(self, numero_matricula: str) -> Optional[Aluno]:
        return self.db.query(Aluno).filter(Aluno.numero_matricula == numero_matricula).first()

    # --- Verificações de existência ---

    def existe_por_id(self, aluno_id: int) -> bool:
        return self.db.query(Aluno.id).filter(Aluno.id == aluno_id).first() is not None

    def existe_email_ativo(self, email: str, excluir_id: Optional[int] = None) -> bool:
        """email = :email AND ativo = true [AND id <> :excluir_id]"""
        query = self.db.query(Aluno.id).filter(Aluno.email == email, Aluno.ativo.is_(True))
        if excluir_id is not None:
            query = query.filter(Aluno.id != excluir_id)
        return query.first() is not None

    def existe_cpf_ativo(self, cpf: str, excluir_id: Optional[int] = None) -> bool:
        """cpf = :cpf AND ativo = true [AND id <> :excluir_id]"""
        query = self.db.query(Aluno.id).filter(Aluno.cpf == cpf, Aluno.ativo.is_(True))
        if excluir_id is not None:
            query = query.filter(Aluno.id != excluir_id)
        return query.first() is not None

    # --- Listagens ---

    def listar_ativos(self) -> List[Aluno]:
        return self.db.query(Aluno).filter(Aluno.ativo.is_(True)).order_by(Aluno.nome, Aluno.id).all()

    def listar_ativos_paginado(self, skip: int, limit: int) -> Tuple[int, List[Aluno]]:
        query = self.db.query(Aluno).filter(Aluno.ativo.is_(True))
        total = query.count()
        alunos = query.order_by(Aluno.nome, Aluno.id).offset(skip).limit(limit).all()
        return total, alunos

    def listar_inativos(self) -> List[Aluno]:
        return self.db.query(Aluno).filter(Aluno.ativo.is_(False)).order_by(Aluno.nome, Aluno.id).all()

    def listar_por_tipo(self, tipo: TipoUsuario) -> List[Aluno]:
        """tipo = :tipo AND ativo = true"""
        return self.db.query(Aluno).filter(
            Aluno.tipo == tipo,
            Aluno.ativo.is_(True)
        ).order_by(Aluno.nome, Aluno.id).all()

    def buscar_por_nome(self, nome: str) -> List[Aluno]:
        """nome ILIKE '%:nome%' AND ativo = true"""
        return self.db.query(Aluno).filter(
            Aluno.nome.ilike(_padrao_substring(nome), escape=ESCAPE_LIKE),
            Aluno.ativo.is_(True)
        ).order_by(Aluno.nome, Aluno.id).all()

    def buscar_com_filtros(self, nome: Optional[str], tipo: Optional[TipoUsuario],
                           skip: int, limit: int) -> Tuple[int, List[Aluno]]:
        """(:nome IS NULL OR nome ILIKE '%:nome%') AND (:tipo IS NULL OR tipo = :tipo) AND ativo = true"""
        query = self.db.query(Aluno).filter(Aluno.ativo.is_(True))
        if nome:
            query = query.filter(Aluno.nome.ilike(_padrao_substring(nome), escape=ESCAPE_LIKE))
        if tipo is not None:
            query = query.filter(Aluno.tipo == tipo)
        total = query.count()
        alunos = query.order_by(Aluno.nome, Aluno.id).offset(skip).limit(limit).all()
        return total, alunos

    def listar_sem_matricula(self) -> List[Aluno]:
        """ativo = true AND nenhuma matrícula vinculada"""
        return self.db.query(Aluno).filter(
            Aluno.ativo.is_(True),
            ~Aluno.matriculas.any()
        ).order_by(Aluno.nome, Aluno.id).all()

    def listar_cadastrados_no_periodo(self, inicio: datetime, fim: datetime) -> List[Aluno]:
        return self.db.query(Aluno).filter(
            Aluno.data_cadastro.between(inicio, fim)
        ).order_by(Aluno.data_cadastro, Aluno.id).all()

    def listar_desativados_no_periodo(self, inicio: datetime, fim: datetime) -> List[Aluno]:
        return self.db.query(Aluno).filter(
            Aluno.ativo.is_(False),
            Aluno.data_desativacao.between(inicio, fim)
        ).order_by(Aluno.data_desativacao, Aluno.id).all()

    # --- Contadores ---

    def contar_ativos(self) -> int:
        return self.db.query(func.count(Aluno.id)).filter(Aluno.ativo.is_(True)).scalar()

    def contar_ativos_por_tipo(self, tipo: TipoUsuario) -> int:
        return self.db.query(func.count(Aluno.id)).filter(Aluno.tipo == tipo, Aluno.ativo.is_(True)).scalar()

    def contar_todos(self) -> int:
        return self.db.query(func.count(Aluno.id)).scalar()

    def contar_inativos(self) -> int:
        return self.db.query(func.count(Aluno.id)).filter(Aluno.ativo.is_(False)).scalar()

    def contar_ativos_agrupado_por_tipo(self) -> Dict[TipoUsuario, int]:
        linhas = self.db.query(Aluno.tipo, func.count(Aluno.id)).filter(
            Aluno.ativo.is_(True)
        ).group_by(Aluno.tipo).all()
        return {tipo: total for tipo, total in linhas}

    # --- Geração de matrícula ---

    def proximo_numero_matricula(self) -> int:
        """MAX(sufixo numérico de numero_matricula LIKE 'AKD%') + 1, ou 1 se não houver nenhum."""
        sufixo = cast(func.substr(Aluno.numero_matricula, len(PREFIXO_MATRICULA) + 1), Integer)
        maior = self.db.query(func.max(sufixo)).filter(
            Aluno.numero_matricula.like(f"{PREFIXO_MATRICULA}%")
        ).scalar()
        return (maior or 0) + 1

    # --- Escrita ---

    def adicionar(self, aluno: Aluno) -> Aluno:
        self.db.add(aluno)
        self.db.flush()
        return aluno

    def desativar(self, aluno_id: int, quando: datetime) -> int:
        """UPDATE ... SET ativo = false, data_desativacao = :quando WHERE id = :id AND ativo = true"""
        return self.db.query(Aluno).filter(
            Aluno.id == aluno_id,
            Aluno.ativo.is_(True)
        ).update({
            Aluno.ativo: False,
            Aluno.data_desativacao: quando,
            Aluno.data_atualizacao: quando,
        }, synchronize_session=False)

    def reativar(self, aluno_id: int, quando: datetime) -> int:
        """UPDATE ... SET ativo = true, data_desativacao = NULL WHERE id = :id AND ativo = false"""
        return self.db.query(Aluno).filter(
            Aluno.id == aluno_id,
            Aluno.ativo.is_(False)
        ).update({
            Aluno.ativo: True,
            Aluno.data_desativacao: None,
            Aluno.data_atualizacao: quando,
        }, synchronize_session=False)
