# -*- coding: utf-8 -*-
"""
Conversão entre o modelo Aluno e seus schemas de transferência.
"""
from typing import List

from akdemia.models.aluno import Aluno
from akdemia.schemas.aluno import AlunoCreate, AlunoDetalhe, AlunoRead, AlunoUpdate

# Únicos campos que a atualização parcial pode tocar
CAMPOS_ATUALIZAVEIS = ("nome", "email", "cpf", "telefone", "tipo")


def to_read(aluno: Aluno) -> AlunoDetalhe:
    detalhe = AlunoDetalhe.model_validate(aluno)
    detalhe.matriculas_ids = [matricula.id for matricula in aluno.matriculas]
    detalhe.treinos_ids = [treino.id for treino in aluno.treinos]
    detalhe.avaliacoes_ids = [avaliacao.id for avaliacao in aluno.avaliacoes]
    return detalhe


def to_read_simple(aluno: Aluno) -> AlunoRead:
    # Sem relacionamentos, evita carregar as coleções
    return AlunoRead.model_validate(aluno)


def to_read_simple_list(alunos: List[Aluno]) -> List[AlunoRead]:
    return [to_read_simple(aluno) for aluno in alunos]


def to_entity_for_creation(dados: AlunoCreate, numero_matricula: str) -> Aluno:
    return Aluno(
        nome=dados.nome,
        email=dados.email,
        cpf=dados.cpf,
        telefone=dados.telefone,
        tipo=dados.tipo,
        numero_matricula=numero_matricula,
        ativo=True,
    )


def update_entity(aluno: Aluno, dados: AlunoUpdate) -> Aluno:
    """
    Mescla parcial: campos None em `dados` não alteram o aluno.
    Matrícula, datas de auditoria e status ativo nunca passam por aqui.
    """
    for campo in CAMPOS_ATUALIZAVEIS:
        valor = getattr(dados, campo)
        if valor is not None:
            setattr(aluno, campo, valor)
    return aluno
