# -*- coding: utf-8 -*-
"""
Enumerações compartilhadas entre modelos e schemas.
"""

import enum


class TipoUsuario(str, enum.Enum):
    ALUNO = "ALUNO"
    INSTRUTOR = "INSTRUTOR"
    ADMINISTRADOR = "ADMINISTRADOR"


class StatusMatricula(str, enum.Enum):
    ATIVA = "ATIVA"
    SUSPENSA = "SUSPENSA"
    CANCELADA = "CANCELADA"
    VENCIDA = "VENCIDA"


class TipoTreino(str, enum.Enum):
    FORCA = "FORCA"
    CARDIO = "CARDIO"
    FUNCIONAL = "FUNCIONAL"
    FLEXIBILIDADE = "FLEXIBILIDADE"


class NivelDificuldade(str, enum.Enum):
    INICIANTE = "INICIANTE"
    INTERMEDIARIO = "INTERMEDIARIO"
    AVANCADO = "AVANCADO"


class StatusTreino(str, enum.Enum):
    ATIVO = "ATIVO"
    INATIVO = "INATIVO"
    CONCLUIDO = "CONCLUIDO"


class GrupoMuscular(str, enum.Enum):
    PEITO = "PEITO"
    COSTAS = "COSTAS"
    PERNAS = "PERNAS"
    OMBROS = "OMBROS"
    BRACOS = "BRACOS"
    ABDOMEN = "ABDOMEN"
    CORPO_INTEIRO = "CORPO_INTEIRO"


class TipoExercicio(str, enum.Enum):
    FORCA = "FORCA"
    CARDIO = "CARDIO"
    ALONGAMENTO = "ALONGAMENTO"


class Objetivo(str, enum.Enum):
    EMAGRECIMENTO = "EMAGRECIMENTO"
    HIPERTROFIA = "HIPERTROFIA"
    CONDICIONAMENTO = "CONDICIONAMENTO"
    REABILITACAO = "REABILITACAO"
