# akdemia/schemas/aluno.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Dict, List, Optional
from datetime import datetime

from akdemia.enums import TipoUsuario


class AlunoBase(BaseModel):
    nome: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    cpf: str = Field(..., pattern=r"^\d{11}$")
    telefone: str = Field(..., max_length=15)
    tipo: TipoUsuario


class AlunoCreate(AlunoBase):
    pass


class AlunoUpdate(BaseModel):
    # None = campo não informado, mantém o valor atual
    nome: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    cpf: Optional[str] = Field(None, pattern=r"^\d{11}$")
    telefone: Optional[str] = Field(None, max_length=15)
    tipo: Optional[TipoUsuario] = None

    @field_validator('email', 'cpf', 'telefone', mode='before')
    @classmethod
    def empty_str_to_none(cls, v):
        """Converte strings vazias para None antes da validação principal."""
        if isinstance(v, str) and v.strip() == '':
            return None
        return v


class AlunoRead(BaseModel):
    """Representação simples: apenas campos planos."""
    id: int
    nome: str
    email: str
    cpf: str
    telefone: str
    tipo: TipoUsuario
    numero_matricula: str
    ativo: bool
    data_cadastro: Optional[datetime] = None
    data_atualizacao: Optional[datetime] = None
    data_desativacao: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AlunoDetalhe(AlunoRead):
    """Representação completa: inclui os IDs dos registros relacionados."""
    matriculas_ids: List[int] = []
    treinos_ids: List[int] = []
    avaliacoes_ids: List[int] = []


class AlunoPaginated(BaseModel):
    total: int
    alunos: List[AlunoRead]


class AlunoEstatisticas(BaseModel):
    ativos: int
    inativos: int
    total: int
    ativos_por_tipo: Dict[TipoUsuario, int]
