# schemas/records.py
"""
Cadastros como a API do back office os devolve (leitura) e como ela espera
recebê-los (escrita). Os nomes seguem o contrato da API, em camelCase.
"""

from typing import Optional

from .base_schema import AppBaseModel
from src.core.utils.enums import Gender, PersonKind


# --- Leitura ---

class PersonOut(AppBaseModel):
    id: int
    status: Optional[str] = None
    nome: str
    categoria: Optional[str] = None
    tipo_pessoa: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    ie: Optional[str] = None
    email: Optional[str] = None
    telefone: Optional[int] = None
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    cep: Optional[int] = None
    data_cadastro: Optional[str] = None


class CustomerOut(PersonOut):
    genero: Optional[str] = None


class SupplierOut(PersonOut):
    tipo_fornecedor: Optional[str] = None


class EmployeeOut(PersonOut):
    data_admissao: Optional[str] = None
    cargo: Optional[str] = None
    salario: Optional[float] = None
    data_demissao: Optional[str] = None

    @property
    def is_dismissed(self) -> bool:
        return bool(self.data_demissao)


class ProductOut(AppBaseModel):
    id: int
    status: Optional[str] = None
    nome: str
    descricao: Optional[str] = None
    qntd_estoque: Optional[int] = None
    preco_custo: Optional[float] = None
    preco_venda: Optional[float] = None


# --- Escrita (payload já normalizado) ---

class PersonPayload(AppBaseModel):
    nome: str
    tipo_pessoa: PersonKind
    cpfcnpj: str  # só dígitos
    ie: Optional[str] = None
    email: Optional[str] = None
    telefone: int = 0
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    cep: int = 0


class CustomerPayload(PersonPayload):
    genero: Optional[Gender] = None


class SupplierPayload(PersonPayload):
    tipo_fornecedor: Optional[str] = None


class EmployeePayload(PersonPayload):
    data_admissao: str  # ISO-8601
    cargo: str
    salario: float = 0.0


class ProductPayload(AppBaseModel):
    nome: str
    descricao: str
    preco_custo: float
    preco_venda: float
