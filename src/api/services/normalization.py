"""
Monta o payload enviado à API a partir de um formulário já validado.

- CPF/CNPJ: só dígitos (texto)
- telefone e CEP: só dígitos, como inteiro (0 se vazio)
- salário e preços: float (0 se ilegível)
- data de admissão: dd/mm/yyyy -> ISO-8601
- opcionais em branco: None
"""

from src.api.schemas.base_schema import AppBaseModel
from src.api.schemas.records import (
    CustomerPayload,
    EmployeePayload,
    ProductPayload,
    SupplierPayload,
)
from src.core.utils.enums import EntityType, PersonKind
from src.core.utils.normalizers import digits_to_int, dmy_to_iso, empty_to_none, iso_to_dmy, number_or_zero
from src.core.utils.validators import only_digits
from src.core.validation.pipeline import FormRecord


def _person_fields(record: FormRecord) -> dict:
    return {
        "nome": record.get("nome"),
        "tipoPessoa": record.get("tipoPessoa") or PersonKind.FISICA,
        "cpfcnpj": only_digits(record.get("cpfcnpj")),
        "ie": empty_to_none(record.get("ie")),
        "email": empty_to_none(record.get("email")),
        "telefone": digits_to_int(record.get("telefone")),
        "endereco": empty_to_none(record.get("endereco")),
        "bairro": empty_to_none(record.get("bairro")),
        "cidade": empty_to_none(record.get("cidade")),
        "uf": empty_to_none(record.get("uf")),
        "cep": digits_to_int(record.get("cep")),
    }


def build_customer_payload(record: FormRecord) -> CustomerPayload:
    return CustomerPayload.model_validate({
        **_person_fields(record),
        "genero": empty_to_none(record.get("genero")),
    })


def build_supplier_payload(record: FormRecord) -> SupplierPayload:
    return SupplierPayload.model_validate({
        **_person_fields(record),
        "tipoFornecedor": empty_to_none(record.get("tipoFornecedor")),
    })


def build_employee_payload(record: FormRecord) -> EmployeePayload:
    return EmployeePayload.model_validate({
        **_person_fields(record),
        # Funcionário é sempre pessoa física
        "tipoPessoa": PersonKind.FISICA,
        "dataAdmissao": dmy_to_iso(record.get("dataAdmissao") or ""),
        "cargo": record.get("cargo"),
        "salario": number_or_zero(record.get("salario")),
    })


def build_product_payload(record: FormRecord) -> ProductPayload:
    return ProductPayload.model_validate({
        "nome": record.get("nome"),
        "descricao": record.get("descricao"),
        "precoCusto": number_or_zero(record.get("precoCusto")),
        "precoVenda": number_or_zero(record.get("precoVenda")),
    })


PAYLOAD_BUILDERS = {
    EntityType.CUSTOMER: build_customer_payload,
    EntityType.SUPPLIER: build_supplier_payload,
    EntityType.EMPLOYEE: build_employee_payload,
    EntityType.PRODUCT: build_product_payload,
}


def build_payload(entity_type: EntityType | str, record: FormRecord) -> AppBaseModel:
    return PAYLOAD_BUILDERS[EntityType(entity_type)](record)


# ═══════════════════════════════════════════════════════════
# CAMINHO INVERSO: registro da API -> formulário de edição
# ═══════════════════════════════════════════════════════════

def _text(value) -> str:
    return "" if value is None else str(value)


def _person_form(record, default_kind: PersonKind) -> dict:
    return {
        "nome": record.nome or "",
        "tipoPessoa": record.tipo_pessoa or default_kind.value,
        "cpfcnpj": _text(record.cpf_cnpj),
        "ie": _text(record.ie),
        "email": _text(record.email),
        "telefone": _text(record.telefone),
        "endereco": _text(record.endereco),
        "bairro": _text(record.bairro),
        "cidade": _text(record.cidade),
        "uf": _text(record.uf),
        "cep": _text(record.cep),
    }


def to_form_record(entity_type: EntityType | str, record) -> dict:
    """Preenche o formulário de edição com os dados vindos da API."""
    entity_type = EntityType(entity_type)

    if entity_type is EntityType.CUSTOMER:
        return {**_person_form(record, PersonKind.FISICA), "genero": _text(record.genero)}

    if entity_type is EntityType.SUPPLIER:
        return {**_person_form(record, PersonKind.JURIDICA), "tipoFornecedor": _text(record.tipo_fornecedor)}

    if entity_type is EntityType.EMPLOYEE:
        form = _person_form(record, PersonKind.FISICA)
        form.pop("tipoPessoa")
        form.pop("ie")
        return {
            **form,
            "cargo": _text(record.cargo),
            "salario": _text(record.salario),
            "dataAdmissao": iso_to_dmy(record.data_admissao),
        }

    return {
        "nome": record.nome,
        "descricao": _text(record.descricao),
        "precoCusto": record.preco_custo or 0,
        "precoVenda": record.preco_venda or 0,
    }
