"""
Schemas dos formulários de cadastro
===================================
Ordem dos campos = ordem em que os erros aparecem para o usuário: nome,
documento, campos obrigatórios do cadastro, depois contato e endereço.
"""

from src.core.utils.enums import EntityType, Gender, PersonKind
from src.core.validation.pipeline import FormRecord, FormSchema, ValidationResult, form_field
from src.core.validation.rules import (
    dmy_date,
    identifier_matches_person_kind,
    individual_identifier,
    not_less_than,
    one_of,
    optional_text,
    positive_decimal_text,
    positive_number,
    required_value,
    required_text,
)

UF_MESSAGE = "UF deve ter no máximo 2 caracteres"


def _address_fields():
    return (
        form_field("endereco", optional_text()),
        form_field("bairro", optional_text()),
        form_field("cidade", optional_text()),
        form_field("uf", optional_text(max_length=2, message=UF_MESSAGE)),
        form_field("cep", optional_text()),
    )


CUSTOMER_FORM = FormSchema(
    entity_type=EntityType.CUSTOMER,
    fields=(
        form_field("nome", required_text("Nome é obrigatório")),
        form_field("tipoPessoa", one_of(PersonKind)),
        form_field("cpfcnpj", required_text("CPF/CNPJ é obrigatório")),
        form_field("ie", optional_text()),
        form_field("email", optional_text()),
        form_field("telefone", optional_text()),
        form_field("genero", one_of(Gender)),
        *_address_fields(),
    ),
    refinements=(
        identifier_matches_person_kind("CPF/CNPJ inválido"),
    ),
)

SUPPLIER_FORM = FormSchema(
    entity_type=EntityType.SUPPLIER,
    fields=(
        form_field("nome", required_text("Nome é obrigatório")),
        form_field("tipoPessoa", one_of(PersonKind)),
        form_field("cpfcnpj", required_text("CPF/CNPJ é obrigatório")),
        form_field("ie", optional_text()),
        form_field("email", optional_text()),
        form_field("telefone", optional_text()),
        form_field("tipoFornecedor", required_text("O tipo de fornecedor é obrigatório")),
        *_address_fields(),
    ),
    refinements=(
        identifier_matches_person_kind("CPF/CNPJ inválido"),
    ),
)

EMPLOYEE_FORM = FormSchema(
    entity_type=EntityType.EMPLOYEE,
    fields=(
        form_field("nome", required_text("Nome é obrigatório")),
        form_field("cpfcnpj", required_text("CPF é obrigatório")),
        form_field("email", optional_text()),
        form_field("telefone", optional_text()),
        *_address_fields(),
        form_field("cargo", required_text("Cargo é obrigatório")),
        form_field(
            "salario",
            required_value("Salário é obrigatório"),
            positive_decimal_text("Salário deve ser maior que zero"),
        ),
        form_field(
            "dataAdmissao",
            required_text("Data de admissão é obrigatória"),
            dmy_date("Data inválida. Use o formato dd/mm/yyyy"),
        ),
    ),
    refinements=(
        individual_identifier("CPF inválido"),
    ),
)

PRODUCT_FORM = FormSchema(
    entity_type=EntityType.PRODUCT,
    fields=(
        form_field("nome", required_text("Nome é obrigatório")),
        form_field("descricao", required_text("Descrição é obrigatória")),
        form_field("precoCusto", positive_number("Preço de custo deve ser maior que zero")),
        form_field("precoVenda", positive_number("Preço de venda deve ser maior que zero")),
    ),
    refinements=(
        not_less_than(
            "precoVenda",
            "precoCusto",
            "Preço de venda não pode ser menor que o preço de custo",
        ),
    ),
)

FORM_SCHEMAS: dict[EntityType, FormSchema] = {
    EntityType.CUSTOMER: CUSTOMER_FORM,
    EntityType.SUPPLIER: SUPPLIER_FORM,
    EntityType.EMPLOYEE: EMPLOYEE_FORM,
    EntityType.PRODUCT: PRODUCT_FORM,
}


def validate(record: FormRecord, entity_type: EntityType | str) -> ValidationResult:
    """
    Valida um formulário de cadastro.

    Args:
        record: Valores do formulário (nome do campo -> valor bruto)
        entity_type: Cadastro ao qual o formulário pertence

    Returns:
        ValidationResult com o primeiro erro de cada campo e a lista ordenada
        de todos os erros. Lista vazia significa formulário válido.
    """
    return FORM_SCHEMAS[EntityType(entity_type)].validate(record)
