"""
Testes do Pipeline de Validação de Formulários
==============================================
Campos obrigatórios, enumerações, refinamentos e ordem dos erros
"""

import pytest

from src.core.utils.enums import EntityType
from src.core.validation import FORM_SCHEMAS, validate


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def customer_record():
    """Formulário de cliente válido (pessoa física)"""
    return {
        "nome": "João Silva",
        "tipoPessoa": "FISICA",
        "cpfcnpj": "529.982.247-25",
        "ie": "",
        "email": "joao@example.com",
        "telefone": "(11) 98765-4321",
        "genero": "MASCULINO",
        "endereco": "Rua das Flores, 10",
        "bairro": "Centro",
        "cidade": "São Paulo",
        "uf": "SP",
        "cep": "01310-100",
    }


@pytest.fixture
def supplier_record():
    return {
        "nome": "Distribuidora Alfa",
        "tipoPessoa": "JURIDICA",
        "cpfcnpj": "11.444.777/0001-61",
        "tipoFornecedor": "Bebidas",
    }


@pytest.fixture
def employee_record():
    return {
        "nome": "Maria Souza",
        "cpfcnpj": "111.444.777-35",
        "email": "maria@example.com",
        "telefone": "(21) 3333-4444",
        "cep": "20040-020",
        "cargo": "Caixa",
        "salario": "2500.50",
        "dataAdmissao": "15/03/2024",
    }


@pytest.fixture
def product_record():
    return {
        "nome": "Café 500g",
        "descricao": "Café torrado e moído",
        "precoCusto": 10.00,
        "precoVenda": 15.90,
    }


# ═══════════════════════════════════════════════════════════
# TESTES DE CLIENTE / FORNECEDOR
# ═══════════════════════════════════════════════════════════

class TestPersonForms:

    def test_valid_customer(self, customer_record):
        result = validate(customer_record, EntityType.CUSTOMER)

        assert result.is_valid
        assert result.issues == []
        assert result.field_errors == {}
        assert result.first_message is None

    def test_valid_supplier_with_only_required_fields(self, supplier_record):
        """Campos opcionais ausentes não geram erro"""
        assert validate(supplier_record, "supplier").is_valid

    def test_invalid_cpf_attaches_to_identifier(self, customer_record):
        customer_record["cpfcnpj"] = "529.982.247-26"
        result = validate(customer_record, EntityType.CUSTOMER)

        assert [(i.field, i.message) for i in result.issues] == [("cpfcnpj", "CPF/CNPJ inválido")]
        assert result.field_errors == {"cpfcnpj": "CPF/CNPJ inválido"}

    def test_cnpj_rejected_for_individual(self, customer_record):
        customer_record["cpfcnpj"] = "11.444.777/0001-61"
        result = validate(customer_record, EntityType.CUSTOMER)

        assert result.field_errors == {"cpfcnpj": "CPF/CNPJ inválido"}

    def test_cnpj_accepted_for_entity(self, customer_record):
        customer_record["tipoPessoa"] = "JURIDICA"
        customer_record["cpfcnpj"] = "11.444.777/0001-61"

        assert validate(customer_record, EntityType.CUSTOMER).is_valid

    def test_missing_required_fields_in_declaration_order(self, customer_record):
        """Erros seguem a ordem dos campos: nome antes do documento"""
        customer_record["nome"] = ""
        customer_record["cpfcnpj"] = ""
        result = validate(customer_record, EntityType.CUSTOMER)

        assert [i.field for i in result.issues] == ["nome", "cpfcnpj"]
        assert result.first_message == "Nome é obrigatório"
        assert result.field_errors["cpfcnpj"] == "CPF/CNPJ é obrigatório"

    def test_refinement_skipped_while_fields_fail(self, customer_record):
        """Documento inválido não é apontado enquanto há erro de campo"""
        customer_record["cpfcnpj"] = "123"
        customer_record["nome"] = ""
        result = validate(customer_record, EntityType.CUSTOMER)

        assert [i.field for i in result.issues] == ["nome"]

    def test_invalid_enumerations(self, customer_record):
        customer_record["tipoPessoa"] = "OUTRO"
        customer_record["genero"] = ""
        result = validate(customer_record, EntityType.CUSTOMER)

        assert set(result.field_errors) == {"tipoPessoa", "genero"}
        assert "FISICA" in result.field_errors["tipoPessoa"]

    def test_uf_max_two_characters(self, customer_record):
        customer_record["uf"] = "SPX"
        result = validate(customer_record, EntityType.CUSTOMER)

        assert result.field_errors == {"uf": "UF deve ter no máximo 2 caracteres"}

    def test_supplier_type_required(self, supplier_record):
        supplier_record["tipoFornecedor"] = ""
        result = validate(supplier_record, EntityType.SUPPLIER)

        assert result.field_errors == {"tipoFornecedor": "O tipo de fornecedor é obrigatório"}

    def test_optional_field_with_wrong_type(self, supplier_record):
        supplier_record["email"] = 123
        result = validate(supplier_record, EntityType.SUPPLIER)

        assert result.field_errors == {"email": "Valor inválido"}

    def test_validation_is_idempotent(self, customer_record):
        customer_record["cpfcnpj"] = "000"
        customer_record["uf"] = "ABC"

        first = validate(customer_record, EntityType.CUSTOMER)
        second = validate(customer_record, EntityType.CUSTOMER)

        assert first == second
        assert first.issues == second.issues


# ═══════════════════════════════════════════════════════════
# TESTES DE FUNCIONÁRIO
# ═══════════════════════════════════════════════════════════

class TestEmployeeForm:

    def test_valid_employee(self, employee_record):
        assert validate(employee_record, EntityType.EMPLOYEE).is_valid

    def test_employee_is_always_individual(self, employee_record):
        employee_record["cpfcnpj"] = "11.444.777/0001-61"
        result = validate(employee_record, EntityType.EMPLOYEE)

        assert result.field_errors == {"cpfcnpj": "CPF inválido"}

    def test_required_employee_fields(self, employee_record):
        employee_record["cargo"] = ""
        employee_record["salario"] = ""
        employee_record["dataAdmissao"] = ""
        result = validate(employee_record, EntityType.EMPLOYEE)

        assert result.field_errors == {
            "cargo": "Cargo é obrigatório",
            "salario": "Salário é obrigatório",
            "dataAdmissao": "Data de admissão é obrigatória",
        }

    @pytest.mark.parametrize("salary", [3000, 2500.5, "3000"])
    def test_numeric_salary_is_accepted(self, employee_record, salary):
        """JSON pode trazer o salário como número"""
        employee_record["salario"] = salary

        assert validate(employee_record, EntityType.EMPLOYEE).is_valid

    @pytest.mark.parametrize("salary", [None, "", True])
    def test_missing_salary(self, employee_record, salary):
        employee_record["salario"] = salary
        result = validate(employee_record, EntityType.EMPLOYEE)

        assert result.field_errors == {"salario": "Salário é obrigatório"}

    @pytest.mark.parametrize("salary", ["0", "-10", "abc", "0.00", 0, -5])
    def test_salary_must_be_positive(self, employee_record, salary):
        employee_record["salario"] = salary
        result = validate(employee_record, EntityType.EMPLOYEE)

        assert result.field_errors == {"salario": "Salário deve ser maior que zero"}

    @pytest.mark.parametrize("date", [
        "2024-03-15",
        "15/3/2024",
        "15/03/24",
        "00/03/2024",
        "32/01/2024",
        "15/13/2024",
        "15/00/2024",
        "15/03/1899",
        "15/03/2101",
    ])
    def test_invalid_admission_dates(self, employee_record, date):
        employee_record["dataAdmissao"] = date
        result = validate(employee_record, EntityType.EMPLOYEE)

        assert result.field_errors == {"dataAdmissao": "Data inválida. Use o formato dd/mm/yyyy"}

    @pytest.mark.parametrize("date", ["01/01/1900", "31/12/2100", "31/02/2024", "31/04/2023"])
    def test_range_only_date_check(self, employee_record, date):
        """Só faixas são conferidas: 31/02 passa (sem checagem de dias por mês)"""
        employee_record["dataAdmissao"] = date

        assert validate(employee_record, EntityType.EMPLOYEE).is_valid


# ═══════════════════════════════════════════════════════════
# TESTES DE PRODUTO
# ═══════════════════════════════════════════════════════════

class TestProductForm:

    def test_valid_product(self, product_record):
        assert validate(product_record, EntityType.PRODUCT).is_valid

    def test_sale_price_lower_than_cost(self, product_record):
        product_record["precoCusto"] = 10.00
        product_record["precoVenda"] = 9.99
        result = validate(product_record, EntityType.PRODUCT)

        assert len(result.issues) == 1
        assert result.issues[0].field == "precoVenda"
        assert result.issues[0].message == "Preço de venda não pode ser menor que o preço de custo"

    def test_equal_prices_are_accepted(self, product_record):
        product_record["precoCusto"] = 10.00
        product_record["precoVenda"] = 10.00

        assert validate(product_record, EntityType.PRODUCT).is_valid

    def test_prices_must_be_positive(self, product_record):
        product_record["precoCusto"] = 0
        product_record["precoVenda"] = -1
        result = validate(product_record, EntityType.PRODUCT)

        assert result.field_errors == {
            "precoCusto": "Preço de custo deve ser maior que zero",
            "precoVenda": "Preço de venda deve ser maior que zero",
        }

    def test_non_numeric_price(self, product_record):
        product_record["precoCusto"] = "abc"
        result = validate(product_record, EntityType.PRODUCT)

        assert result.field_errors == {"precoCusto": "Valor numérico inválido"}


def test_every_entity_has_a_schema():
    assert set(FORM_SCHEMAS) == set(EntityType)


def test_unknown_entity_type_is_a_programming_error():
    with pytest.raises(ValueError):
        validate({}, "unknown")


def test_fullwidth_identifier_is_rejected():
    record = {"nome": "Ana", "tipoPessoa": "FISICA", "cpfcnpj": "５２９９８２２４７２５", "genero": "FEMININO"}

    result = validate(record, EntityType.CUSTOMER)

    assert result.field_errors == {"cpfcnpj": "CPF/CNPJ inválido"}


def test_fields_are_checked_in_declaration_order():
    assert FORM_SCHEMAS[EntityType.PRODUCT].field_names == ["nome", "descricao", "precoCusto", "precoVenda"]
    assert FORM_SCHEMAS[EntityType.EMPLOYEE].field_names[:2] == ["nome", "cpfcnpj"]
    assert FORM_SCHEMAS[EntityType.EMPLOYEE].field_names[-3:] == ["cargo", "salario", "dataAdmissao"]
