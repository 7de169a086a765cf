"""
Testes do Envio de Formulários e Ações de Status
================================================
Fluxo completo com o cliente da API mockado
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.api.schemas.pagination import Page
from src.api.schemas.records import CustomerOut, EmployeeOut, ProductOut, SupplierOut
from src.api.services.backoffice_client import BackofficeAPIError
from src.api.services.form_service import FormService
from src.api.services.status_service import StatusService
from src.core.session import SessionContext
from src.core.utils.enums import EntityType


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def session():
    return SessionContext(token="token-123", usuario_id=1, username="admin", funcionario_id=5)


@pytest.fixture
def mock_client():
    """Mock do cliente da API do back office"""
    client = MagicMock()
    client.list_page = AsyncMock(return_value=Page[CustomerOut](content=[
        CustomerOut(id=10, nome="Ana", cpf_cnpj="529.982.247-25"),
    ]))
    client.create = AsyncMock(return_value={"id": 99})
    client.update = AsyncMock(return_value={"id": 10})
    return client


@pytest.fixture
def form_service(mock_client):
    return FormService(mock_client)


@pytest.fixture
def customer_record():
    return {
        "nome": "Carlos Lima",
        "tipoPessoa": "FISICA",
        "cpfcnpj": "111.444.777-35",
        "genero": "NAO_INFORMAR",
        "telefone": "(11) 98765-4321",
    }


def submit(service, *args, **kwargs):
    return asyncio.run(service.submit(*args, **kwargs))


# ═══════════════════════════════════════════════════════════
# TESTES DE ENVIO
# ═══════════════════════════════════════════════════════════

class TestSubmit:

    def test_create_customer(self, form_service, mock_client, session, customer_record):
        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.success is True
        assert outcome.message == "Cliente cadastrado com sucesso!"
        assert outcome.data == {"id": 99}

        entity_type, sent_session, payload = mock_client.create.await_args.args
        assert entity_type is EntityType.CUSTOMER
        assert sent_session is session
        assert payload.to_wire()["cpfcnpj"] == "11144477735"
        assert payload.to_wire()["telefone"] == 11987654321

    def test_invalid_form_is_not_sent(self, form_service, mock_client, session, customer_record):
        customer_record["cpfcnpj"] = "111.444.777-36"

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.success is False
        assert outcome.message == "CPF/CNPJ inválido"
        assert outcome.field_errors == {"cpfcnpj": "CPF/CNPJ inválido"}
        mock_client.list_page.assert_not_awaited()
        mock_client.create.assert_not_awaited()

    def test_duplicate_customer_blocks_submission(self, form_service, mock_client, session, customer_record):
        customer_record["cpfcnpj"] = "52998224725"

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.success is False
        assert outcome.message == "Este CPF já está cadastrado no sistema"
        assert outcome.field_errors == {"cpfcnpj": "Este CPF já está cadastrado"}
        mock_client.create.assert_not_awaited()

    def test_editing_owner_of_identifier(self, form_service, mock_client, session, customer_record):
        customer_record["cpfcnpj"] = "529.982.247-25"

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session, record_id=10)

        assert outcome.success is True
        assert outcome.message == "Cliente atualizado com sucesso!"
        mock_client.update.assert_awaited_once()
        assert mock_client.update.await_args.args[2] == 10

    def test_duplicate_check_failure_does_not_block(self, form_service, mock_client, session, customer_record):
        """Falha na consulta de duplicidade: segue o envio"""
        mock_client.list_page.side_effect = BackofficeAPIError("timeout")

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.success is True
        mock_client.create.assert_awaited_once()

    def test_suppliers_skip_duplicate_check(self, form_service, mock_client, session):
        record = {
            "nome": "Distribuidora Alfa",
            "tipoPessoa": "JURIDICA",
            "cpfcnpj": "11.444.777/0001-61",
            "tipoFornecedor": "Bebidas",
        }

        outcome = submit(form_service, EntityType.SUPPLIER, record, session)

        assert outcome.success is True
        assert outcome.message == "Fornecedor cadastrado com sucesso!"
        mock_client.list_page.assert_not_awaited()

    def test_backend_message_is_shown(self, form_service, mock_client, session, customer_record):
        mock_client.create.side_effect = BackofficeAPIError("CPF já cadastrado", status_code=409)

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.success is False
        assert outcome.message == "CPF já cadastrado"
        assert outcome.upstream_status == 409

    def test_generic_fallback_message(self, form_service, mock_client, session):
        mock_client.update.side_effect = BackofficeAPIError("", status_code=500)
        record = {"nome": "Café", "descricao": "500g", "precoCusto": 10, "precoVenda": 12}

        outcome = submit(form_service, EntityType.PRODUCT, record, session, record_id=3)

        assert outcome.message == "Erro ao atualizar produto"

    def test_expired_session(self, form_service, mock_client, session, customer_record):
        mock_client.create.side_effect = BackofficeAPIError("Unauthorized", status_code=401)

        outcome = submit(form_service, EntityType.CUSTOMER, customer_record, session)

        assert outcome.message == "Sessão expirada. Faça login novamente."


# ═══════════════════════════════════════════════════════════
# TESTES DE AÇÕES DE STATUS
# ═══════════════════════════════════════════════════════════

class TestStatusActions:

    @pytest.fixture
    def status_service(self, mock_client):
        mock_client.toggle_product_status = AsyncMock(return_value=None)
        mock_client.toggle_supplier_status = AsyncMock(return_value=None)
        mock_client.dismiss_employee = AsyncMock(return_value="Funcionário Maria demitido")
        mock_client.readmit_employee = AsyncMock(return_value=None)
        return StatusService(mock_client)

    def test_inactivate_product(self, status_service, mock_client, session):
        mock_client.get = AsyncMock(return_value=ProductOut(id=1, nome="Café", status="ATIVO"))

        outcome = asyncio.run(status_service.toggle_product_status(session, 1))

        assert outcome.message == "Produto inativado com sucesso!"
        mock_client.toggle_product_status.assert_awaited_once_with(session, 1)

    def test_activate_supplier(self, status_service, mock_client, session):
        mock_client.get = AsyncMock(return_value=SupplierOut(id=2, nome="Alfa", status="INATIVO"))

        outcome = asyncio.run(status_service.toggle_supplier_status(session, 2))

        assert outcome.message == "Fornecedor ativado com sucesso!"

    def test_status_error(self, status_service, mock_client, session):
        mock_client.get = AsyncMock(return_value=ProductOut(id=1, nome="Café", status="ATIVO"))
        mock_client.toggle_product_status.side_effect = BackofficeAPIError("", status_code=500)

        outcome = asyncio.run(status_service.toggle_product_status(session, 1))

        assert outcome.success is False
        assert outcome.message == "Erro ao alterar status do produto"

    def test_dismiss_uses_api_text(self, status_service, session):
        outcome = asyncio.run(status_service.dismiss_employee(session, 4))

        assert outcome.message == "Funcionário Maria demitido"

    def test_toggle_employment_readmits_dismissed(self, status_service, mock_client, session):
        mock_client.get = AsyncMock(return_value=EmployeeOut(
            id=4, nome="Maria", data_demissao="2024-06-01T00:00:00"
        ))

        outcome = asyncio.run(status_service.toggle_employment(session, 4))

        assert outcome.message == "Funcionário readmitido com sucesso!"
        mock_client.readmit_employee.assert_awaited_once_with(session, 4)
        mock_client.dismiss_employee.assert_not_awaited()
