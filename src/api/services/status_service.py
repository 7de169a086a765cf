"""
Ações de status das listagens: ativar/inativar produto e fornecedor,
demitir/readmitir funcionário.

A API só expõe "alternar"; o status atual é lido antes para montar a
mensagem certa (e, no caso do funcionário, escolher a ação).
"""

import logging

from src.api.schemas.forms import SubmitOutcome
from src.api.services.backoffice_client import BackofficeAPIError, BackofficeClient
from src.api.services.form_service import transport_error_message
from src.core.session import SessionContext
from src.core.utils.enums import EntityType, RecordStatus

logger = logging.getLogger(__name__)


class StatusService:
    def __init__(self, client: BackofficeClient):
        self.client = client

    async def toggle_product_status(self, session: SessionContext, product_id: int) -> SubmitOutcome:
        try:
            product = await self.client.get(EntityType.PRODUCT, session, product_id)
            await self.client.toggle_product_status(session, product_id)
        except BackofficeAPIError as e:
            logger.error(f"❌ Erro ao alterar status do produto {product_id}: {e.message}")
            return SubmitOutcome(
                success=False,
                message=transport_error_message(e, "Erro ao alterar status do produto"),
                upstream_status=e.status_code,
            )

        verb = "inativado" if product.status == RecordStatus.ATIVO else "ativado"
        return SubmitOutcome(success=True, message=f"Produto {verb} com sucesso!")

    async def toggle_supplier_status(self, session: SessionContext, supplier_id: int) -> SubmitOutcome:
        try:
            supplier = await self.client.get(EntityType.SUPPLIER, session, supplier_id)
            await self.client.toggle_supplier_status(session, supplier_id)
        except BackofficeAPIError as e:
            logger.error(f"❌ Erro ao alterar status do fornecedor {supplier_id}: {e.message}")
            return SubmitOutcome(
                success=False,
                message=transport_error_message(e, "Erro ao alterar status do fornecedor"),
                upstream_status=e.status_code,
            )

        verb = "inativado" if supplier.status == RecordStatus.ATIVO else "ativado"
        return SubmitOutcome(success=True, message=f"Fornecedor {verb} com sucesso!")

    async def dismiss_employee(self, session: SessionContext, employee_id: int) -> SubmitOutcome:
        return await self._employment_action(session, employee_id, dismiss=True)

    async def readmit_employee(self, session: SessionContext, employee_id: int) -> SubmitOutcome:
        return await self._employment_action(session, employee_id, dismiss=False)

    async def toggle_employment(self, session: SessionContext, employee_id: int) -> SubmitOutcome:
        """Demite quem está ativo e readmite quem tem data de demissão."""
        try:
            employee = await self.client.get(EntityType.EMPLOYEE, session, employee_id)
        except BackofficeAPIError as e:
            return SubmitOutcome(
                success=False,
                message=transport_error_message(e, "Erro ao processar solicitação"),
                upstream_status=e.status_code,
            )
        return await self._employment_action(session, employee_id, dismiss=not employee.is_dismissed)

    async def _employment_action(self, session: SessionContext, employee_id: int, dismiss: bool) -> SubmitOutcome:
        try:
            if dismiss:
                response = await self.client.dismiss_employee(session, employee_id)
            else:
                response = await self.client.readmit_employee(session, employee_id)
        except BackofficeAPIError as e:
            logger.error(f"❌ Erro ao {'demitir' if dismiss else 'readmitir'} funcionário {employee_id}: {e.message}")
            return SubmitOutcome(
                success=False,
                message=transport_error_message(e, "Erro ao processar solicitação"),
                upstream_status=e.status_code,
            )

        # A API costuma responder com a mensagem pronta em texto puro
        if isinstance(response, str) and response:
            message = response
        else:
            message = "Funcionário demitido com sucesso!" if dismiss else "Funcionário readmitido com sucesso!"
        return SubmitOutcome(success=True, message=message)
