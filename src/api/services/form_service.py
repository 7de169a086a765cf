"""
Envio de formulários de cadastro
================================
validação -> checagem de duplicidade (clientes) -> normalização ->
criação/atualização na API do back office.
"""

import logging
from typing import Optional

from src.api.schemas.forms import SubmitOutcome
from src.api.services.backoffice_client import BackofficeAPIError, BackofficeClient
from src.api.services.duplicate_check import (
    check_duplicate_identifier,
    duplicate_found,
    duplicate_issue,
    duplicate_notification,
)
from src.api.services.normalization import build_payload
from src.core.session import SessionContext
from src.core.utils.enums import EntityType
from src.core.validation import validate
from src.core.validation.pipeline import FormRecord

logger = logging.getLogger(__name__)

SESSION_EXPIRED = "Sessão expirada. Faça login novamente."

ENTITY_LABELS: dict[EntityType, str] = {
    EntityType.CUSTOMER: "Cliente",
    EntityType.SUPPLIER: "Fornecedor",
    EntityType.EMPLOYEE: "Funcionário",
    EntityType.PRODUCT: "Produto",
}


def transport_error_message(error: BackofficeAPIError, fallback: str) -> str:
    if error.status_code == 401:
        return SESSION_EXPIRED
    return error.message or fallback


class FormService:
    def __init__(
        self,
        client: BackofficeClient,
        duplicate_checked: frozenset[EntityType] = frozenset({EntityType.CUSTOMER}),
    ):
        self.client = client
        self.duplicate_checked = duplicate_checked

    async def submit(
        self,
        entity_type: EntityType | str,
        record: FormRecord,
        session: SessionContext,
        record_id: Optional[int] = None,
    ) -> SubmitOutcome:
        """
        Valida e envia um formulário.

        Args:
            entity_type: Cadastro do formulário
            record: Valores brutos do formulário
            session: Sessão do usuário (token repassado à API)
            record_id: Id do registro em edição; None para novo cadastro

        Returns:
            SubmitOutcome com a mensagem para a notificação e os erros por campo
        """
        entity_type = EntityType(entity_type)
        label = ENTITY_LABELS[entity_type]
        is_editing = record_id is not None

        result = validate(record, entity_type)
        if not result.is_valid:
            logger.info(f"📝 {label}: formulário inválido ({len(result.issues)} erro(s))")
            return SubmitOutcome(
                success=False,
                message=result.first_message,
                field_errors=result.field_errors,
                issues=result.issues,
            )

        if entity_type in self.duplicate_checked:
            check = await check_duplicate_identifier(
                self.client, session, entity_type, record.get("cpfcnpj"), own_id=record_id
            )
            if duplicate_found(check):
                person_kind = record.get("tipoPessoa")
                result = result.with_issue(duplicate_issue(person_kind))
                logger.info(f"🔁 {label}: documento já cadastrado")
                return SubmitOutcome(
                    success=False,
                    message=duplicate_notification(person_kind),
                    field_errors=result.field_errors,
                    issues=result.issues,
                )

        payload = build_payload(entity_type, record)
        action = "atualizar" if is_editing else "cadastrar"

        try:
            if is_editing:
                data = await self.client.update(entity_type, session, record_id, payload)
            else:
                data = await self.client.create(entity_type, session, payload)
        except BackofficeAPIError as e:
            logger.error(f"❌ Erro ao {action} {label.lower()}: {e.status_code} {e.message}")
            return SubmitOutcome(
                success=False,
                message=transport_error_message(e, f"Erro ao {action} {label.lower()}"),
                upstream_status=e.status_code,
            )

        done = "atualizado" if is_editing else "cadastrado"
        logger.info(f"✅ {label} {done}")
        return SubmitOutcome(
            success=True,
            message=f"{label} {done} com sucesso!",
            data=data,
        )
