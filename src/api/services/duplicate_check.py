"""
Checagem de CPF/CNPJ já cadastrado
==================================
Consulta de melhor esforço: busca uma página grande do cadastro e compara os
documentos limpos. Se a consulta falhar, o envio segue como se não houvesse
duplicidade; a unicidade definitiva é responsabilidade da API.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from pydantic import ValidationError

from src.api.services.backoffice_client import BackofficeAPIError, BackofficeClient
from src.core.config import config
from src.core.session import SessionContext
from src.core.utils.enums import EntityType, PersonKind
from src.core.utils.validators import only_digits
from src.core.validation.pipeline import ValidationIssue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateCheckOk:
    found: bool


@dataclass(frozen=True)
class DuplicateCheckFailed:
    reason: str


DuplicateCheckResult = Union[DuplicateCheckOk, DuplicateCheckFailed]


def has_duplicate_identifier(
    records: Iterable,
    identifier: str,
    own_id: Optional[int | str] = None,
) -> bool:
    """
    True se algum registro (exceto o próprio, na edição) tiver o mesmo documento.

    A comparação é feita só com os dígitos: '123.456.789-01' == '12345678901'.
    """
    target = only_digits(identifier)
    if not target:
        return False

    for record in records:
        if own_id is not None and record.id is not None and str(record.id) == str(own_id):
            continue
        if only_digits(record.cpf_cnpj) == target:
            return True
    return False


async def check_duplicate_identifier(
    client: BackofficeClient,
    session: SessionContext,
    entity_type: EntityType,
    identifier: str,
    own_id: Optional[int | str] = None,
) -> DuplicateCheckResult:
    try:
        page = await client.list_page(
            entity_type, session, page=0, size=config.DUPLICATE_CHECK_PAGE_SIZE
        )
    except BackofficeAPIError as e:
        return DuplicateCheckFailed(reason=e.message or f"HTTP {e.status_code}")
    except ValidationError as e:
        # Listagem fora do formato esperado (linha incompleta, corpo não JSON)
        return DuplicateCheckFailed(reason=f"listagem inválida: {e.error_count()} erro(s)")

    return DuplicateCheckOk(found=has_duplicate_identifier(page.content, identifier, own_id))


def duplicate_found(result: DuplicateCheckResult) -> bool:
    """Falha na consulta conta como 'não encontrado'."""
    if isinstance(result, DuplicateCheckFailed):
        logger.warning(f"⚠️ Erro ao verificar CPF/CNPJ, seguindo sem checagem: {result.reason}")
        return False
    return result.found


def duplicate_issue(person_kind: PersonKind | str | None) -> ValidationIssue:
    label = "CNPJ" if person_kind == PersonKind.JURIDICA else "CPF"
    return ValidationIssue(field="cpfcnpj", message=f"Este {label} já está cadastrado")


def duplicate_notification(person_kind: PersonKind | str | None) -> str:
    label = "CNPJ" if person_kind == PersonKind.JURIDICA else "CPF"
    return f"Este {label} já está cadastrado no sistema"
