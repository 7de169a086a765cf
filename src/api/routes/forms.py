from typing import Any

from fastapi import APIRouter, Body

from src.core.utils.enums import EntityType
from src.core.validation import ValidationResult, validate

router = APIRouter(tags=["Forms"], prefix="/forms")


@router.post("/{entity_type}/validate", response_model=ValidationResult)
def validate_form(entity_type: EntityType, record: dict[str, Any] = Body(...)):
    """Valida o formulário sem enviar nada à API (uso: validação ao digitar)."""
    return validate(record, entity_type)
