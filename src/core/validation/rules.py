"""
Checagens reutilizáveis dos formulários.

Checagens de campo recebem o valor bruto e devolvem a mensagem de erro ou
None. Refinamentos recebem o registro inteiro e devolvem um ValidationIssue.
"""

import enum
from typing import Any, Optional, Type

from src.core.utils.enums import PersonKind
from src.core.utils.normalizers import MAX_YEAR, MIN_YEAR, parse_dmy, parse_number
from src.core.utils.validators import validate_identifier
from src.core.validation.pipeline import FieldCheck, FormRecord, Refinement, ValidationIssue

INVALID_VALUE = "Valor inválido"
INVALID_NUMBER = "Valor numérico inválido"


# ═══════════════════════════════════════════════════════════
# CHECAGENS DE CAMPO
# ═══════════════════════════════════════════════════════════

def required_text(message: str) -> FieldCheck:
    def check(value: Any) -> Optional[str]:
        if not isinstance(value, str) or len(value) < 1:
            return message
        return None
    return check


def required_value(message: str) -> FieldCheck:
    """Presença para campos que aceitam texto ou número (ex.: salário)."""
    def check(value: Any) -> Optional[str]:
        if value is None or isinstance(value, bool):
            return message
        if isinstance(value, str) and len(value) < 1:
            return message
        return None
    return check


def optional_text(max_length: Optional[int] = None, message: Optional[str] = None) -> FieldCheck:
    def check(value: Any) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, str):
            return INVALID_VALUE
        if max_length is not None and len(value) > max_length:
            return message or f"Máximo de {max_length} caracteres"
        return None
    return check


def one_of(choices: Type[enum.Enum], message: Optional[str] = None) -> FieldCheck:
    allowed = [choice.value for choice in choices]
    default_message = f"Valor inválido. Esperado: {', '.join(allowed)}"

    def check(value: Any) -> Optional[str]:
        raw = value.value if isinstance(value, enum.Enum) else value
        if raw not in allowed:
            return message or default_message
        return None
    return check


def positive_number(message: str) -> FieldCheck:
    """Campo numérico (int/float/Decimal ou texto numérico) maior que zero."""
    def check(value: Any) -> Optional[str]:
        number = parse_number(value)
        if number is None:
            return INVALID_NUMBER
        if number <= 0:
            return message
        return None
    return check


def positive_decimal_text(message: str) -> FieldCheck:
    """Texto ou número que, lido como decimal, precisa ser maior que zero (ex.: salário)."""
    def check(value: Any) -> Optional[str]:
        number = parse_number(value)
        if number is None or number <= 0:
            return message
        return None
    return check


def dmy_date(message: str) -> FieldCheck:
    """
    dd/mm/yyyy com mês 1-12, dia 1-31 e ano 1900-2100.

    Não há checagem de dias por mês nem de ano bissexto: '31/02/2024' passa.
    """
    def check(value: Any) -> Optional[str]:
        parts = parse_dmy(value)
        if parts is None:
            return message

        day, month, year = parts
        if not 1 <= month <= 12:
            return message
        if not 1 <= day <= 31:
            return message
        if not MIN_YEAR <= year <= MAX_YEAR:
            return message
        return None
    return check


# ═══════════════════════════════════════════════════════════
# REFINAMENTOS (registro inteiro)
# ═══════════════════════════════════════════════════════════

def identifier_matches_person_kind(
    message: str,
    field: str = "cpfcnpj",
    kind_field: str = "tipoPessoa",
) -> Refinement:
    """CPF para pessoa física, CNPJ para pessoa jurídica."""
    def refine(record: FormRecord) -> Optional[ValidationIssue]:
        try:
            kind = PersonKind(record.get(kind_field))
        except ValueError:
            # Tipo inválido já foi apontado pela checagem do próprio campo
            return None

        if not validate_identifier(record.get(field), kind):
            return ValidationIssue(field=field, message=message)
        return None
    return refine


def individual_identifier(message: str, field: str = "cpfcnpj") -> Refinement:
    """Cadastros sem tipo de pessoa (funcionários) são sempre pessoa física."""
    def refine(record: FormRecord) -> Optional[ValidationIssue]:
        if not validate_identifier(record.get(field), PersonKind.FISICA):
            return ValidationIssue(field=field, message=message)
        return None
    return refine


def not_less_than(field: str, other: str, message: str) -> Refinement:
    """record[field] >= record[other]; o erro vai para `field`."""
    def refine(record: FormRecord) -> Optional[ValidationIssue]:
        value = parse_number(record.get(field))
        reference = parse_number(record.get(other))
        if value is None or reference is None:
            return None

        if value < reference:
            return ValidationIssue(field=field, message=message)
        return None
    return refine
