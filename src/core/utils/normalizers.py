"""
Conversões de valores de formulário
===================================
Os formulários chegam como texto; a API do back office espera números,
datas ISO e documentos só com dígitos.
"""

import re
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any, Optional

from src.core.utils.validators import only_digits

# Prefixo numérico, como o parseFloat do navegador ("12.5abc" -> 12.5)
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

DMY_DATE = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

# Faixa de anos aceita nos formulários (e suportada pela conversão de datas)
MIN_YEAR = 1900
MAX_YEAR = 2100


def parse_number(value: Any) -> Optional[float]:
    """
    Converte texto ou número para float.

    Returns:
        O número, ou None se o valor não começar com um número.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if not isinstance(value, str):
        return None

    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    return float(match.group(1))


def number_or_zero(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None else 0.0


def digits_to_int(value: Any) -> int:
    """'(11) 98765-4321' -> 11987654321; vazio ou sem dígitos -> 0."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    digits = only_digits(value if isinstance(value, str) else None)
    return int(digits) if digits else 0


def empty_to_none(value: Any) -> Any:
    """Campos opcionais em branco seguem como None, nunca como ''."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_dmy(value: str) -> Optional[tuple[int, int, int]]:
    """'15/03/2024' -> (15, 3, 2024). Não confere se o dia existe no mês."""
    if not isinstance(value, str):
        return None
    match = DMY_DATE.fullmatch(value)
    if not match:
        return None
    day, month, year = (int(part) for part in match.groups())
    return day, month, year


def dmy_to_iso(value: str, today: Optional[date] = None) -> str:
    """
    Converte dd/mm/yyyy para ISO-8601 (meia-noite).

    Datas que não existem no calendário avançam para o mês seguinte
    ('31/02/2024' -> '2024-03-02T00:00:00'), como o construtor de datas do
    navegador fazia. Valores ilegíveis ou com ano fora de MIN_YEAR..MAX_YEAR
    viram a data de hoje.
    """
    parts = parse_dmy(value)
    if parts is None or not 1 <= parts[1] <= 12 or not MIN_YEAR <= parts[2] <= MAX_YEAR:
        base = today or date.today()
        return datetime(base.year, base.month, base.day).isoformat()

    day, month, year = parts
    first_of_month = datetime(year, month, 1)
    return (first_of_month + timedelta(days=day - 1)).isoformat()


def iso_to_dmy(value: Optional[str]) -> str:
    """Caminho inverso, usado para preencher o formulário de edição."""
    if not value:
        return ""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return parsed.strftime("%d/%m/%Y")
