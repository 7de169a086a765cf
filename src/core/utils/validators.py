"""
Validadores de documentos brasileiros
=====================================
Dígitos verificadores de CPF (pessoa física) e CNPJ (pessoa jurídica).

Os algoritmos são fixados pela Receita Federal: qualquer desvio gera uma
noção de validade incompatível com os documentos reais.
"""

import re

from src.core.utils.enums import PersonKind

# Só dígitos ASCII: \d em str aceita dígitos Unicode (ex.: fullwidth)
_NON_DIGITS = re.compile(r"[^0-9]")
_CPF_DIGITS = re.compile(r"[0-9]{11}")
_CNPJ_DIGITS = re.compile(r"[0-9]{14}")

CPF_LENGTH = 11
CNPJ_LENGTH = 14


def only_digits(value: str | None) -> str:
    """Remove tudo que não for dígito ('123.456.789-01' -> '12345678901')."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", str(value))


def _all_same_digit(digits: str) -> bool:
    return len(set(digits)) == 1


def _cpf_check_digit(digits: str, first_weight: int) -> int:
    # Pesos decrescentes a partir de first_weight até 2
    total = sum(int(digit) * (first_weight - i) for i, digit in enumerate(digits))
    remainder = total * 10 % 11
    return 0 if remainder in (10, 11) else remainder


def validate_cpf(cpf: str) -> bool:
    """
    Valida CPF brasileiro.

    Args:
        cpf: String contendo apenas dígitos (11 caracteres)

    Returns:
        True se o CPF for válido, False caso contrário

    Examples:
        >>> validate_cpf('52998224725')
        True
        >>> validate_cpf('11111111111')
        False
    """
    if not isinstance(cpf, str) or not _CPF_DIGITS.fullmatch(cpf):
        return False

    # CPFs com todos os dígitos iguais passam no cálculo, mas não existem
    if _all_same_digit(cpf):
        return False

    if _cpf_check_digit(cpf[:9], 10) != int(cpf[9]):
        return False

    if _cpf_check_digit(cpf[:10], 11) != int(cpf[10]):
        return False

    return True


def _cnpj_check_digit(base: str) -> int:
    """
    Calcula um dígito verificador do CNPJ.

    O peso começa em len(base) - 7 (5 para a base de 12 dígitos, 6 para a de
    13), decresce a cada posição e volta para 9 quando fica abaixo de 2.
    """
    weight = len(base) - 7
    total = 0
    for digit in base:
        total += int(digit) * weight
        weight -= 1
        if weight < 2:
            weight = 9

    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def validate_cnpj(cnpj: str) -> bool:
    """
    Valida CNPJ brasileiro.

    Args:
        cnpj: String contendo apenas dígitos (14 caracteres)

    Returns:
        True se o CNPJ for válido, False caso contrário

    Examples:
        >>> validate_cnpj('11444777000161')
        True
        >>> validate_cnpj('11111111111111')
        False
    """
    if not isinstance(cnpj, str) or not _CNPJ_DIGITS.fullmatch(cnpj):
        return False

    if _all_same_digit(cnpj):
        return False

    if _cnpj_check_digit(cnpj[:12]) != int(cnpj[12]):
        return False

    # A base do segundo dígito inclui o primeiro dígito verificador
    if _cnpj_check_digit(cnpj[:13]) != int(cnpj[13]):
        return False

    return True


def validate_identifier(value: str | None, person_kind: PersonKind | str) -> bool:
    """
    Limpa o documento e valida conforme o tipo de pessoa.

    O tamanho é conferido antes do cálculo dos dígitos: um CNPJ válido
    informado como pessoa física é rejeitado.
    """
    digits = only_digits(value)
    kind = PersonKind(person_kind)

    if kind is PersonKind.FISICA:
        return len(digits) == CPF_LENGTH and validate_cpf(digits)

    return len(digits) == CNPJ_LENGTH and validate_cnpj(digits)
