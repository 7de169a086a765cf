"""
Pipeline de validação de formulários
====================================
Cada formulário é descrito por uma lista ordenada de campos (cada um com sua
cadeia de checagens) seguida de uma lista ordenada de refinamentos, que olham
o registro inteiro.

Regras de execução:
    - Campos na ordem de declaração; dentro de um campo, a primeira checagem
      que falha encerra a cadeia daquele campo.
    - Refinamentos só rodam quando nenhum campo falhou.
    - Nada aqui lança exceção por dado inválido: o resultado é sempre um
      ValidationResult.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, computed_field

from src.core.utils.enums import EntityType

FormRecord = Mapping[str, Any]

# Recebe o valor bruto do campo e devolve a mensagem de erro (ou None)
FieldCheck = Callable[[Any], Optional[str]]


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


# Recebe o registro inteiro
Refinement = Callable[[FormRecord], Optional[ValidationIssue]]


class ValidationResult(BaseModel):
    field_errors: dict[str, str] = {}
    issues: list[ValidationIssue] = []

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def first_message(self) -> str | None:
        """Mensagem exibida na notificação (a primeira da lista)."""
        return self.issues[0].message if self.issues else None

    def with_issue(self, issue: ValidationIssue) -> "ValidationResult":
        """Cópia do resultado com um erro extra (ex.: documento duplicado)."""
        field_errors = dict(self.field_errors)
        field_errors.setdefault(issue.field, issue.message)
        return ValidationResult(field_errors=field_errors, issues=[*self.issues, issue])


@dataclass(frozen=True)
class FieldSpec:
    name: str
    checks: tuple[FieldCheck, ...] = ()

    def check(self, record: FormRecord) -> Optional[ValidationIssue]:
        value = record.get(self.name)
        for check in self.checks:
            message = check(value)
            if message is not None:
                return ValidationIssue(field=self.name, message=message)
        return None


def form_field(name: str, *checks: FieldCheck) -> FieldSpec:
    return FieldSpec(name=name, checks=checks)


@dataclass(frozen=True)
class FormSchema:
    entity_type: EntityType
    fields: tuple[FieldSpec, ...]
    refinements: tuple[Refinement, ...] = field(default_factory=tuple)

    @property
    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def validate(self, record: FormRecord) -> ValidationResult:
        issues: list[ValidationIssue] = []

        for spec in self.fields:
            issue = spec.check(record)
            if issue is not None:
                issues.append(issue)

        if not issues:
            for refinement in self.refinements:
                issue = refinement(record)
                if issue is not None:
                    issues.append(issue)

        field_errors: dict[str, str] = {}
        for issue in issues:
            # Só a primeira mensagem de cada campo é exibida
            field_errors.setdefault(issue.field, issue.message)

        return ValidationResult(field_errors=field_errors, issues=issues)
