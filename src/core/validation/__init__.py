from .pipeline import FormSchema, ValidationIssue, ValidationResult
from .forms import FORM_SCHEMAS, validate

__all__ = [
    'FormSchema',
    'ValidationIssue',
    'ValidationResult',
    'FORM_SCHEMAS',
    'validate',
]
