from typing import Any, Optional

from pydantic import BaseModel

from src.core.validation import ValidationIssue


class SubmitOutcome(BaseModel):
    """
    Resultado de um envio de formulário ou de uma ação de status.

    `message` é o que a interface mostra na notificação: a mensagem de sucesso,
    o primeiro erro de validação ou o erro devolvido pela API.
    """
    success: bool
    message: str
    field_errors: dict[str, str] = {}
    issues: list[ValidationIssue] = []
    data: Optional[Any] = None
    # Status HTTP devolvido pela API do back office, quando a falha veio de lá
    upstream_status: Optional[int] = None
