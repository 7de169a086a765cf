"""Conversão dos resultados dos serviços em respostas HTTP."""

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from src.api.schemas.forms import SubmitOutcome
from src.api.services.backoffice_client import BackofficeAPIError
from src.api.services.form_service import transport_error_message


def outcome_response(outcome: SubmitOutcome, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """
    200/201 em caso de sucesso; 422 para erros de formulário; o status da API
    do back office para erros 4xx dela; 502 para falhas de transporte.
    """
    if outcome.success:
        status_code = success_status
    elif outcome.upstream_status is None and outcome.issues:
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif outcome.upstream_status is not None and 400 <= outcome.upstream_status < 500:
        status_code = outcome.upstream_status
    else:
        status_code = status.HTTP_502_BAD_GATEWAY

    return JSONResponse(status_code=status_code, content=outcome.model_dump(mode="json"))


def raise_backoffice_error(error: BackofficeAPIError, fallback: str):
    """Repassa erros 4xx da API; o resto vira 502."""
    if error.status_code is not None and 400 <= error.status_code < 500:
        status_code = error.status_code
    else:
        status_code = status.HTTP_502_BAD_GATEWAY
    raise HTTPException(status_code=status_code, detail=transport_error_message(error, fallback)) from error
