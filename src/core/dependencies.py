# src/core/dependencies.py

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException

from src.api.services.backoffice_client import BackofficeClient
from src.api.services.form_service import FormService
from src.api.services.status_service import StatusService
from src.core.session import SessionContext


def get_session(
        authorization: Annotated[Optional[str], Header()] = None,
) -> SessionContext:
    """Sessão montada a partir do cabeçalho 'Authorization: Bearer <token>'."""
    session = SessionContext.from_authorization(authorization)

    if session is None:
        raise HTTPException(
            status_code=401,
            detail="Sessão expirada. Faça login novamente.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return session


@lru_cache
def get_backoffice_client() -> BackofficeClient:
    return BackofficeClient()


def get_form_service(
        client: Annotated[BackofficeClient, Depends(get_backoffice_client)],
) -> FormService:
    return FormService(client)


def get_status_service(
        client: Annotated[BackofficeClient, Depends(get_backoffice_client)],
) -> StatusService:
    return StatusService(client)


GetSessionDep = Annotated[SessionContext, Depends(get_session)]
GetBackofficeClientDep = Annotated[BackofficeClient, Depends(get_backoffice_client)]
GetFormServiceDep = Annotated[FormService, Depends(get_form_service)]
GetStatusServiceDep = Annotated[StatusService, Depends(get_status_service)]
