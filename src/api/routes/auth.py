from fastapi import APIRouter

from src.api.routes.responses import raise_backoffice_error
from src.api.schemas.login import LoginRequest, LoginResponse
from src.api.services.backoffice_client import BackofficeAPIError
from src.core.dependencies import GetBackofficeClientDep

router = APIRouter(tags=["Auth"], prefix="/auth")


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, client: GetBackofficeClientDep):
    """
    Repassa o login para a API do back office.

    A interface guarda o token devolvido e o envia como
    'Authorization: Bearer <token>' nas próximas chamadas.
    """
    try:
        return await client.login(credentials.username, credentials.senha)
    except BackofficeAPIError as e:
        raise_backoffice_error(e, "Erro ao fazer login. Tente novamente.")
