from pydantic import BaseModel, Field

from .base_schema import AppBaseModel


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    senha: str = Field(..., min_length=1)


class LoginResponse(AppBaseModel):
    token: str
    type: str = "Bearer"
    username: str
    usuario_id: int
    funcionario_id: int | None = None
