"""
Contexto de sessão do usuário logado.

O token é só repassado para a API do back office; este serviço não emite nem
valida tokens.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class SessionContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    usuario_id: Optional[int] = None
    username: Optional[str] = None
    funcionario_id: Optional[int] = None

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def from_authorization(cls, authorization: Optional[str]) -> Optional["SessionContext"]:
        """'Bearer <token>' -> SessionContext; None se o cabeçalho for inválido."""
        if not authorization:
            return None
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return cls(token=token.strip())
