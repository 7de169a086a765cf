"""
Cliente da API REST do back office
==================================
Todas as leituras e gravações de cadastros passam por aqui. O token da
sessão é repassado como Bearer; este serviço não guarda estado entre
chamadas.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

import httpx

from src.api.schemas.base_schema import AppBaseModel
from src.api.schemas.login import LoginResponse
from src.api.schemas.pagination import Page
from src.api.schemas.records import CustomerOut, EmployeeOut, ProductOut, SupplierOut
from src.core.config import config
from src.core.middleware.correlation import get_correlation_id
from src.core.session import SessionContext
from src.core.utils.enums import EntityType

logger = logging.getLogger(__name__)

RESOURCE_PATHS: dict[EntityType, str] = {
    EntityType.CUSTOMER: "/clientes",
    EntityType.SUPPLIER: "/fornecedores",
    EntityType.EMPLOYEE: "/funcionarios",
    EntityType.PRODUCT: "/api/produtos",
}

RECORD_MODELS: dict[EntityType, type[AppBaseModel]] = {
    EntityType.CUSTOMER: CustomerOut,
    EntityType.SUPPLIER: SupplierOut,
    EntityType.EMPLOYEE: EmployeeOut,
    EntityType.PRODUCT: ProductOut,
}


class BackofficeAPIError(Exception):
    """Falha de transporte ou resposta de erro da API do back office"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BackofficeClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.BACKOFFICE_API_URL).rstrip("/")
        self.timeout = httpx.Timeout(timeout or config.HTTP_TIMEOUT)
        self._transport = transport

    @asynccontextmanager
    async def get_client(self):
        """Context manager para cliente HTTP"""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            yield client

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return response.text or None
        if isinstance(body, dict):
            return body.get("message")
        return None

    async def _request(
        self,
        method: str,
        path: str,
        session: Optional[SessionContext] = None,
        **kwargs,
    ) -> Any:
        headers = {
            "Content-Type": "application/json",
            "x-correlation-id": get_correlation_id(),
        }
        if session is not None:
            headers.update(session.auth_headers())

        try:
            async with self.get_client() as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"⏱️ Timeout em [{method}] {path}: {e}")
            raise BackofficeAPIError("Tempo de resposta da API esgotado") from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Erro de conexão em [{method}] {path}: {e}")
            raise BackofficeAPIError("Não foi possível conectar à API do back office") from e

        logger.info(f"🔗 [{method}] {path} → {response.status_code}")

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.warning(f"⚠️ API respondeu {response.status_code}: {message}")
            raise BackofficeAPIError(message or "", status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # Algumas ações (demitir/readmitir) respondem texto puro
            return response.text

    # ═══════════════════════════════════════════════════════════
    # AUTENTICAÇÃO
    # ═══════════════════════════════════════════════════════════

    async def login(self, username: str, senha: str) -> LoginResponse:
        data = await self._request(
            "POST", "/api/auth/login", json={"username": username, "senha": senha}
        )
        return LoginResponse.model_validate(data)

    # ═══════════════════════════════════════════════════════════
    # CADASTROS
    # ═══════════════════════════════════════════════════════════

    async def list_page(
        self,
        entity_type: EntityType,
        session: SessionContext,
        page: int = 0,
        size: Optional[int] = None,
    ) -> Page:
        """Busca uma página (a primeira é 0) do cadastro."""
        data = await self._request(
            "GET",
            RESOURCE_PATHS[entity_type],
            session,
            params={"page": page, "size": size or config.DEFAULT_PAGE_SIZE},
        )
        return Page[RECORD_MODELS[entity_type]].model_validate(data or {})

    async def get(self, entity_type: EntityType, session: SessionContext, record_id: int):
        data = await self._request("GET", f"{RESOURCE_PATHS[entity_type]}/{record_id}", session)
        return RECORD_MODELS[entity_type].model_validate(data)

    async def create(self, entity_type: EntityType, session: SessionContext, payload: AppBaseModel) -> Any:
        return await self._request(
            "POST", RESOURCE_PATHS[entity_type], session, json=payload.to_wire()
        )

    async def update(
        self,
        entity_type: EntityType,
        session: SessionContext,
        record_id: int,
        payload: AppBaseModel,
    ) -> Any:
        return await self._request(
            "PUT", f"{RESOURCE_PATHS[entity_type]}/{record_id}", session, json=payload.to_wire()
        )

    # ═══════════════════════════════════════════════════════════
    # AÇÕES DE STATUS
    # ═══════════════════════════════════════════════════════════

    async def toggle_product_status(self, session: SessionContext, product_id: int) -> Any:
        return await self._request("POST", f"/api/produtos/status/{product_id}", session)

    async def toggle_supplier_status(self, session: SessionContext, supplier_id: int) -> Any:
        return await self._request("PUT", f"/fornecedores/status/{supplier_id}", session)

    async def dismiss_employee(self, session: SessionContext, employee_id: int) -> Any:
        return await self._request("PUT", f"/funcionarios/demitir/{employee_id}", session)

    async def readmit_employee(self, session: SessionContext, employee_id: int) -> Any:
        return await self._request("PUT", f"/funcionarios/readmitir/{employee_id}", session)
