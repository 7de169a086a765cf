"""
Rotas de listagem, consulta e cadastro/edição.

Os quatro cadastros têm o mesmo formato de rota; o router de cada um é
montado por build_records_router.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Query, status

from src.api.routes.responses import outcome_response, raise_backoffice_error
from src.api.schemas.pagination import Page
from src.api.services.backoffice_client import RECORD_MODELS, BackofficeAPIError
from src.api.services.form_service import ENTITY_LABELS
from src.api.services.normalization import to_form_record
from src.core.dependencies import GetBackofficeClientDep, GetFormServiceDep, GetSessionDep
from src.core.utils.enums import EntityType


def build_records_router(entity_type: EntityType, prefix: str, tag: str) -> APIRouter:
    # tag = nome no plural, usado também nas mensagens de erro
    router = APIRouter(tags=[tag], prefix=prefix)
    out_model = RECORD_MODELS[entity_type]
    label = ENTITY_LABELS[entity_type].lower()

    @router.get("", response_model=Page[out_model])
    async def list_records(
        session: GetSessionDep,
        client: GetBackofficeClientDep,
        page: int = Query(0, ge=0),
        size: Optional[int] = Query(None, ge=1, le=1000),
    ):
        try:
            return await client.list_page(entity_type, session, page=page, size=size)
        except BackofficeAPIError as e:
            raise_backoffice_error(e, f"Erro ao carregar {tag.lower()}")

    @router.get("/{record_id}", response_model=out_model)
    async def get_record(record_id: int, session: GetSessionDep, client: GetBackofficeClientDep):
        try:
            return await client.get(entity_type, session, record_id)
        except BackofficeAPIError as e:
            raise_backoffice_error(e, f"Erro ao carregar dados do {label}")

    @router.get("/{record_id}/form")
    async def get_form_record(record_id: int, session: GetSessionDep, client: GetBackofficeClientDep):
        """Valores para preencher o formulário de edição."""
        try:
            record = await client.get(entity_type, session, record_id)
        except BackofficeAPIError as e:
            raise_backoffice_error(e, f"Erro ao carregar dados do {label}")
        return to_form_record(entity_type, record)

    @router.post("")
    async def create_record(
        session: GetSessionDep,
        service: GetFormServiceDep,
        record: dict[str, Any] = Body(...),
    ):
        outcome = await service.submit(entity_type, record, session)
        return outcome_response(outcome, success_status=status.HTTP_201_CREATED)

    @router.put("/{record_id}")
    async def update_record(
        record_id: int,
        session: GetSessionDep,
        service: GetFormServiceDep,
        record: dict[str, Any] = Body(...),
    ):
        outcome = await service.submit(entity_type, record, session, record_id=record_id)
        return outcome_response(outcome)

    return router


customers_router = build_records_router(EntityType.CUSTOMER, "/customers", "Clientes")
suppliers_router = build_records_router(EntityType.SUPPLIER, "/suppliers", "Fornecedores")
employees_router = build_records_router(EntityType.EMPLOYEE, "/employees", "Funcionários")
products_router = build_records_router(EntityType.PRODUCT, "/products", "Produtos")
