from fastapi import APIRouter

from src.api.routes.responses import outcome_response
from src.core.dependencies import GetSessionDep, GetStatusServiceDep

router = APIRouter(tags=["Status"])


@router.post("/products/{product_id}/status")
async def toggle_product_status(product_id: int, session: GetSessionDep, service: GetStatusServiceDep):
    """Ativa um produto inativo ou inativa um ativo."""
    return outcome_response(await service.toggle_product_status(session, product_id))


@router.put("/suppliers/{supplier_id}/status")
async def toggle_supplier_status(supplier_id: int, session: GetSessionDep, service: GetStatusServiceDep):
    return outcome_response(await service.toggle_supplier_status(session, supplier_id))


@router.put("/employees/{employee_id}/dismiss")
async def dismiss_employee(employee_id: int, session: GetSessionDep, service: GetStatusServiceDep):
    return outcome_response(await service.dismiss_employee(session, employee_id))


@router.put("/employees/{employee_id}/readmit")
async def readmit_employee(employee_id: int, session: GetSessionDep, service: GetStatusServiceDep):
    return outcome_response(await service.readmit_employee(session, employee_id))


@router.put("/employees/{employee_id}/employment")
async def toggle_employment(employee_id: int, session: GetSessionDep, service: GetStatusServiceDep):
    """Demite ou readmite conforme a situação atual do funcionário."""
    return outcome_response(await service.toggle_employment(session, employee_id))
