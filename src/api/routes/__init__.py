from fastapi import APIRouter

from src.api.routes.auth import router as auth_router
from src.api.routes.forms import router as forms_router
from src.api.routes.records import (
    customers_router,
    employees_router,
    products_router,
    suppliers_router,
)
from src.api.routes.status_actions import router as status_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(forms_router)
router.include_router(customers_router)
router.include_router(suppliers_router)
router.include_router(employees_router)
router.include_router(products_router)
router.include_router(status_router)
