from src.api.schemas.base_schema import AppBaseModel
from src.api.schemas.forms import SubmitOutcome
from src.api.schemas.login import LoginRequest, LoginResponse
from src.api.schemas.pagination import Page
from src.api.schemas.records import (
    CustomerOut, SupplierOut, EmployeeOut, ProductOut,
    CustomerPayload, SupplierPayload, EmployeePayload, ProductPayload,
)

__all__ = [
    "AppBaseModel",
    "SubmitOutcome",
    "LoginRequest", "LoginResponse",
    "Page",
    "CustomerOut", "SupplierOut", "EmployeeOut", "ProductOut",
    "CustomerPayload", "SupplierPayload", "EmployeePayload", "ProductPayload",
]
