from typing import Generic, List, TypeVar

from .base_schema import AppBaseModel

T = TypeVar('T')


class Page(AppBaseModel, Generic[T]):
    """Página retornada pelos endpoints de listagem do back office."""
    content: List[T] = []
    total_pages: int = 0
    total_elements: int = 0
    number: int = 0
    size: int = 0
