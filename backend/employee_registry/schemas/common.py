"""
Общие схемы для пагинации.
"""
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Базовая схема для постраничных списков."""
    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def page_count(self) -> int:
        """Количество страниц при текущем размере страницы."""
        if self.page_size <= 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size
