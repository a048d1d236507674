"""
Pydantic схемы для сотрудников.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from employee_registry.models.employee import Role
from employee_registry.schemas.common import PaginatedResponse


class EmployeeBase(BaseModel):
    """Базовая схема сотрудника."""
    code: str = ""
    name: str = ""
    # None допустим: отсутствие роли проверяет валидатор
    role: Optional[Role] = None


class EmployeeCreate(EmployeeBase):
    """Схема создания сотрудника."""
    password: str = ""


class EmployeeUpdate(EmployeeBase):
    """Схема обновления сотрудника. Пустой пароль — пароль не меняется."""
    id: int
    password: Optional[str] = None


class EmployeeDraft(BaseModel):
    """
    Подготовленная к записи версия сотрудника.

    Её получает валидатор и репозиторий. ``plain_password`` — пароль в
    открытом виде, который устанавливается этой операцией; он нужен только
    для проверки формата и никогда не сохраняется.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    code: str = ""
    name: str = ""
    password_hash: str = ""
    role: Optional[Role] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted: bool = False
    plain_password: Optional[str] = Field(default=None, exclude=True, repr=False)

    def column_values(self) -> dict:
        """Значения колонок для записи в таблицу (без id)."""
        values = self.model_dump(exclude={"id"})
        values["role"] = self.role.value if self.role is not None else None
        return values


class EmployeeRead(EmployeeBase):
    """Схема ответа с данными сотрудника (без хеша пароля)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime
    deleted: bool


EmployeePage = PaginatedResponse[EmployeeRead]
