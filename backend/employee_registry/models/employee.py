"""
Модель сотрудника.
"""
import enum
from datetime import datetime
from sqlalchemy import Integer, String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from employee_registry.core.database import Base
from employee_registry.core.security import PASSWORD_HASH_LENGTH


class Role(str, enum.Enum):
    """Уровень доступа сотрудника."""
    GENERAL = "general"
    ADMINISTRATOR = "administrator"


class Employee(Base):
    """Сотрудник."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    # Только хеш, открытый пароль не хранится
    password_hash: Mapped[str] = mapped_column(
        "password", String(PASSWORD_HASH_LENGTH), nullable=False
    )
    role: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
