"""
Тестовая инфраструктура: фикстуры для SQLite in-memory.
"""
import os

# Должно быть ДО импорта employee_registry
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PEPPER"] = "test-pepper"
os.environ["ROW_PER_PAGE"] = "15"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from employee_registry.core.database import Base
from employee_registry.models.employee import Role
from employee_registry.schemas.employee import EmployeeCreate
from employee_registry.services.employee_service import EmployeeService

# Импортируем все модели чтобы Base.metadata знал о них
import employee_registry.models  # noqa: F401


PEPPER = "test-pepper"

# SQLite in-memory с StaticPool: одна БД для всех connections
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(bind=engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Создаёт все таблицы перед каждым тестом и удаляет после."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session() -> Session:
    """Фикстура тестовой сессии БД."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db_session: Session) -> EmployeeService:
    return EmployeeService(db_session)


# --- Вспомогательные функции для создания тестовых данных ---

def create_employee(
    service: EmployeeService,
    code: str = "E001",
    name: str = "Тестовый Сотрудник",
    password: str = "secret",
    role: Role = Role.GENERAL,
):
    """Создаёт сотрудника через сервис и возвращает запись из БД."""
    errors = service.create(
        EmployeeCreate(code=code, name=name, password=password, role=role),
        PEPPER,
    )
    assert errors == []
    return service.repository.page(0, 1)[0]
