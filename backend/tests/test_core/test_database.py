"""
Тесты транзакционной сессии и настроек.
"""
import logging
from unittest.mock import patch

import pytest
from sqlalchemy.orm import sessionmaker

from employee_registry.core import database
from employee_registry.core.config import settings
from employee_registry.models.employee import Employee, Role
from employee_registry.schemas.employee import EmployeeCreate
from employee_registry.services.employee_service import EmployeeService
from tests.conftest import PEPPER


@pytest.fixture
def scoped_sessions(db_session, monkeypatch):
    """session_scope() поверх тестового движка."""
    monkeypatch.setattr(database, "SessionLocal", sessionmaker(bind=db_session.get_bind()))


def _create(db, code: str) -> list[str]:
    return EmployeeService(db).create(
        EmployeeCreate(code=code, name="Иван", password="secret", role=Role.GENERAL),
        PEPPER,
    )


def test_session_scope_commits(scoped_sessions, db_session):
    with database.session_scope() as db:
        assert _create(db, "E001") == []

    assert db_session.query(Employee).filter_by(code="E001").count() == 1


def test_session_scope_rolls_back_on_error(scoped_sessions, db_session):
    with pytest.raises(RuntimeError):
        with database.session_scope() as db:
            _create(db, "E001")
            raise RuntimeError("boom")

    assert db_session.query(Employee).count() == 0


def test_main_initializes_database(caplog):
    from employee_registry.__main__ import main

    with caplog.at_level(logging.INFO):
        main()
    assert "Database ready: employees=0" in caplog.text


def test_main_requires_pepper(monkeypatch):
    from employee_registry.__main__ import main

    monkeypatch.setattr(settings, "PEPPER", "")
    with patch("employee_registry.__main__.init_db") as init_spy:
        with pytest.raises(ValueError):
            main()
    init_spy.assert_not_called()
