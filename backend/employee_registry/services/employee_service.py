"""
Сервис для работы с сотрудниками.
"""
import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy.exc import NoResultFound, SQLAlchemyError

from employee_registry.core.config import settings
from employee_registry.core.exceptions import NotFoundException
from employee_registry.core.security import hash_password
from employee_registry.core.utils import now
from employee_registry.models.employee import Employee
from employee_registry.repositories.employee_repository import EmployeeRepository
from employee_registry.schemas.employee import (
    EmployeeCreate,
    EmployeeDraft,
    EmployeePage,
    EmployeeRead,
    EmployeeUpdate,
)
from employee_registry.validators.employee_validator import validate_employee

logger = logging.getLogger(__name__)

T = TypeVar("T")


def merge_changes(existing: EmployeeDraft, changes: dict) -> EmployeeDraft:
    """Новая запись: поля existing, поверх которых наложены changes."""
    return existing.model_copy(update=changes)


def _page_bounds(page: int, page_size: Optional[int]) -> tuple[int, int]:
    if page_size is None:
        page_size = settings.ROW_PER_PAGE
    if page_size < 1:
        raise ValueError(f"Размер страницы должен быть не меньше 1: {page_size}")
    return max(page, 1), page_size


class EmployeeService:
    """Сервис для управления сотрудниками."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = EmployeeRepository(db)

    def list_page(self, page: int, page_size: Optional[int] = None) -> list[Employee]:
        """
        Страница сотрудников по убыванию id (нумерация страниц с 1).

        Raises:
            ValueError: если page_size меньше 1.
        """
        page, page_size = _page_bounds(page, page_size)
        return self.repository.page((page - 1) * page_size, page_size)

    def get_page(self, page: int, page_size: Optional[int] = None) -> EmployeePage:
        """Страница сотрудников вместе с общим количеством."""
        page, page_size = _page_bounds(page, page_size)
        employees = self.list_page(page, page_size)
        return EmployeePage(
            items=[EmployeeRead.model_validate(e) for e in employees],
            total=self.count_all(),
            page=page,
            page_size=page_size,
        )

    def count_all(self) -> int:
        """Общее количество сотрудников, включая удалённых."""
        return self.repository.count_all()

    def count_by_code(self, code: str) -> int:
        """Количество сотрудников с указанным кодом."""
        return self.repository.count_by_code(code)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Получить сотрудника по ID (удалённые тоже возвращаются)."""
        return self.repository.get_by_id(employee_id)

    def find_by_credentials(
        self, code: str, plain_password: str, pepper: str
    ) -> Optional[Employee]:
        """Неудалённый сотрудник с таким кодом и паролем или None."""
        password_hash = hash_password(plain_password, pepper)
        try:
            return self.repository.get_by_code_and_hash(code, password_hash)
        except NoResultFound:
            return None

    def authenticate(
        self, code: Optional[str], plain_password: Optional[str], pepper: str
    ) -> bool:
        """
        Проверить код и пароль при входе.

        Неверный код и неверный пароль не различаются.
        """
        if not code or not plain_password:
            return False

        employee = self.find_by_credentials(code, plain_password, pepper)
        if employee is None or employee.id is None:
            logger.warning("Failed login attempt: code=%s", code)
            return False

        logger.debug("Employee authenticated: id=%s", employee.id)
        return True

    def create(self, data: EmployeeCreate, pepper: str) -> list[str]:
        """Создать сотрудника. Возвращает ошибки валидации; пустой список — успех."""
        timestamp = now()
        draft = EmployeeDraft(
            code=data.code,
            name=data.name,
            password_hash=hash_password(data.password, pepper),
            plain_password=data.password,
            role=data.role,
            created_at=timestamp,
            updated_at=timestamp,
            deleted=False,
        )

        errors = validate_employee(self, draft, check_code=True, check_password=True)
        if errors:
            logger.info("Employee not created: code=%s, errors=%s", draft.code, len(errors))
            return errors

        employee_id = self._write(self.repository.insert, draft)
        logger.info("Employee created: id=%s, code=%s", employee_id, draft.code)
        return []

    def update(self, data: EmployeeUpdate, pepper: str) -> list[str]:
        """
        Обновить сотрудника. Возвращает ошибки валидации; пустой список — успех.

        Загруженная запись объединяется с изменениями: код и пароль
        проверяются и перезаписываются только если они изменились,
        имя и роль берутся из data всегда.

        Raises:
            NotFoundException: если сотрудника с data.id нет.
        """
        saved = self._load(data.id)

        changes: dict = {}

        code_changed = saved.code != data.code
        if code_changed:
            changes["code"] = data.code

        password_changed = bool(data.password)
        if password_changed:
            changes["password_hash"] = hash_password(data.password, pepper)
            changes["plain_password"] = data.password

        changes["name"] = data.name
        changes["role"] = data.role
        changes["updated_at"] = now()

        draft = merge_changes(saved, changes)

        errors = validate_employee(
            self, draft, check_code=code_changed, check_password=password_changed
        )
        if errors:
            logger.info("Employee not updated: id=%s, errors=%s", data.id, len(errors))
            return errors

        self._write(self.repository.update, draft)
        logger.info(
            "Employee updated: id=%s, code_changed=%s, password_changed=%s",
            data.id, code_changed, password_changed,
        )
        return []

    def soft_delete(self, employee_id: int) -> Employee:
        """
        Пометить сотрудника удалённым (вместо удаления).

        Raises:
            NotFoundException: если сотрудника нет.
        """
        saved = self._load(employee_id)
        draft = merge_changes(saved, {"deleted": True, "updated_at": now()})
        employee = self._write(self.repository.update, draft)
        logger.info("Employee soft-deleted: id=%s", employee_id)
        return employee

    def _load(self, employee_id: int) -> EmployeeDraft:
        """Загрузить запись с блокировкой строки до конца транзакции."""
        employee = self.repository.get_by_id(employee_id, lock=True)
        if employee is None:
            raise NotFoundException("Сотрудник", employee_id)
        return EmployeeDraft.model_validate(employee)

    def _write(self, operation: Callable[[EmployeeDraft], T], draft: EmployeeDraft) -> T:
        try:
            return operation(draft)
        except SQLAlchemyError:
            logger.warning("Failed to write employee: id=%s, code=%s", draft.id, draft.code)
            self.db.rollback()
            raise
