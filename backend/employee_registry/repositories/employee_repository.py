"""
Хранилище сотрудников: именованные запросы к таблице employees.
"""
from typing import Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from employee_registry.models.employee import Employee
from employee_registry.schemas.employee import EmployeeDraft


class EmployeeRepository:
    """Доступ к таблице сотрудников в рамках одной сессии-транзакции."""

    def __init__(self, db: Session):
        self.db = db

    def page(self, offset: int, limit: int) -> list[Employee]:
        """Все сотрудники по убыванию id, начиная с offset."""
        return (
            self.db.query(Employee)
            .order_by(desc(Employee.id))
            .offset(offset)
            .limit(limit)
            .all()
        )

    def count_all(self) -> int:
        return self.db.query(func.count(Employee.id)).scalar()

    def count_by_code(self, code: str) -> int:
        """Количество сотрудников с указанным кодом, включая удалённых."""
        return (
            self.db.query(func.count(Employee.id))
            .filter(Employee.code == code)
            .scalar()
        )

    def get_by_id(self, employee_id: int, lock: bool = False) -> Optional[Employee]:
        """Сотрудник по id; lock=True блокирует строку до конца транзакции."""
        query = self.db.query(Employee).filter(Employee.id == employee_id)
        if lock:
            query = query.with_for_update()
        return query.first()

    def get_by_code_and_hash(self, code: str, password_hash: str) -> Employee:
        """
        Неудалённый сотрудник по коду и хешу пароля.

        Raises:
            sqlalchemy.exc.NoResultFound: если такой записи нет.
        """
        return (
            self.db.query(Employee)
            .filter(
                Employee.code == code,
                Employee.password_hash == password_hash,
                Employee.deleted == False,
            )
            .one()
        )

    def insert(self, draft: EmployeeDraft) -> int:
        """Добавить запись, вернуть присвоенный id."""
        employee = Employee(**draft.column_values())
        self.db.add(employee)
        self.db.flush()
        return employee.id

    def update(self, draft: EmployeeDraft) -> Employee:
        """Перенести все поля подготовленной записи в строку с тем же id."""
        employee = self.get_by_id(draft.id)
        for field, value in draft.column_values().items():
            setattr(employee, field, value)
        self.db.flush()
        return employee
