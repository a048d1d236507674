"""
Проверка данных сотрудника перед записью.
"""
from typing import TYPE_CHECKING

from employee_registry.models.employee import Role
from employee_registry.schemas.employee import EmployeeDraft

if TYPE_CHECKING:
    from employee_registry.services.employee_service import EmployeeService


CODE_REQUIRED = "Введите код сотрудника"
CODE_DUPLICATE = "Сотрудник с таким кодом уже существует"
NAME_REQUIRED = "Введите имя сотрудника"
PASSWORD_REQUIRED = "Введите пароль"
ROLE_REQUIRED = "Укажите роль сотрудника"


def validate_employee(
    service: "EmployeeService",
    draft: EmployeeDraft,
    check_code: bool,
    check_password: bool,
) -> list[str]:
    """
    Проверить подготовленную запись сотрудника.

    check_code — проверять уникальность кода (код новый или изменён),
    check_password — проверять пароль (пароль задаётся этой операцией).
    Возвращает список сообщений об ошибках; пустой список — данные корректны.
    """
    errors: list[str] = []

    code_error = _validate_code(service, draft.code, check_code)
    if code_error:
        errors.append(code_error)

    if not draft.name:
        errors.append(NAME_REQUIRED)

    if check_password and not draft.plain_password:
        errors.append(PASSWORD_REQUIRED)

    if not isinstance(draft.role, Role):
        errors.append(ROLE_REQUIRED)

    return errors


def _validate_code(service: "EmployeeService", code: str, check_duplicate: bool) -> str | None:
    if not code:
        return CODE_REQUIRED
    if check_duplicate and service.count_by_code(code) > 0:
        return CODE_DUPLICATE
    return None
