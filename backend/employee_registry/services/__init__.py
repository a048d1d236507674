"""
Сервисный слой для бизнес-логики.
"""
from employee_registry.services.employee_service import EmployeeService

__all__ = ["EmployeeService"]
