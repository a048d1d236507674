"""
Слой доступа к данным.
"""
from employee_registry.repositories.employee_repository import EmployeeRepository

__all__ = ["EmployeeRepository"]
