"""
Валидаторы бизнес-правил.
"""
from employee_registry.validators.employee_validator import validate_employee

__all__ = ["validate_employee"]
