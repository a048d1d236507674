"""
Модели SQLAlchemy — импортируем все для регистрации в Base.metadata.
"""
from employee_registry.models.employee import Employee, Role  # noqa: F401
