"""
Инициализация хранилища сотрудников: python -m employee_registry
"""
import logging

from employee_registry.core.config import settings
from employee_registry.core.database import init_db, session_scope
from employee_registry.services.employee_service import EmployeeService

# Настройка логирования
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.LOG_LEVEL,
)
logger = logging.getLogger(__name__)


def main() -> None:
    # Без pepper невозможно ни создать сотрудника, ни проверить вход
    settings.require_pepper()
    logger.info("Initializing database")
    init_db()
    with session_scope() as db:
        total = EmployeeService(db).count_all()
    logger.info("Database ready: employees=%s", total)


if __name__ == "__main__":
    main()
