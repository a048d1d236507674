"""
Конфигурация приложения.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Настройки приложения."""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./employees.db")

    # Pepper для хеширования паролей, без дефолта. Никогда не коммитить!
    PEPPER: str = os.getenv("PEPPER", "")

    # Количество записей на странице списка
    ROW_PER_PAGE: int = int(os.getenv("ROW_PER_PAGE", "15"))

    # Часовой пояс для created_at / updated_at
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def require_pepper(self) -> str:
        """Получает pepper, падает если он не задан."""
        if not self.PEPPER:
            raise ValueError("Обязательная переменная окружения PEPPER не установлена")
        return self.PEPPER


settings = Settings()
