"""
Утилиты приложения.
"""
from datetime import datetime
from zoneinfo import ZoneInfo

from employee_registry.core.config import settings


def now() -> datetime:
    """Текущее время в настроенном часовом поясе (без tzinfo, как хранится в БД)."""
    return datetime.now(ZoneInfo(settings.TIMEZONE)).replace(tzinfo=None)

