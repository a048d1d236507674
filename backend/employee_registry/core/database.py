"""
Конфигурация базы данных SQLAlchemy 2.0.
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase

from employee_registry.core.config import settings


_engine_kwargs: dict = {"echo": False}

if settings.DATABASE_URL.startswith("postgresql"):
    _engine_kwargs.update(
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )

engine = create_engine(settings.DATABASE_URL, **_engine_kwargs)

SessionLocal = sessionmaker(bind=engine)


class Base(DeclarativeBase):
    """Базовый класс для всех моделей."""
    pass


@contextmanager
def session_scope() -> Iterator[Session]:
    """Сессия-транзакция: commit при успехе, rollback при любой ошибке."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db() -> None:
    """Создать таблицы, если их ещё нет."""
    import employee_registry.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
