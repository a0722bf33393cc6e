from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from notekeeper.config import settings

# Базовый класс для моделей
Base = declarative_base()

# Синхронный движок: контракт хранилища синхронный
engine = create_engine(settings.DATABASE_URL, future=True, echo=settings.SQL_ECHO)

# Сессии
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind=None) -> None:
    """Создание таблиц хранилища"""
    # Импорт регистрирует модели в метаданных
    from notekeeper.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
