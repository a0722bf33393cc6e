from typing import Optional
import logging

from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from notekeeper.db.models import KeyValueEntry
from notekeeper.infrastructure.storage.medium import StorageError, QuotaExceededError

logger = logging.getLogger(__name__)


class SqlKeyValueMedium:
    """Key-value хранилище поверх таблицы key_value_store"""

    def __init__(self, session_factory: sessionmaker, quota_bytes: int = 0):
        self.session_factory = session_factory
        self.quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        """Чтение значения по ключу"""
        try:
            with self.session_factory() as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        """Запись значения с проверкой квоты"""
        try:
            with self.session_factory() as session:
                if self.quota_bytes:
                    used = session.execute(
                        select(
                            func.coalesce(
                                func.sum(func.length(KeyValueEntry.key) + func.length(KeyValueEntry.value)),
                                0
                            )
                        ).where(KeyValueEntry.key != key)
                    ).scalar_one()
                    if used + len(key) + len(value) > self.quota_bytes:
                        raise QuotaExceededError(
                            f"Setting '{key}' exceeds the quota of {self.quota_bytes} bytes"
                        )

                session.merge(KeyValueEntry(key=key, value=value))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        """Удаление ключа"""
        try:
            with self.session_factory() as session:
                session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to remove '{key}': {e}") from e
