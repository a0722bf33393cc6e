from notekeeper.infrastructure.storage.medium import (
    KeyValueMedium, InMemoryMedium, StorageError, QuotaExceededError
)
from notekeeper.infrastructure.storage.sql_medium import SqlKeyValueMedium

__all__ = [
    "KeyValueMedium",
    "InMemoryMedium",
    "StorageError",
    "QuotaExceededError",
    "SqlKeyValueMedium"
]
