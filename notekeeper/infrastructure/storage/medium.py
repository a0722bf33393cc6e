from typing import Dict, Optional, Protocol


class StorageError(Exception):
    """Хранилище отклонило операцию"""


class QuotaExceededError(StorageError):
    """Запись превышает квоту хранилища"""


class KeyValueMedium(Protocol):
    """Синхронное key-value хранилище"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


def entry_size(key: str, value: str) -> int:
    """Размер записи в символах, как его считает квота"""
    return len(key) + len(value)


class InMemoryMedium:
    """Хранилище в памяти процесса с необязательной квотой.

    Флаг ``enabled`` имитирует недоступное хранилище (приватный режим,
    запрет политикой): пока он выключен, любая операция бросает
    ``StorageError``.
    """

    def __init__(self, quota_bytes: int = 0, enabled: bool = True):
        self.quota_bytes = quota_bytes
        self.enabled = enabled
        self._data: Dict[str, str] = {}

    def _ensure_enabled(self) -> None:
        if not self.enabled:
            raise StorageError("Storage is disabled")

    def get(self, key: str) -> Optional[str]:
        self._ensure_enabled()
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._ensure_enabled()
        if self.quota_bytes:
            used = sum(entry_size(k, v) for k, v in self._data.items() if k != key)
            if used + entry_size(key, value) > self.quota_bytes:
                raise QuotaExceededError(
                    f"Setting '{key}' exceeds the quota of {self.quota_bytes} bytes"
                )
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._ensure_enabled()
        self._data.pop(key, None)

    def keys(self):
        return list(self._data.keys())
