import pytest

from notekeeper.infrastructure.storage.medium import (
    InMemoryMedium, QuotaExceededError, StorageError
)
from notekeeper.infrastructure.storage.sql_medium import SqlKeyValueMedium


def test_in_memory_medium_get_set_remove() -> None:
    medium = InMemoryMedium()
    assert medium.get("notes") is None

    medium.set("notes", "<p>one</p>")
    assert medium.get("notes") == "<p>one</p>"

    medium.remove("notes")
    assert medium.get("notes") is None
    # Удаление отсутствующего ключа не ошибка
    medium.remove("notes")


def test_in_memory_medium_quota_rejects_and_keeps_previous_value() -> None:
    medium = InMemoryMedium(quota_bytes=20)
    medium.set("notes", "x" * 10)

    with pytest.raises(QuotaExceededError):
        medium.set("notes", "x" * 30)

    assert medium.get("notes") == "x" * 10


def test_in_memory_medium_quota_counts_replaced_value_once() -> None:
    medium = InMemoryMedium(quota_bytes=20)
    medium.set("notes", "x" * 15)
    medium.set("notes", "y" * 15)
    assert medium.get("notes") == "y" * 15


def test_quota_error_is_a_storage_error() -> None:
    assert issubclass(QuotaExceededError, StorageError)


def test_disabled_in_memory_medium_raises() -> None:
    medium = InMemoryMedium(enabled=False)
    with pytest.raises(StorageError):
        medium.get("notes")
    with pytest.raises(StorageError):
        medium.set("notes", "value")
    with pytest.raises(StorageError):
        medium.remove("notes")


def test_sql_medium_roundtrip(sql_session_factory) -> None:
    medium = SqlKeyValueMedium(sql_session_factory)
    assert medium.get("notes") is None

    medium.set("notes", "<p>first</p>")
    medium.set("notes", "<p>second</p>")
    assert medium.get("notes") == "<p>second</p>"

    medium.remove("notes")
    assert medium.get("notes") is None


def test_sql_medium_preserves_snapshot_exactly(sql_session_factory) -> None:
    medium = SqlKeyValueMedium(sql_session_factory)
    snapshot = '<p class="input-box" data-note-id="1">Привет &amp; \n  tab\t</p>'
    medium.set("notes", snapshot)
    assert medium.get("notes") == snapshot


def test_sql_medium_quota(sql_session_factory) -> None:
    medium = SqlKeyValueMedium(sql_session_factory, quota_bytes=20)
    medium.set("notes", "x" * 10)

    with pytest.raises(QuotaExceededError):
        medium.set("other", "y" * 20)
    assert medium.get("other") is None

    # Перезапись того же ключа считает только новое значение
    medium.set("notes", "z" * 15)
    assert medium.get("notes") == "z" * 15
