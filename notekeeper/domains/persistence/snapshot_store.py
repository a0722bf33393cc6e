from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

from notekeeper.domains.persistence.probe import AvailabilityProbe
from notekeeper.infrastructure.storage.medium import KeyValueMedium, QuotaExceededError

logger = logging.getLogger(__name__)


class SaveFailureKind(Enum):
    """Классы отказа при сохранении снимка"""
    QUOTA_EXCEEDED = "quota_exceeded"
    OTHER = "other"


@dataclass(frozen=True)
class SaveFailure:
    kind: SaveFailureKind
    error: Exception

    @property
    def is_quota(self) -> bool:
        return self.kind is SaveFailureKind.QUOTA_EXCEEDED


class SnapshotStore:
    """Загрузка и сохранение снимка всего контейнера под одним ключом"""

    def __init__(self, medium: KeyValueMedium, probe: AvailabilityProbe, key: str = "notes"):
        self.medium = medium
        self.probe = probe
        self.key = key

    def load(self) -> Optional[str]:
        """Чтение снимка. Никогда не бросает: отказ равен отсутствию снимка"""
        if not self.probe.is_available():
            return None

        try:
            snapshot = self.medium.get(self.key)
        except Exception as e:
            logger.error(f"Error loading notes: {e}")
            return None

        return snapshot or None

    def save(self, snapshot: str) -> Optional[SaveFailure]:
        """Запись снимка.

        При недоступном хранилище ничего не делает и возвращает None:
        пользователь уже предупреждён при старте.
        """
        if not self.probe.is_available():
            logger.debug("Storage unavailable, snapshot not saved")
            return None

        try:
            self.medium.set(self.key, snapshot)
        except QuotaExceededError as e:
            return SaveFailure(SaveFailureKind.QUOTA_EXCEEDED, e)
        except Exception as e:
            return SaveFailure(SaveFailureKind.OTHER, e)

        logger.debug(f"Saved snapshot of {len(snapshot)} characters under '{self.key}'")
        return None
