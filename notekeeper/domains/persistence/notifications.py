import logging
from typing import Protocol

logger = logging.getLogger(__name__)

QUOTA_EXCEEDED_MESSAGE = "Storage quota exceeded. Please delete some notes."
STORAGE_UNAVAILABLE_MESSAGE = "Storage is not available. Notes will not persist."


class Notifier(Protocol):
    """Блокирующее уведомление пользователя"""

    def notify(self, message: str) -> None:
        ...


class LoggingNotifier:
    """Уведомления только в лог, пока нет подключённого клиента"""

    def notify(self, message: str) -> None:
        logger.warning(f"User notification: {message}")
