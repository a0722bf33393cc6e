import logging

from notekeeper.infrastructure.storage.medium import KeyValueMedium, QuotaExceededError

logger = logging.getLogger(__name__)


class AvailabilityProbe:
    """Проверка, можно ли вообще пользоваться хранилищем.

    Делает пробную запись и удаление одноразового ключа. Результат не
    кэшируется: доступность может измениться во время работы.
    Переполненное хранилище считается доступным: отказ по квоте должен
    дойти до сохранения и до пользователя.
    """

    def __init__(self, medium: KeyValueMedium, probe_key: str = "__storage_test__"):
        self.medium = medium
        self.probe_key = probe_key

    def is_available(self) -> bool:
        try:
            self.medium.set(self.probe_key, self.probe_key)
        except QuotaExceededError as e:
            logger.debug(f"Storage is full but reachable: {e}")
            return True
        except Exception as e:
            logger.debug(f"Storage probe failed: {e}")
            return False

        try:
            self.medium.remove(self.probe_key)
        except Exception as e:
            logger.debug(f"Storage probe failed: {e}")
            return False
        return True
