from typing import Callable, Optional
import logging

from notekeeper.domains.persistence.notifications import Notifier, QUOTA_EXCEEDED_MESSAGE
from notekeeper.domains.persistence.scheduler import Scheduler, TimerHandle
from notekeeper.domains.persistence.snapshot_store import (
    SnapshotStore, SaveFailure
)

logger = logging.getLogger(__name__)

SnapshotProducer = Callable[[], str]


class DebounceCoordinator:
    """Склеивание серии изменений в одно отложенное сохранение.

    Каждый вызов ``request_save`` отменяет ожидающий таймер и ставит новый
    на ``delay_ms`` после последнего вызова. Снимок берётся у ``producer``
    в момент срабатывания, а не в момент запроса, поэтому промежуточные
    правки не теряются. Очереди нет: одновременно ждёт не больше одного
    таймера.
    """

    def __init__(
        self,
        store: SnapshotStore,
        scheduler: Scheduler,
        notifier: Notifier,
        delay_ms: int = 300
    ):
        self.store = store
        self.scheduler = scheduler
        self.notifier = notifier
        self.delay_ms = delay_ms
        self._timer: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def request_save(self, producer: SnapshotProducer) -> None:
        """Запрос сохранения (trailing edge)"""
        if self._timer is not None:
            self._timer.cancel()
        self._timer = self.scheduler.call_later(self.delay_ms / 1000, lambda: self._fire(producer))

    def _fire(self, producer: SnapshotProducer) -> None:
        self._timer = None

        try:
            snapshot = producer()
        except Exception as e:
            logger.error(f"Error producing notes snapshot: {e}")
            return

        failure = self.store.save(snapshot)
        if failure is not None:
            self._handle_failure(failure)

    def _handle_failure(self, failure: SaveFailure) -> None:
        logger.error(f"Error saving notes: {failure.error}")
        # Повтор бессмысленен, пока пользователь не освободит место
        if failure.is_quota:
            self.notifier.notify(QUOTA_EXCEEDED_MESSAGE)

    def close(self) -> None:
        """Отмена ожидающего сохранения при завершении сессии"""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
