from typing import Optional
import logging

from notekeeper.domains.notes.entities import NoteIdAllocator, NotesContainer
from notekeeper.domains.notes.events import EventRouter
from notekeeper.domains.persistence.debounce import DebounceCoordinator
from notekeeper.domains.persistence.notifications import Notifier, STORAGE_UNAVAILABLE_MESSAGE
from notekeeper.domains.persistence.probe import AvailabilityProbe
from notekeeper.domains.persistence.scheduler import Scheduler
from notekeeper.domains.persistence.snapshot_store import SnapshotStore
from notekeeper.infrastructure.storage.medium import KeyValueMedium

logger = logging.getLogger(__name__)


class NotesSession:
    """Сессия редактирования заметок.

    Собирает пробу, хранилище снимков, координатор сохранений и
    маршрутизатор событий вокруг одного контейнера. ``start`` вызывается
    один раз при запуске, ``close`` - при завершении.
    """

    def __init__(
        self,
        medium: KeyValueMedium,
        scheduler: Scheduler,
        notifier: Notifier,
        storage_key: str = "notes",
        probe_key: str = "__storage_test__",
        debounce_delay_ms: int = 300,
        container: Optional[NotesContainer] = None,
        allocator: Optional[NoteIdAllocator] = None
    ):
        self.container = container or NotesContainer()
        self.allocator = allocator or NoteIdAllocator()
        self.probe = AvailabilityProbe(medium, probe_key=probe_key)
        self.store = SnapshotStore(medium, self.probe, key=storage_key)
        self.coordinator = DebounceCoordinator(
            self.store, scheduler, notifier, delay_ms=debounce_delay_ms
        )
        self.router = EventRouter(self.container, self.coordinator, scheduler, self.allocator)
        self.startup_warning: Optional[str] = None
        self.started = False

    def start(self) -> None:
        """Проверка хранилища и восстановление контейнера из снимка"""
        if self.started:
            return
        self.started = True

        # Предупреждаем один раз, при старте
        if not self.probe.is_available():
            self.startup_warning = STORAGE_UNAVAILABLE_MESSAGE
            logger.warning(STORAGE_UNAVAILABLE_MESSAGE)

        snapshot = self.store.load()
        if snapshot:
            self.container.replace_content(snapshot, allocator=self.allocator)
            logger.info(f"Restored {len(self.container)} notes from snapshot")

    def close(self) -> None:
        self.coordinator.close()
        logger.info("Notes session closed")
