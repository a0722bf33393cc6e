from dataclasses import dataclass
from enum import Enum
import logging

from notekeeper.domains.notes.entities import NoteIdAllocator, NoteItem, NotesContainer
from notekeeper.domains.notes.markup import DELETE_CLASS, NOTE_CLASS
from notekeeper.domains.notes.schemas import BubbledEvent, EventTarget
from notekeeper.domains.persistence.debounce import DebounceCoordinator
from notekeeper.domains.persistence.scheduler import Scheduler

logger = logging.getLogger(__name__)


class TargetRole(Enum):
    """Роль цели события внутри контейнера"""
    DELETE_CONTROL = "delete_control"
    EDITABLE_SURFACE = "editable_surface"
    OTHER = "other"


def classify_target(target: EventTarget) -> TargetRole:
    if target.tag == "img" and DELETE_CLASS in target.classes:
        return TargetRole.DELETE_CONTROL
    if NOTE_CLASS in target.classes:
        return TargetRole.EDITABLE_SURFACE
    return TargetRole.OTHER


@dataclass(frozen=True)
class RouteResult:
    event_type: str
    role: TargetRole
    mutated: bool = False
    save_requested: bool = False
    default_prevented: bool = False


class EventRouter:
    """Единственный обработчик событий, всплывших до контейнера.

    Поэлементных обработчиков нет: цель события классифицируется по форме
    и обрабатывается в зависимости от роли. После изменения дерева
    запрашивается отложенное сохранение снимка.
    """

    def __init__(
        self,
        container: NotesContainer,
        coordinator: DebounceCoordinator,
        scheduler: Scheduler,
        allocator: NoteIdAllocator
    ):
        self.container = container
        self.coordinator = coordinator
        self.scheduler = scheduler
        self.allocator = allocator

    def request_save(self) -> None:
        self.coordinator.request_save(self.container.serialize)

    def dispatch(self, event: BubbledEvent) -> RouteResult:
        """Маршрутизация всплывшего события"""
        role = classify_target(event.target)

        if event.type == "click":
            return self._handle_click(event, role)
        if event.type == "input":
            return self._handle_input(event, role)
        return self._handle_paste(event, role)

    def _handle_click(self, event: BubbledEvent, role: TargetRole) -> RouteResult:
        # Остальные клики случайны: установка каретки и т.п.
        if role is not TargetRole.DELETE_CONTROL:
            return RouteResult(event.type, role)

        event.prevent_default()
        removed = self.delete_note(event.target.note_id)
        return RouteResult(
            event.type,
            role,
            mutated=removed,
            save_requested=removed,
            default_prevented=True
        )

    def _handle_input(self, event: BubbledEvent, role: TargetRole) -> RouteResult:
        if role is not TargetRole.EDITABLE_SURFACE:
            return RouteResult(event.type, role)

        # Правка уже произошла на самой поверхности
        self.request_save()
        return RouteResult(event.type, role, save_requested=True)

    def _handle_paste(self, event: BubbledEvent, role: TargetRole) -> RouteResult:
        # Даём вставке завершиться, прежде чем снимать снимок
        self.scheduler.call_soon(self.request_save)
        return RouteResult(event.type, role, save_requested=True)

    def delete_note(self, note_id) -> bool:
        if not note_id:
            return False
        removed = self.container.remove(note_id)
        if removed is None:
            logger.debug(f"Delete requested for missing note {note_id}")
            return False

        logger.info(f"Note {note_id} deleted")
        self.request_save()
        return True

    def create_note(self) -> NoteItem:
        """Создание новой заметки по отдельному триггеру"""
        note = NoteItem.create_note(self.allocator.allocate(self.container.note_ids))
        self.container.append_items([note])
        self.container.focus(note.note_id)

        logger.info(f"Note {note.note_id} created")
        self.request_save()
        return note
