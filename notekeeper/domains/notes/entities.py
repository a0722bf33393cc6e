from typing import Callable, Iterable, List, Optional, Tuple
import time

from notekeeper.domains.notes import markup


class NoteIdAllocator:
    """Выдача идентификаторов заметок из часов в миллисекундах.

    Часы могут стоять или идти назад, поэтому каждый следующий
    идентификатор не меньше предыдущего + 1 и не совпадает с уже занятыми.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self._last = 0

    def allocate(self, taken: Iterable[str] = ()) -> str:
        taken = set(taken)
        candidate = max(int(self.clock() * 1000), self._last + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last = candidate
        return str(candidate)

    def observe(self, note_id: str) -> None:
        """Учёт идентификатора, пришедшего из восстановленного снимка"""
        if note_id.isdigit():
            self._last = max(self._last, int(note_id))


class NoteItem:
    """Заметка: редактируемая поверхность и одна кнопка удаления"""

    def __init__(
        self,
        note_id: str,
        text: str = "",
        editable: bool = True,
        has_delete_control: bool = True
    ):
        self.note_id = note_id
        self.text = text
        self.editable = editable
        self.has_delete_control = has_delete_control

    @classmethod
    def create_note(cls, note_id: str) -> "NoteItem":
        """Новая пустая редактируемая заметка"""
        return cls(note_id=note_id, text="", editable=True, has_delete_control=True)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NoteItem):
            return False
        return self.note_id == other.note_id

    def __hash__(self) -> int:
        return hash(self.note_id)

    def __repr__(self) -> str:
        return f"NoteItem(note_id={self.note_id}, editable={self.editable}, text={self.text!r})"


class NotesContainer:
    """Контейнер заметок: упорядоченное дерево элементов поверхности"""

    def __init__(self, delete_icon_src: str = markup.DEFAULT_DELETE_ICON_SRC):
        self.delete_icon_src = delete_icon_src
        self._items: List[NoteItem] = []
        self.focused_note_id: Optional[str] = None

    @property
    def items(self) -> Tuple[NoteItem, ...]:
        return tuple(self._items)

    @property
    def note_ids(self) -> List[str]:
        return [item.note_id for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def get(self, note_id: str) -> Optional[NoteItem]:
        for item in self._items:
            if item.note_id == note_id:
                return item
        return None

    def append_items(self, items: Iterable[NoteItem]) -> None:
        """Добавление пачки заметок одной вставкой"""
        batch = list(items)
        existing = set(self.note_ids)
        for item in batch:
            if item.note_id in existing:
                raise ValueError(f"Duplicate note id: {item.note_id}")
            existing.add(item.note_id)
        self._items.extend(batch)

    def remove(self, note_id: str) -> Optional[NoteItem]:
        item = self.get(note_id)
        if item is None:
            return None
        self._items.remove(item)
        if self.focused_note_id == note_id:
            self.focused_note_id = None
        return item

    def update_text(self, note_id: str, text: str) -> bool:
        """Правка текста на месте (так пользователь редактирует поверхность)"""
        item = self.get(note_id)
        if item is None or not item.editable:
            return False
        item.text = text
        return True

    def focus(self, note_id: str) -> None:
        if self.get(note_id) is None:
            raise KeyError(f"Unknown note id: {note_id}")
        self.focused_note_id = note_id

    def serialize(self) -> str:
        """Снимок всего контейнера"""
        return markup.serialize(self._items, delete_icon_src=self.delete_icon_src)

    def replace_content(self, snapshot: str, allocator: Optional[NoteIdAllocator] = None) -> None:
        """Полная замена содержимого снимком (один раз при старте)"""
        allocator = allocator or NoteIdAllocator()
        items = []
        for parsed in markup.parse(snapshot):
            note_id = parsed.note_id
            if not note_id or note_id in {item.note_id for item in items}:
                note_id = allocator.allocate(item.note_id for item in items)
            allocator.observe(note_id)
            items.append(NoteItem(
                note_id=note_id,
                text=parsed.text,
                editable=parsed.editable,
                has_delete_control=parsed.has_delete_control
            ))
        self._items = items
        self.focused_note_id = None
