"""Разметка снимка контейнера.

Снимок - это innerHTML контейнера: по одному ``<p class="input-box">`` на
заметку, внутри текст и картинка-кнопка удаления. Сериализация и разбор
согласованы так, что разбор снимка и повторная сериализация дают ту же
строку.
"""
from dataclasses import dataclass
from html import escape
from html.parser import HTMLParser
from typing import Iterable, List, Optional

NOTE_CLASS = "input-box"
DELETE_CLASS = "delete-btn"
DEFAULT_DELETE_ICON_SRC = "images/delete.png"
DELETE_ICON_ALT = "Delete note"


@dataclass
class ParsedNote:
    note_id: Optional[str]
    text: str = ""
    editable: bool = False
    has_delete_control: bool = False


def render_text(text: str) -> str:
    # Переводы строк браузер хранит как <br>
    return "<br>".join(escape(line, quote=False) for line in text.split("\n"))


def render_note(note, delete_icon_src: str = DEFAULT_DELETE_ICON_SRC) -> str:
    editable = "true" if note.editable else "false"
    fragment = (
        f'<p class="{NOTE_CLASS}" contenteditable="{editable}" '
        f'data-note-id="{escape(note.note_id)}">{render_text(note.text)}'
    )
    if note.has_delete_control:
        fragment += (
            f'<img src="{escape(delete_icon_src)}" alt="{DELETE_ICON_ALT}" class="{DELETE_CLASS}">'
        )
    return fragment + "</p>"


def serialize(notes: Iterable, delete_icon_src: str = DEFAULT_DELETE_ICON_SRC) -> str:
    return "".join(render_note(note, delete_icon_src) for note in notes)


class _SnapshotParser(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.notes: List[ParsedNote] = []
        self._current: Optional[ParsedNote] = None
        self._depth = 0

    def handle_starttag(self, tag, attrs):
        attributes = dict(attrs)
        classes = (attributes.get("class") or "").split()

        if self._current is None:
            if tag == "p" and NOTE_CLASS in classes:
                self._current = ParsedNote(
                    note_id=attributes.get("data-note-id"),
                    editable=(attributes.get("contenteditable") or "").lower() == "true"
                )
                self._depth = 1
            return

        if tag == "img":
            if DELETE_CLASS in classes:
                self._current.has_delete_control = True
            return
        if tag == "br":
            self._current.text += "\n"
            return
        if tag == "p":
            self._depth += 1

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)

    def handle_endtag(self, tag):
        if self._current is None or tag != "p":
            return
        self._depth -= 1
        if self._depth == 0:
            self.notes.append(self._current)
            self._current = None

    def handle_data(self, data):
        if self._current is not None:
            self._current.text += data

    def close(self):
        super().close()
        # Незакрытый последний <p> браузер тоже считает заметкой
        if self._current is not None:
            self.notes.append(self._current)
            self._current = None


def parse(snapshot: str) -> List[ParsedNote]:
    parser = _SnapshotParser()
    parser.feed(snapshot)
    parser.close()
    return parser.notes
