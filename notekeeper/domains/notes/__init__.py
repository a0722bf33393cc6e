from notekeeper.domains.notes.entities import NoteIdAllocator, NoteItem, NotesContainer
from notekeeper.domains.notes.schemas import (
    EventTarget, BubbledEvent, NoteResponse, NotesStateResponse, RouteResultResponse
)
from notekeeper.domains.notes.events import EventRouter, RouteResult, TargetRole, classify_target
from notekeeper.domains.notes.services import NotesSession

__all__ = [
    "NoteIdAllocator", "NoteItem", "NotesContainer",
    "EventTarget", "BubbledEvent", "NoteResponse", "NotesStateResponse", "RouteResultResponse",
    "EventRouter", "RouteResult", "TargetRole", "classify_target",
    "NotesSession"
]
