from fastapi import APIRouter, Depends, Request, status

from notekeeper.api.deps import get_notes_session
from notekeeper.domains.notes.schemas import NoteResponse, NotesStateResponse
from notekeeper.domains.notes.services import NotesSession

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/", response_model=NotesStateResponse)
async def get_notes(session: NotesSession = Depends(get_notes_session)):
    """Текущее содержимое контейнера"""
    container = session.container
    return NotesStateResponse(
        notes=[NoteResponse.model_validate(item) for item in container.items],
        snapshot=container.serialize(),
        focused_note_id=container.focused_note_id,
        persistence_available=session.probe.is_available(),
        save_pending=session.coordinator.pending,
        startup_warning=session.startup_warning
    )


@router.post("/", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: Request,
    session: NotesSession = Depends(get_notes_session)
):
    """Создание новой заметки (кнопка "Create Notes")"""
    note = session.router.create_note()

    manager = request.app.state.connection_manager
    await manager.broadcast({
        "type": "render",
        "data": {"html": session.container.serialize()}
    })
    await manager.broadcast({
        "type": "focus",
        "data": {"note_id": note.note_id}
    })

    return NoteResponse.model_validate(note)
