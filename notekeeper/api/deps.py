from fastapi import HTTPException, Request, status

from notekeeper.domains.notes.services import NotesSession


def get_notes_session(request: Request) -> NotesSession:
    """Текущая сессия заметок приложения"""
    session = getattr(request.app.state, "notes_session", None)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notes session is not started"
        )
    return session
