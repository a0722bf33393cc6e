from notekeeper.domains.notes.entities import NoteItem, NotesContainer
from notekeeper.domains.notes.services import NotesSession
from notekeeper.domains.persistence.notifications import STORAGE_UNAVAILABLE_MESSAGE
from tests.fakes import ManualScheduler, RecordingMedium, RecordingNotifier


def make_session(medium) -> NotesSession:
    return NotesSession(
        medium=medium,
        scheduler=ManualScheduler(),
        notifier=RecordingNotifier()
    )


def test_start_rehydrates_from_saved_snapshot() -> None:
    saved = NotesContainer()
    saved.append_items([NoteItem("1", "kept"), NoteItem("2", "also kept")])
    medium = RecordingMedium()
    medium.set("notes", saved.serialize())

    session = make_session(medium)
    session.start()

    assert session.container.note_ids == ["1", "2"]
    assert session.container.serialize() == saved.serialize()
    assert session.startup_warning is None


def test_start_with_unavailable_storage_warns_once(caplog) -> None:
    medium = RecordingMedium(enabled=False)
    session = make_session(medium)

    session.start()
    session.start()

    assert session.startup_warning == STORAGE_UNAVAILABLE_MESSAGE
    assert caplog.text.count(STORAGE_UNAVAILABLE_MESSAGE) == 1
    assert len(session.container) == 0
    assert medium.calls_for("notes") == []


def test_non_persistent_session_keeps_editing() -> None:
    medium = RecordingMedium(enabled=False)
    session = make_session(medium)
    session.start()

    note = session.router.create_note()
    session.coordinator.scheduler.advance(1)

    assert session.container.note_ids == [note.note_id]
    assert medium.calls_for("notes") == []


def test_created_ids_do_not_collide_with_restored_ones() -> None:
    saved = NotesContainer()
    saved.append_items([NoteItem("99999999999999", "future")])
    medium = RecordingMedium()
    medium.set("notes", saved.serialize())

    session = make_session(medium)
    session.start()
    note = session.router.create_note()

    assert int(note.note_id) > 99999999999999


def test_close_cancels_pending_save() -> None:
    medium = RecordingMedium()
    session = make_session(medium)
    session.start()

    session.router.create_note()
    session.close()
    session.coordinator.scheduler.advance(1)

    assert medium.writes_to("notes") == 0
