import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from notekeeper.core.db import init_db
from notekeeper.domains.notes.entities import NoteIdAllocator
from notekeeper.domains.notes.services import NotesSession
from tests.fakes import ManualScheduler, RecordingMedium, RecordingNotifier


class SteppingClock:
    """Часы, которые идут на 1 мс при каждом чтении"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.value = start

    def __call__(self) -> float:
        self.value += 0.001
        return self.value


@pytest.fixture
def medium():
    return RecordingMedium()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def allocator():
    return NoteIdAllocator(clock=SteppingClock())


@pytest.fixture
def notes_session(medium, scheduler, notifier, allocator):
    session = NotesSession(
        medium=medium,
        scheduler=scheduler,
        notifier=notifier,
        allocator=allocator
    )
    session.start()
    yield session
    session.close()


@pytest.fixture
def sql_session_factory():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()
