from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notekeeper.api.http import health_router, notes_router
from notekeeper.api.ws.sync import ConnectionManager, router as websocket_router
from notekeeper.config import settings
from notekeeper.core.db import SessionLocal, init_db
from notekeeper.core.logging import configure_logging
from notekeeper.domains.notes.services import NotesSession
from notekeeper.domains.persistence.scheduler import AsyncioScheduler
from notekeeper.infrastructure.storage.sql_medium import SqlKeyValueMedium

SessionFactory = Callable[[ConnectionManager], NotesSession]


def default_session_factory(manager: ConnectionManager) -> NotesSession:
    """Сессия поверх SQL-хранилища и цикла событий приложения"""
    init_db()
    return NotesSession(
        medium=SqlKeyValueMedium(SessionLocal, quota_bytes=settings.STORAGE_QUOTA_BYTES),
        scheduler=AsyncioScheduler(),
        notifier=manager,
        storage_key=settings.NOTES_STORAGE_KEY,
        probe_key=settings.PROBE_KEY,
        debounce_delay_ms=settings.DEBOUNCE_DELAY_MS
    )


def create_app(session_factory: Optional[SessionFactory] = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)
    factory = session_factory or default_session_factory

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        notes_session = factory(app.state.connection_manager)
        notes_session.start()
        app.state.notes_session = notes_session
        yield
        notes_session.close()
        app.state.notes_session = None

    app = FastAPI(
        title="Notekeeper",
        description="Заметки в одном контейнере с отложенным сохранением",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.connection_manager = ConnectionManager()
    app.state.notes_session = None

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(notes_router)
    app.include_router(websocket_router)

    return app


app = create_app()
