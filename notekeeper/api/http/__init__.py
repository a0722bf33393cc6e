from notekeeper.api.http.health import router as health_router
from notekeeper.api.http.notes import router as notes_router

__all__ = [
    "health_router",
    "notes_router"
]
