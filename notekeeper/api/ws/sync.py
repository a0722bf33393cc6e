from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status
from fastapi.websockets import WebSocketState
from concurrent.futures import Future
from pydantic import ValidationError
from typing import Dict, Optional
import asyncio
import json
import logging
import uuid

from notekeeper.domains.notes.events import TargetRole, classify_target
from notekeeper.domains.notes.schemas import BubbledEvent, RouteResultResponse
from notekeeper.domains.notes.services import NotesSession
from notekeeper.domains.persistence.notifications import LoggingNotifier

logger = logging.getLogger(__name__)

router = APIRouter()


def log_delivery_failure(future: Future) -> None:
    """Лог ошибки фоновой рассылки уведомления"""
    if future.cancelled():
        logger.warning("Notification delivery was cancelled")
        return
    error = future.exception()
    if error is not None:
        logger.error(f"Failed to deliver notification: {error}")


class ConnectionManager:
    """Подключённые клиенты контейнера заметок.

    Заодно служит блокирующим уведомителем: уведомление уходит всем
    клиентам сообщением ``alert``.
    """

    def __init__(self):
        # Хранилище активных соединений: {client_id: websocket}
        self.active_connections: Dict[str, WebSocket] = {}
        self.log_notifier = LoggingNotifier()
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    async def connect(self, websocket: WebSocket, client_id: str):
        """Подключение клиента"""
        await websocket.accept()
        self._loop = asyncio.get_running_loop()
        self.active_connections[client_id] = websocket
        logger.info(f"WebSocket accepted for client {client_id}")

    def disconnect(self, client_id: str):
        """Отключение клиента"""
        self.active_connections.pop(client_id, None)
        logger.info(f"Client {client_id} disconnected")

    async def send(self, websocket: WebSocket, message: dict):
        await websocket.send_text(json.dumps(message))

    async def broadcast(self, message: dict, exclude_client: str = None):
        """Рассылка сообщения всем клиентам"""
        message_json = json.dumps(message)
        disconnected_clients = []

        for client_id, websocket in list(self.active_connections.items()):
            if exclude_client and client_id == exclude_client:
                continue

            try:
                await websocket.send_text(message_json)
            except (WebSocketDisconnect, RuntimeError) as e:
                logger.warning(f"Failed to send to client {client_id}: {e}")
                disconnected_clients.append(client_id)

        # Удаляем отключенных клиентов
        for client_id in disconnected_clients:
            self.disconnect(client_id)

    def notify(self, message: str) -> None:
        """Блокирующее уведомление пользователя"""
        self.log_notifier.notify(message)
        if self._loop is None or not self.active_connections:
            return
        future = asyncio.run_coroutine_threadsafe(
            self.broadcast({"type": "alert", "data": {"message": message}}),
            self._loop
        )
        future.add_done_callback(log_delivery_failure)


def apply_surface_edit(session: NotesSession, event: BubbledEvent) -> None:
    """Перенос правки клиента в зеркало поверхности до маршрутизации"""
    target = event.target
    if event.type != "input" or target.text is None or not target.note_id:
        return
    if classify_target(target) is TargetRole.EDITABLE_SURFACE:
        session.container.update_text(target.note_id, target.text)


async def handle_event(
    manager: ConnectionManager,
    session: NotesSession,
    websocket: WebSocket,
    data
):
    try:
        event = BubbledEvent.model_validate(data or {})
    except ValidationError as e:
        await manager.send(websocket, {"type": "error", "data": {"detail": e.errors(include_url=False, include_context=False)}})
        return

    apply_surface_edit(session, event)
    result = session.router.dispatch(event)

    await manager.send(websocket, {
        "type": "routed",
        "data": RouteResultResponse(
            event_type=result.event_type,
            role=result.role.value,
            mutated=result.mutated,
            save_requested=result.save_requested,
            default_prevented=result.default_prevented
        ).model_dump()
    })

    if result.mutated:
        await manager.broadcast({
            "type": "render",
            "data": {"html": session.container.serialize()}
        })


@router.websocket("/notes/ws")
async def websocket_endpoint(websocket: WebSocket):
    """WebSocket эндпоинт контейнера: сюда всплывают события заметок"""
    manager: ConnectionManager = websocket.app.state.connection_manager
    session: NotesSession = websocket.app.state.notes_session
    client_id = uuid.uuid4().hex

    await manager.connect(websocket, client_id)

    try:
        await manager.send(websocket, {
            "type": "connected",
            "data": {
                "client_id": client_id,
                "html": session.container.serialize(),
                "warning": session.startup_warning
            }
        })

        while True:
            # Получаем сообщение от клиента
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                await manager.send(websocket, {"type": "error", "data": {"detail": "Invalid JSON"}})
                continue

            if not isinstance(message, dict):
                await manager.send(websocket, {"type": "error", "data": {"detail": "Message must be an object"}})
                continue

            message_type = message.get("type")

            if message_type == "event":
                await handle_event(manager, session, websocket, message.get("data"))

            elif message_type == "create":
                note = session.router.create_note()
                await manager.broadcast({
                    "type": "render",
                    "data": {"html": session.container.serialize()}
                })
                await manager.send(websocket, {
                    "type": "focus",
                    "data": {"note_id": note.note_id}
                })

            elif message_type == "ping":
                # Ответ на ping для поддержания соединения
                await manager.send(websocket, {"type": "pong"})

            elif message_type == "sync_request":
                await manager.send(websocket, {
                    "type": "sync_response",
                    "data": {"html": session.container.serialize()}
                })

            else:
                await manager.send(websocket, {
                    "type": "error",
                    "data": {"detail": f"Unknown message type: {message_type}"}
                })

    except WebSocketDisconnect:
        manager.disconnect(client_id)

    except Exception as e:
        logger.error(f"WebSocket error for client {client_id}: {e}")
        manager.disconnect(client_id)
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
