"""
Best-effort WebSocket fan-out of lifecycle events.

Delivery is non-durable: there is no queue and no replay, so a listener that
connects after an event was broadcast never receives it, and a listener whose
socket fails mid-send is dropped without retry.
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, Set

from fastapi import WebSocket
from starlette.websockets import WebSocketState
import structlog

logger = structlog.get_logger()


class EventType:
    CONNECTED = "connected"
    NEW_RESERVATION = "new_reservation"
    RESERVATION_STATUS_UPDATED = "reservation_status_updated"
    NEW_WAITLIST = "new_waitlist"
    WAITLIST_STATUS_UPDATED = "waitlist_status_updated"


class Notifier:
    """Tracks connected listeners and pushes `{type, data}` messages to them"""

    def __init__(self):
        self._connections: Set[WebSocket] = set()
        self._tasks: Set[asyncio.Task] = set()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self._connections.add(websocket)
        logger.info("Listener connected", listeners=len(self._connections))
        await websocket.send_json({
            "type": EventType.CONNECTED,
            "data": {
                "message": "Connected to reservation updates",
                "timestamp": datetime.utcnow().isoformat(),
            },
        })

    def disconnect(self, websocket: WebSocket) -> None:
        self._connections.discard(websocket)
        logger.info("Listener disconnected", listeners=len(self._connections))

    async def broadcast(self, event_type: str, payload: Dict[str, Any]) -> int:
        """Send to every open listener; returns the number of successful deliveries"""
        message = {"type": event_type, "data": payload}
        delivered = 0

        # Iterate a snapshot: connect/disconnect may mutate the set mid-broadcast
        for websocket in list(self._connections):
            if websocket.application_state != WebSocketState.CONNECTED:
                self._connections.discard(websocket)
                continue
            try:
                await websocket.send_json(message)
                delivered += 1
            except Exception as e:
                self._connections.discard(websocket)
                logger.debug("Dropped listener after failed send", event_type=event_type, error=str(e))

        logger.debug("Broadcast event", event_type=event_type, delivered=delivered)
        return delivered

    def publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        """Schedule a broadcast without waiting for it"""
        task = asyncio.create_task(self.broadcast(event_type, payload))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for scheduled broadcasts (used on shutdown and in tests)"""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
