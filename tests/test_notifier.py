"""Event fan-out tests"""

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketState

from tavola.main import app
from tavola.services.notifier import EventType, Notifier


class FakeWebSocket:
    def __init__(self, fail: bool = False):
        self.application_state = WebSocketState.CONNECTING
        self.fail = fail
        self.sent = []

    async def accept(self):
        self.application_state = WebSocketState.CONNECTED

    async def send_json(self, message):
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(message)


@pytest.mark.asyncio
async def test_connect_sends_greeting():
    notifier = Notifier()
    websocket = FakeWebSocket()

    await notifier.connect(websocket)

    assert notifier.connection_count == 1
    assert websocket.sent[0]["type"] == EventType.CONNECTED
    assert "timestamp" in websocket.sent[0]["data"]


@pytest.mark.asyncio
async def test_broadcast_reaches_every_listener():
    notifier = Notifier()
    first, second = FakeWebSocket(), FakeWebSocket()
    await notifier.connect(first)
    await notifier.connect(second)

    delivered = await notifier.broadcast(EventType.NEW_RESERVATION, {"id": 1})

    assert delivered == 2
    for websocket in (first, second):
        assert websocket.sent[-1] == {"type": "new_reservation", "data": {"id": 1}}


@pytest.mark.asyncio
async def test_failing_listener_is_dropped():
    notifier = Notifier()
    healthy = FakeWebSocket()
    await notifier.connect(healthy)
    broken = FakeWebSocket()
    await notifier.connect(broken)
    broken.fail = True

    delivered = await notifier.broadcast(EventType.NEW_WAITLIST, {"id": 7})

    assert delivered == 1
    assert notifier.connection_count == 1
    assert healthy.sent[-1]["data"] == {"id": 7}


@pytest.mark.asyncio
async def test_closed_listener_is_skipped():
    notifier = Notifier()
    websocket = FakeWebSocket()
    await notifier.connect(websocket)
    websocket.application_state = WebSocketState.DISCONNECTED

    assert await notifier.broadcast(EventType.NEW_RESERVATION, {}) == 0
    assert notifier.connection_count == 0


@pytest.mark.asyncio
async def test_broadcast_without_listeners():
    notifier = Notifier()
    assert await notifier.broadcast(EventType.NEW_RESERVATION, {"id": 1}) == 0


@pytest.mark.asyncio
async def test_publish_does_not_block_and_drain_delivers():
    notifier = Notifier()
    websocket = FakeWebSocket()
    await notifier.connect(websocket)

    notifier.publish(EventType.RESERVATION_STATUS_UPDATED, {"id": 3, "status": "confirmed"})
    await notifier.drain()

    assert websocket.sent[-1]["type"] == "reservation_status_updated"
    assert websocket.sent[-1]["data"]["status"] == "confirmed"


@pytest.mark.asyncio
async def test_late_listener_misses_earlier_events():
    notifier = Notifier()
    await notifier.broadcast(EventType.NEW_RESERVATION, {"id": 1})

    websocket = FakeWebSocket()
    await notifier.connect(websocket)

    assert [m["type"] for m in websocket.sent] == [EventType.CONNECTED]


def test_disconnect_unknown_listener_is_noop():
    notifier = Notifier()
    notifier.disconnect(FakeWebSocket())
    assert notifier.connection_count == 0


def test_websocket_channel_greets_listener():
    with TestClient(app) as client:
        with client.websocket_connect("/ws") as websocket:
            message = websocket.receive_json()

    assert message["type"] == "connected"
    assert message["data"]["message"] == "Connected to reservation updates"
