"""WebSocket channel for live reservation and waitlist events"""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

router = APIRouter()


@router.websocket("/ws")
async def events_channel(websocket: WebSocket):
    """
    Push-only channel. Messages are `{"type": ..., "data": ...}`; anything a
    client sends is ignored.
    """
    notifier = websocket.app.state.notifier
    await notifier.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        notifier.disconnect(websocket)
