"""WebSocket endpoint observers connect to for live notifications."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from todo_events.core import container

router = APIRouter(tags=["notifications"])


@router.websocket("/hub")
async def notification_hub(websocket: WebSocket) -> None:
    """
    Subscribe to live notifications.

    The connection stays registered until the client disconnects. Anything
    the client sends is ignored.
    """
    hub = container.notification_hub()
    await hub.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        hub.disconnect(websocket)
