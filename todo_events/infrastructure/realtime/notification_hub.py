"""
WebSocket notification hub.

Observers connect to the hub endpoint and receive every notification as a
text frame. Messages are not targeted: each one goes to all connections.
"""

import anyio.from_thread
import structlog
from fastapi import WebSocket

logger = structlog.get_logger(__name__)


class NotificationHub:
    """Tracks open WebSocket connections and fans messages out to them."""

    def __init__(self) -> None:
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info("observer_connected", connections=len(self.active_connections))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
            logger.info("observer_disconnected", connections=len(self.active_connections))

    async def broadcast(self, message: str) -> int:
        """
        Send a message to every open connection.

        A connection that fails to receive is dropped; the others still get
        the message.

        Returns:
            Number of connections the message was delivered to
        """
        delivered = 0
        for websocket in list(self.active_connections):
            try:
                await websocket.send_text(message)
                delivered += 1
            except Exception:
                logger.warning("observer_send_failed", exc_info=True)
                self.disconnect(websocket)
        return delivered

    def notify_all(self, message: str) -> None:
        """
        Broadcast from a synchronous request worker thread.

        Blocks until the push attempt has finished on the event loop. Must
        not be called from the event loop thread itself.
        """
        delivered = anyio.from_thread.run(self.broadcast, message)
        logger.debug("broadcast_notification", recipients=delivered)
