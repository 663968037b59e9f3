"""Tests for the WebSocket notification hub."""

from typing import Any

import anyio.to_thread
import pytest

from todo_events.infrastructure.realtime.notification_hub import NotificationHub


class FakeWebSocket:
    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.sent: list[str] = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("Cannot call send once a close message has been sent")
        self.sent.append(data)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.mark.anyio
async def test_connect_accepts_and_registers() -> None:
    hub = NotificationHub()
    websocket = FakeWebSocket()

    await hub.connect(websocket)  # type: ignore[arg-type]

    assert websocket.accepted
    assert hub.active_connections == [websocket]


@pytest.mark.anyio
async def test_broadcast_reaches_every_connection() -> None:
    hub = NotificationHub()
    sockets: list[Any] = [FakeWebSocket(), FakeWebSocket()]
    for websocket in sockets:
        await hub.connect(websocket)

    delivered = await hub.broadcast("Milk is complete")

    assert delivered == 2
    assert [websocket.sent for websocket in sockets] == [["Milk is complete"]] * 2


@pytest.mark.anyio
async def test_broken_connection_is_dropped() -> None:
    hub = NotificationHub()
    healthy: Any = FakeWebSocket()
    broken: Any = FakeWebSocket(fail=True)
    await hub.connect(broken)
    await hub.connect(healthy)

    delivered = await hub.broadcast("Milk is complete")

    assert delivered == 1
    assert healthy.sent == ["Milk is complete"]
    assert hub.active_connections == [healthy]


@pytest.mark.anyio
async def test_notify_all_from_worker_thread() -> None:
    hub = NotificationHub()
    websocket: Any = FakeWebSocket()
    await hub.connect(websocket)

    await anyio.to_thread.run_sync(hub.notify_all, "Milk is complete")

    assert websocket.sent == ["Milk is complete"]


def test_disconnect_unknown_socket_is_noop() -> None:
    hub = NotificationHub()

    hub.disconnect(FakeWebSocket())  # type: ignore[arg-type]

    assert hub.active_connections == []
