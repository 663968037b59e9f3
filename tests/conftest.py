"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator
from typing import Any

# Must be set before the app reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from todo_events import models  # noqa: E402, F401
from todo_events.application.common.event_dispatcher import EventDispatcher  # noqa: E402
from todo_events.application.todo.handlers import TodoCompletedNotifier  # noqa: E402
from todo_events.database import Base, get_db  # noqa: E402
from todo_events.domain.todo.events import TodoCompleted  # noqa: E402
from todo_events.infrastructure.common.unit_of_work import InMemoryUnitOfWork  # noqa: E402
from todo_events.infrastructure.todo.repositories import InMemoryTodoRepository  # noqa: E402
from todo_events.main import app  # noqa: E402

# Test database URL (in-memory SQLite, one connection shared across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class RecordingBroadcaster:
    """Broadcaster that remembers what it was asked to push."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify_all(self, message: str) -> None:
        self.messages.append(message)


class RecordingLogger:
    """Stands in for a structlog logger and keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, event: str, **fields: Any) -> None:
        self.records.append((level, event, fields))

    def debug(self, event: str, **fields: Any) -> None:
        self._record("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._record("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._record("warning", event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._record("error", event, **fields)

    def at(self, level: str) -> list[tuple[str, dict[str, Any]]]:
        return [(event, fields) for lvl, event, fields in self.records if lvl == level]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def dispatcher(broadcaster: RecordingBroadcaster) -> EventDispatcher:
    """Dispatcher wired the way the application wires it, minus the WebSocket hub."""
    event_dispatcher = EventDispatcher()
    event_dispatcher.register(TodoCompleted, TodoCompletedNotifier(broadcaster))
    event_dispatcher.freeze()
    return event_dispatcher


@pytest.fixture
def memory_repository() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture
def unit_of_work(dispatcher: EventDispatcher) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(dispatcher)
