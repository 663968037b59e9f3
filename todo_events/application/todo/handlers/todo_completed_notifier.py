"""Pushes a live notification whenever a todo is completed."""

import structlog

from todo_events.application.todo.protocols.notification_broadcaster import (
    NotificationBroadcaster,
)
from todo_events.domain.todo.events import TodoCompleted

logger = structlog.get_logger(__name__)


def completion_message(description: str) -> str:
    return f"{description} is complete"


class TodoCompletedNotifier:
    """Event handler forwarding TodoCompleted to all connected observers."""

    def __init__(self, broadcaster: NotificationBroadcaster) -> None:
        self.broadcaster = broadcaster

    def __call__(self, event: TodoCompleted) -> None:
        self.broadcaster.notify_all(completion_message(event.description))
        logger.info("sent_completion_notification", **event.to_dict())
