"""Todo domain events."""

from dataclasses import dataclass

from todo_events.domain.common.domain_event import DomainEvent
from todo_events.domain.common.value_objects.ids import TodoId


@dataclass(frozen=True)
class TodoCompleted(DomainEvent):
    """Raised every time a todo is marked complete."""

    todo_id: TodoId
    description: str
