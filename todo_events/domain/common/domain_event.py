"""
Domain events: immutable facts about something that already happened.

Aggregates record them; the Unit of Work hands them to the event
dispatcher once the change is committed.

Example:
    @dataclass(frozen=True)
    class TodoCompleted(DomainEvent):
        todo_id: TodoId
        description: str
"""

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from uuid import UUID, uuid4


def _primitive(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    to_primitive = getattr(value, "to_primitive", None)
    return to_primitive() if callable(to_primitive) else value


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for events. Subclasses are frozen dataclasses named in the
    past tense.

    `event_id` and `occurred_at` are keyword-only and filled in
    automatically, so subclasses can declare required fields of their own.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, object]:
        """Flatten to JSON-friendly primitives, for logs."""
        data = {f.name: _primitive(getattr(self, f.name)) for f in fields(self)}
        data["event_type"] = self.event_type
        return data
