"""
Base class for Aggregate Roots.

An aggregate root owns its invariants and records the domain events raised
by its operations. Recording happens inside the operation itself, so an
event can never be observed without the state change that produced it.

Example:
    @dataclass(eq=False)
    class Todo(AggregateRoot[TodoId]):
        id: TodoId
        description: str
        is_complete: bool = False

        def complete(self) -> None:
            self.is_complete = True
            self._record_event(TodoCompleted(self.id, self.description))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Entity that guards a consistency boundary and buffers its events.

    The buffer is drained by the Unit of Work after commit.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        Called by the Unit of Work after persisting the aggregate, so
        each event is dispatched at most once.
        """
        events, self._events = self._events, []
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Events recorded since the last collect, left in place."""
        return list(self._events)
