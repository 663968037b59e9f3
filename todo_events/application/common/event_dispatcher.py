"""
In-process domain event dispatcher.

The dispatcher routes a published event to every handler registered for
its concrete type, synchronously and in registration order, on the
calling thread.

Registrations are made once while the application starts and then frozen.
After that the routing table is only read, which is what lets concurrent
requests publish without locking.

Example:
    dispatcher = EventDispatcher()
    dispatcher.register(TodoCompleted, TodoCompletedNotifier(hub))
    dispatcher.freeze()

    dispatcher.publish(TodoCompleted(todo_id=todo.id, description="Milk"))
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import structlog

from todo_events.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=DomainEvent)

EventHandler = Callable[[Any], None]


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", type(handler).__name__)


class EventHandlerError(Exception):
    """
    Raised by publish() when one or more handlers failed.

    All handlers registered for the event have been invoked by the time
    this is raised. The first failure is chained as ``__cause__``.
    """

    def __init__(self, event: DomainEvent, failures: list[tuple[EventHandler, Exception]]) -> None:
        self.event = event
        self.failures = failures
        names = ", ".join(_handler_name(handler) for handler, _ in failures)
        super().__init__(f"{len(failures)} handler(s) failed for {event.event_type}: {names}")


class EventDispatcher:
    """Routing table from event type to an ordered list of handlers."""

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = {}
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        """
        Subscribe a handler to an event type.

        Multiple handlers per type are allowed; they run in registration order.

        Raises:
            RuntimeError: If the dispatcher has already been frozen
        """
        if self._frozen:
            raise RuntimeError(
                f"Cannot register {_handler_name(handler)} for {event_type.__name__}: "
                "dispatcher registrations are frozen"
            )
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "registered_event_handler",
            event_type=event_type.__name__,
            handler=_handler_name(handler),
        )

    def freeze(self) -> None:
        """Stop accepting registrations. Call before serving traffic."""
        self._frozen = True

    def handlers_for(self, event_type: type[DomainEvent]) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_type, ()))

    def publish(self, event: DomainEvent) -> None:
        """
        Invoke every handler registered for the event's concrete type.

        A failing handler does not stop the remaining ones. Failures are
        logged as they happen and raised together once all handlers ran.

        Raises:
            EventHandlerError: If at least one handler raised
        """
        failures: list[tuple[EventHandler, Exception]] = []
        for handler in self.handlers_for(type(event)):
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    handler=_handler_name(handler),
                    exc_info=True,
                    **event.to_dict(),
                )
                failures.append((handler, e))

        if failures:
            raise EventHandlerError(event, failures) from failures[0][1]

    def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events one by one, in order. Stops at the first failed event."""
        for event in events:
            self.publish(event)
