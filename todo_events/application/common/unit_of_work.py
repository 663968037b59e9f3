"""
Unit of Work interface.

The Unit of Work coordinates writing out the changes of a business
transaction and then publishing the domain events the touched aggregates
recorded. Persisting happens first: a failing event handler is reported to
the caller, but the state change it reacts to is already committed.

Example:
    class CompleteTodoUseCase:
        def complete_todo(self, todo_id: UUID) -> Todo:
            with self.unit_of_work:
                todo = self.todo_repository.find_by_id(TodoId(todo_id))
                todo.complete()
                self.todo_repository.replace(todo)
                self.unit_of_work.track(todo)
                self.unit_of_work.commit()
            return todo
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Self

from todo_events.application.common.event_dispatcher import EventDispatcher
from todo_events.domain.common import AggregateRoot, DomainEvent


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Persists the changes of one operation atomically
    - Collects domain events from tracked aggregates
    - Publishes them through the dispatcher after persisting
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    def __init__(self, dispatcher: EventDispatcher) -> None:
        self.dispatcher = dispatcher
        self._tracked: list[AggregateRoot[Any]] = []
        self._committed = False

    def track(self, aggregate: AggregateRoot[Any]) -> None:
        """Remember an aggregate whose events should be published on commit."""
        if aggregate not in self._tracked:
            self._tracked.append(aggregate)

    def commit(self) -> None:
        """
        Persist the current transaction, then publish collected events.

        Raises:
            EventHandlerError: If a handler failed; the transaction stays committed
        """
        self._persist()
        self._committed = True
        self.dispatcher.publish_all(self.collect_events())

    @abstractmethod
    def _persist(self) -> None:
        """Write out the pending changes."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Discard the pending changes."""
        raise NotImplementedError

    def collect_events(self) -> list[DomainEvent]:
        """Collect (and clear) domain events from tracked aggregates."""
        events: list[DomainEvent] = []
        for aggregate in self._tracked:
            events.extend(aggregate.collect_events())
        self._tracked.clear()
        return events

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        self._committed = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred before commit, rollback. Otherwise, do
        nothing (commit must be called explicitly).
        """
        if exc_type is not None and not self._committed:
            self.rollback()
        self._tracked.clear()
