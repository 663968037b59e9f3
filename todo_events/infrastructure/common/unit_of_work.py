"""Unit of Work implementations."""

from sqlalchemy.orm import Session

from todo_events.application.common.event_dispatcher import EventDispatcher
from todo_events.application.common.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's SQLAlchemy session, then publishes events."""

    def __init__(self, db: Session, dispatcher: EventDispatcher) -> None:
        super().__init__(dispatcher)
        self.db = db

    def _persist(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work for the in-memory store.

    The store applies writes immediately, so there is nothing to persist
    or roll back; commit only publishes events.
    """

    def _persist(self) -> None:
        pass

    def rollback(self) -> None:
        pass
