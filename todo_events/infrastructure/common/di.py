import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from todo_events.core import container
from todo_events.database import DatabaseSession

T = TypeVar("T")

# The db override lives on the shared container; only one request may hold it
_override_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides container.db with the request-scoped database session while
    the use case is being built. The memory store needs no session.
    """

    def dependency(db: DatabaseSession) -> T:
        if db is None:
            return provider()
        with _override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
