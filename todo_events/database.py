"""SQLAlchemy engine and request sessions for the database todo store."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from todo_events.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base for the ORM models in todo_events.models."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True, "pool_recycle": 3600}

    # Request handlers run in a thread pool
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        # An in-memory database only exists on its one connection
        options["poolclass"] = StaticPool
    return options


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory. Calling it again is a no-op."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        return

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def create_tables() -> None:
    """Create the todos table if it does not exist yet."""
    from todo_events import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(settings: Settings) -> sessionmaker[Session]:
    """Return the session factory, initializing the engine on first use."""
    initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")
    return _session_factory


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Generator[Session | None, None, None]:
    """
    Yield one session per request and close it afterwards.

    The memory store has no database, so it gets None and no engine is
    created.
    """
    if settings.TODO_STORE == "memory":
        yield None
        return

    with get_session_factory(settings)() as db:
        yield db


DatabaseSession = Annotated[Session | None, Depends(get_db)]
