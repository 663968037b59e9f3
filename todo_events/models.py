"""SQLAlchemy ORM models."""

from uuid import UUID

from sqlalchemy import Boolean, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from todo_events.database import Base


class Todo(Base):
    """Persisted todo snapshot."""

    __tablename__ = "todos"

    # Insertion order; the public identifier is `id`
    position: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[UUID] = mapped_column(Uuid, unique=True, index=True, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    is_complete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, description='{self.description}')>"
