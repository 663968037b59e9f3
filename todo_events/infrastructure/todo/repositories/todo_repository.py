"""Repository for Todo domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo
from todo_events.infrastructure.todo.mappers.todo_mapper import TodoMapper
from todo_events.models import Todo as TodoORM


class TodoRepository:
    """
    SQLAlchemy-backed repository for Todo aggregates.

    Writes are flushed, not committed; the Unit of Work commits.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TodoMapper()

    def _find_orm(self, todo_id: TodoId) -> TodoORM | None:
        stmt = select(TodoORM).where(TodoORM.id == todo_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, todo_id: TodoId) -> Todo | None:
        """
        Find a todo by ID.

        Args:
            todo_id: The todo ID

        Returns:
            Todo entity if found, None otherwise
        """
        orm_model = self._find_orm(todo_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_description(self, description: str) -> Todo | None:
        stmt = (
            select(TodoORM)
            .where(TodoORM.description == description)
            .order_by(TodoORM.position)
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalars().first()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_all(self) -> list[Todo]:
        """
        Get all todos.

        Returns:
            List of todo entities in insertion order
        """
        stmt = select(TodoORM).order_by(TodoORM.position)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count(self) -> int:
        stmt = select(func.count(TodoORM.position))
        return self.db.execute(stmt).scalar() or 0

    def add(self, todo: Todo) -> None:
        """
        Add a new todo.

        Raises:
            ValueError: If a todo with the same ID already exists
        """
        if self._find_orm(todo.id) is not None:
            raise ValueError(f"Todo {todo.id} already exists")
        self.db.add(self.mapper.to_orm(todo.snapshot()))
        self.db.flush()

    def replace(self, todo: Todo) -> None:
        """
        Overwrite the stored state of an existing todo.

        Raises:
            ValueError: If the todo does not exist
        """
        orm_model = self._find_orm(todo.id)
        if orm_model is None:
            raise ValueError(f"Todo {todo.id} not found")
        self.mapper.to_orm(todo.snapshot(), orm_model)
        self.db.flush()

    def remove(self, todo_id: TodoId) -> None:
        """Delete a todo if it exists."""
        orm_model = self._find_orm(todo_id)
        if orm_model is None:
            return
        self.db.delete(orm_model)
        self.db.flush()
