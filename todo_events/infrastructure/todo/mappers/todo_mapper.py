"""Mapper for Todo ORM ↔ Domain conversion."""

from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo, TodoMemento
from todo_events.models import Todo as TodoORM


class TodoMapper:
    """Mapper for Todo ORM ↔ Domain conversion, by way of the memento."""

    def to_memento(self, orm_model: TodoORM) -> TodoMemento:
        return TodoMemento(
            id=TodoId(orm_model.id),
            description=orm_model.description,
            is_complete=orm_model.is_complete,
        )

    def to_domain(self, orm_model: TodoORM) -> Todo:
        """Convert ORM model to a freshly restored domain aggregate."""
        return Todo.restore(self.to_memento(orm_model))

    def to_orm(self, memento: TodoMemento, orm_model: TodoORM | None = None) -> TodoORM:
        """Convert a snapshot to an ORM model."""
        if orm_model:
            # Update existing
            orm_model.description = memento.description
            orm_model.is_complete = memento.is_complete
            return orm_model

        # Create new
        return TodoORM(
            id=memento.id.value,
            description=memento.description,
            is_complete=memento.is_complete,
        )
