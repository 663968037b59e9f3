"""Use case for reading todos."""

from uuid import UUID

from todo_events.application.todo.protocols.todo_repository import TodoRepositoryProtocol
from todo_events.application.todo.references import is_valid_todo_reference
from todo_events.application.todo.use_cases.exceptions import TodoNotFoundError
from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo


class GetTodosUseCase:
    """Use case for todo queries."""

    def __init__(self, todo_repository: TodoRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.todo_repository = todo_repository

    def list_todos(self) -> list[Todo]:
        """Get all todos in the order they were created."""
        return self.todo_repository.list_all()

    def count_todos(self) -> int:
        return self.todo_repository.count()

    def get_todo(self, todo_id: UUID) -> Todo:
        """
        Get a single todo.

        Raises:
            TodoNotFoundError: If the ID is the empty sentinel or unknown
        """
        todo_id_vo = TodoId(todo_id)
        if not is_valid_todo_reference(todo_id_vo):
            raise TodoNotFoundError(todo_id)

        todo = self.todo_repository.find_by_id(todo_id_vo)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo
