"""Exceptions for todo use cases."""

from uuid import UUID

from todo_events.exceptions import ConflictError, NotFoundError


class TodoNotFoundError(NotFoundError):
    """Todo not found error."""

    def __init__(self, todo_id: UUID) -> None:
        self.todo_id = todo_id
        super().__init__(f"Todo with id {todo_id} not found")


class DuplicateTodoDescriptionError(ConflictError):
    """Another todo already uses this description."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"A todo with description '{description}' already exists")
