"""Protocol for the Todo repository."""

from typing import Protocol

from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo


class TodoRepositoryProtocol(Protocol):
    """
    Keyed collection of todos.

    Every todo handed out is freshly rehydrated from its snapshot, so callers
    never share mutable state with the store or with each other.
    """

    def find_by_id(self, todo_id: TodoId) -> Todo | None:
        """
        Find a todo by ID.

        Returns:
            Todo entity if found, None otherwise
        """
        ...

    def find_by_description(self, description: str) -> Todo | None:
        """Find the first todo with exactly this description."""
        ...

    def list_all(self) -> list[Todo]:
        """Get all todos in insertion order."""
        ...

    def count(self) -> int:
        ...

    def add(self, todo: Todo) -> None:
        """
        Add a new todo.

        Raises:
            ValueError: If a todo with the same ID is already stored
        """
        ...

    def replace(self, todo: Todo) -> None:
        """
        Overwrite the stored snapshot of an existing todo.

        Raises:
            ValueError: If the todo is not stored
        """
        ...

    def remove(self, todo_id: TodoId) -> None:
        """Remove a todo. Removing an absent ID is a no-op."""
        ...
