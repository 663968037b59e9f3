"""Use case for creating todos."""

import threading

import structlog

from todo_events.application.common.unit_of_work import UnitOfWork
from todo_events.application.todo.protocols.todo_repository import TodoRepositoryProtocol
from todo_events.application.todo.use_cases.exceptions import DuplicateTodoDescriptionError
from todo_events.domain.todo.entities.todo import Todo

logger = structlog.get_logger(__name__)

# Shared by every instance: the duplicate check and the insert must not
# interleave across request threads
_create_lock = threading.Lock()


class CreateTodoUseCase:
    """Use case for creating todos."""

    def __init__(
        self,
        todo_repository: TodoRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository and unit of work."""
        self.todo_repository = todo_repository
        self.unit_of_work = unit_of_work

    def create_todo(self, description: str | None) -> Todo:
        """
        Create a new todo.

        Descriptions are compared exactly as given, so "Milk" and "Milk "
        are different todos.

        Args:
            description: Description text for the todo

        Returns:
            Created todo domain entity

        Raises:
            ValidationError: If description is missing, blank or too short
            DuplicateTodoDescriptionError: If another todo has the same description
        """
        todo = Todo.create(description)

        with _create_lock, self.unit_of_work:
            if self.todo_repository.find_by_description(todo.description) is not None:
                raise DuplicateTodoDescriptionError(todo.description)

            self.todo_repository.add(todo)
            self.unit_of_work.track(todo)
            self.unit_of_work.commit()

        logger.info("created_todo", todo_id=str(todo.id))
        return todo
