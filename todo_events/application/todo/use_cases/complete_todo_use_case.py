"""Use case for completing todos."""

from uuid import UUID

import structlog

from todo_events.application.common.unit_of_work import UnitOfWork
from todo_events.application.todo.protocols.todo_repository import TodoRepositoryProtocol
from todo_events.application.todo.references import is_valid_todo_reference
from todo_events.application.todo.use_cases.exceptions import TodoNotFoundError
from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo

logger = structlog.get_logger(__name__)


class CompleteTodoUseCase:
    """Use case for marking todos complete."""

    def __init__(
        self,
        todo_repository: TodoRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository and unit of work."""
        self.todo_repository = todo_repository
        self.unit_of_work = unit_of_work

    def complete_todo(self, todo_id: UUID) -> Todo:
        """
        Mark a todo complete and notify observers.

        Completing an already complete todo succeeds and notifies again.
        The new state is committed before the TodoCompleted event is
        published, so a failing handler does not undo the completion.

        Raises:
            TodoNotFoundError: If the ID is the empty sentinel or unknown
            EventHandlerError: If a completion handler failed after commit
        """
        todo_id_vo = TodoId(todo_id)
        if not is_valid_todo_reference(todo_id_vo):
            raise TodoNotFoundError(todo_id)

        with self.unit_of_work:
            todo = self.todo_repository.find_by_id(todo_id_vo)
            if todo is None:
                raise TodoNotFoundError(todo_id)

            todo.complete()
            self.todo_repository.replace(todo)
            self.unit_of_work.track(todo)
            self.unit_of_work.commit()

        logger.info("completed_todo", todo_id=str(todo_id))
        return todo
