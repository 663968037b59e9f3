"""Use case for deleting todos."""

from uuid import UUID

import structlog

from todo_events.application.common.unit_of_work import UnitOfWork
from todo_events.application.todo.protocols.todo_repository import TodoRepositoryProtocol
from todo_events.domain.common.value_objects.ids import TodoId

logger = structlog.get_logger(__name__)


class DeleteTodoUseCase:
    """Use case for deleting todos."""

    def __init__(
        self,
        todo_repository: TodoRepositoryProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with repository and unit of work."""
        self.todo_repository = todo_repository
        self.unit_of_work = unit_of_work

    def delete_todo(self, todo_id: UUID) -> None:
        """
        Delete a todo.

        Idempotent: unknown IDs and the empty sentinel are accepted as no-ops.
        """
        with self.unit_of_work:
            self.todo_repository.remove(TodoId(todo_id))
            self.unit_of_work.commit()

        logger.info("deleted_todo", todo_id=str(todo_id))
