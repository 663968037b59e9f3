"""API routes for todo management."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from todo_events.application.common.event_dispatcher import EventHandlerError
from todo_events.application.todo.use_cases import (
    CompleteTodoUseCase,
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodosUseCase,
    UpdateTodoUseCase,
)
from todo_events.core import container
from todo_events.domain.common.exceptions import DomainError
from todo_events.domain.todo.entities.todo import Todo as TodoEntity
from todo_events.exceptions import TodoServiceError
from todo_events.infrastructure.common.di import inject_use_case
from todo_events.infrastructure.todo.schemas import (
    Todo,
    TodoCreateRequest,
    TodoDeleteResponse,
    TodoUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todo", tags=["todo"])

# Errors with their own exception handlers in main.py
_HANDLED_ERRORS = (TodoServiceError, DomainError, EventHandlerError)


def _to_schema(todo: TodoEntity) -> Todo:
    return Todo(id=todo.id.value, description=todo.description, is_complete=todo.is_complete)


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/", response_model=list[Todo], status_code=status.HTTP_200_OK)
def list_todos(
    use_case: GetTodosUseCase = Depends(inject_use_case(container.get_todos_use_case)),
) -> list[Todo]:
    """Get all todos in the order they were created."""
    return [_to_schema(todo) for todo in use_case.list_todos()]


@router.get("/count", response_model=int, status_code=status.HTTP_200_OK)
def count_todos(
    use_case: GetTodosUseCase = Depends(inject_use_case(container.get_todos_use_case)),
) -> int:
    """Get the number of todos."""
    return use_case.count_todos()


@router.get("/{todo_id}", response_model=Todo, status_code=status.HTTP_200_OK)
def get_todo(
    todo_id: UUID,
    use_case: GetTodosUseCase = Depends(inject_use_case(container.get_todos_use_case)),
) -> Todo:
    """
    Get a single todo.

    Raises:
        TodoNotFoundError: If the todo does not exist or the ID is all zeros
    """
    return _to_schema(use_case.get_todo(todo_id))


@router.post("/", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    request: TodoCreateRequest,
    use_case: CreateTodoUseCase = Depends(inject_use_case(container.create_todo_use_case)),
) -> Todo:
    """
    Create a todo.

    Args:
        request: Request containing the description

    Returns:
        Created todo

    Raises:
        HTTPException: If the description is invalid or already used
    """
    try:
        return _to_schema(use_case.create_todo(request.description))
    except _HANDLED_ERRORS:
        raise
    except Exception as e:
        raise _unexpected("create todo", e) from e


@router.put("/{todo_id}", response_model=Todo, status_code=status.HTTP_200_OK)
def update_todo(
    todo_id: UUID,
    request: TodoUpdateRequest,
    use_case: UpdateTodoUseCase = Depends(inject_use_case(container.update_todo_use_case)),
) -> Todo:
    """
    Update a todo's description.

    The isComplete field of the request is ignored; use MakeComplete.

    Args:
        todo_id: ID of the todo to update
        request: Request containing the new description

    Returns:
        Updated todo
    """
    try:
        return _to_schema(use_case.update_todo(todo_id, request.description))
    except _HANDLED_ERRORS:
        raise
    except Exception as e:
        raise _unexpected(f"update todo {todo_id}", e) from e


@router.post("/{todo_id}/MakeComplete", response_model=Todo, status_code=status.HTTP_200_OK)
def make_complete(
    todo_id: UUID,
    use_case: CompleteTodoUseCase = Depends(inject_use_case(container.complete_todo_use_case)),
) -> Todo:
    """
    Mark a todo complete.

    Connected observers on the notification hub receive
    "<description> is complete".
    """
    try:
        return _to_schema(use_case.complete_todo(todo_id))
    except _HANDLED_ERRORS:
        raise
    except Exception as e:
        raise _unexpected(f"complete todo {todo_id}", e) from e


@router.delete("/{todo_id}", response_model=TodoDeleteResponse, status_code=status.HTTP_200_OK)
def delete_todo(
    todo_id: UUID,
    use_case: DeleteTodoUseCase = Depends(inject_use_case(container.delete_todo_use_case)),
) -> TodoDeleteResponse:
    """
    Delete a todo.

    Succeeds for unknown IDs and the all-zero ID as well.
    """
    try:
        use_case.delete_todo(todo_id)
        return TodoDeleteResponse(success=True, message="Todo deleted successfully")
    except _HANDLED_ERRORS:
        raise
    except Exception as e:
        raise _unexpected(f"delete todo {todo_id}", e) from e
