from .todo_schemas import (
    Todo,
    TodoCreateRequest,
    TodoDeleteResponse,
    TodoUpdateRequest,
)

__all__ = [
    "Todo",
    "TodoCreateRequest",
    "TodoDeleteResponse",
    "TodoUpdateRequest",
]
