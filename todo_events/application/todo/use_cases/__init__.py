from .complete_todo_use_case import CompleteTodoUseCase
from .create_todo_use_case import CreateTodoUseCase
from .delete_todo_use_case import DeleteTodoUseCase
from .get_todos_use_case import GetTodosUseCase
from .update_todo_use_case import UpdateTodoUseCase

__all__ = [
    "CompleteTodoUseCase",
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodosUseCase",
    "UpdateTodoUseCase",
]
