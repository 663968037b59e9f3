from .in_memory_todo_repository import InMemoryTodoRepository
from .todo_repository import TodoRepository

__all__ = ["InMemoryTodoRepository", "TodoRepository"]
