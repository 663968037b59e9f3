from .todo_mapper import TodoMapper

__all__ = ["TodoMapper"]
