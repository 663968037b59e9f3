"""Todo domain module."""

from .entities.todo import MIN_DESCRIPTION_LENGTH, Todo, TodoMemento
from .events import TodoCompleted

__all__ = [
    "MIN_DESCRIPTION_LENGTH",
    "Todo",
    "TodoCompleted",
    "TodoMemento",
]
