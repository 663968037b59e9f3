"""Common value objects shared across all domain modules."""

from .ids import TodoId

__all__ = [
    "TodoId",
]
