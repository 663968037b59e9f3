"""Identifier checks applied at the application boundary."""

from todo_events.domain.common.value_objects.ids import TodoId


def is_valid_todo_reference(todo_id: TodoId) -> bool:
    """
    Tell whether an identifier may address an existing todo.

    The empty sentinel never does. Reads, updates and completion treat it
    as not found, while delete accepts it as a no-op.
    """
    return not todo_id.is_empty
