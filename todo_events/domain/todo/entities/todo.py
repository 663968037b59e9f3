"""
Todo aggregate and its persistence snapshot.
"""

from dataclasses import dataclass

from todo_events.domain.common.aggregate_root import AggregateRoot
from todo_events.domain.common.exceptions import ValidationError
from todo_events.domain.common.value_object import ValueObject
from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.events import TodoCompleted

MIN_DESCRIPTION_LENGTH = 2


def _validated_description(description: object) -> str:
    if not isinstance(description, str) or not description.strip():
        raise ValidationError("Description cannot be empty", field="description")
    # Length counts the text as given, surrounding whitespace included
    if len(description) < MIN_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters long",
            field="description",
            value=description,
        )
    return description


@dataclass(frozen=True)
class TodoMemento(ValueObject):
    """Plain copy of the persisted todo fields. Carries no behavior."""

    id: TodoId
    description: str
    is_complete: bool


@dataclass(eq=False)
class Todo(AggregateRoot[TodoId]):
    """
    A single task.

    Business Rules:
    - Description is required, not blank, and at least two characters long;
      it is stored exactly as given
    - Completion is only reachable through complete(), never through describe()
    - Every complete() call raises a TodoCompleted event, even when the todo
      was already complete
    """

    id: TodoId
    description: str
    is_complete: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.description = _validated_description(self.description)

    def describe(self, description: str | None) -> None:
        """
        Replace the description.

        Raises:
            ValidationError: If description is blank or too short; the todo
                keeps its previous description
        """
        self.description = _validated_description(description)

    def complete(self) -> None:
        """Mark the todo complete and record the completion event."""
        self.is_complete = True
        self._record_event(TodoCompleted(todo_id=self.id, description=self.description))

    def snapshot(self) -> TodoMemento:
        """Capture the persisted fields."""
        return TodoMemento(id=self.id, description=self.description, is_complete=self.is_complete)

    @classmethod
    def create(cls, description: str | None) -> "Todo":
        """Create a new, incomplete todo with a fresh identifier."""
        return cls(id=TodoId.generate(), description=description)

    @classmethod
    def restore(cls, memento: TodoMemento) -> "Todo":
        """Rehydrate a todo from its snapshot. Raises no events."""
        return cls(id=memento.id, description=memento.description, is_complete=memento.is_complete)
