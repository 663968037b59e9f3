"""Identity-bearing domain objects and their typed identifiers."""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    UUID identifier with its own type per entity.

    Two ids wrapping the same UUID are only equal when they are of the
    same class.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError(f"{type(self).__name__} must wrap a UUID, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """An object that keeps its identity while its attributes change."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.id == other.id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"
