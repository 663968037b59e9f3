from dataclasses import dataclass
from uuid import UUID, uuid4

from ..entity import EntityId

EMPTY_UUID = UUID(int=0)


@dataclass(frozen=True)
class TodoId(EntityId):
    """Todo identifier, generated server-side."""

    @classmethod
    def generate(cls) -> "TodoId":
        return cls(uuid4())

    @classmethod
    def empty(cls) -> "TodoId":
        """The all-zero identifier clients send when they have none."""
        return cls(EMPTY_UUID)

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY_UUID
