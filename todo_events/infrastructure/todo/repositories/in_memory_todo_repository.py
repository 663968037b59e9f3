"""Process-local Todo repository backed by an ordered list of mementos."""

import threading

from todo_events.domain.common.value_objects.ids import TodoId
from todo_events.domain.todo.entities.todo import Todo, TodoMemento


class InMemoryTodoRepository:
    """
    Keeps snapshots only, so every read hands out a new aggregate.

    Shared between requests; the lock serializes access to the list.
    """

    def __init__(self) -> None:
        self._mementos: list[TodoMemento] = []
        self._lock = threading.Lock()

    def _index_of(self, todo_id: TodoId) -> int | None:
        for index, memento in enumerate(self._mementos):
            if memento.id == todo_id:
                return index
        return None

    def find_by_id(self, todo_id: TodoId) -> Todo | None:
        with self._lock:
            index = self._index_of(todo_id)
            return Todo.restore(self._mementos[index]) if index is not None else None

    def find_by_description(self, description: str) -> Todo | None:
        with self._lock:
            for memento in self._mementos:
                if memento.description == description:
                    return Todo.restore(memento)
        return None

    def list_all(self) -> list[Todo]:
        with self._lock:
            return [Todo.restore(memento) for memento in self._mementos]

    def count(self) -> int:
        with self._lock:
            return len(self._mementos)

    def add(self, todo: Todo) -> None:
        with self._lock:
            if self._index_of(todo.id) is not None:
                raise ValueError(f"Todo {todo.id} already exists")
            self._mementos.append(todo.snapshot())

    def replace(self, todo: Todo) -> None:
        with self._lock:
            index = self._index_of(todo.id)
            if index is None:
                raise ValueError(f"Todo {todo.id} not found")
            self._mementos[index] = todo.snapshot()

    def remove(self, todo_id: TodoId) -> None:
        with self._lock:
            index = self._index_of(todo_id)
            if index is not None:
                del self._mementos[index]
