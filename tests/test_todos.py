"""Tests for todo API endpoints."""

from uuid import UUID

import pytest
from dependency_injector import providers
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from todo_events import models
from todo_events.application.common.event_dispatcher import EventDispatcher
from todo_events.core import container
from todo_events.domain.todo.events import TodoCompleted

ROOT = "/api/v1/todo/"
EMPTY_ID = str(UUID(int=0))


def create_todo(client: TestClient, description: str) -> dict:
    response = client.post(ROOT, json={"description": description})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestCreateTodo:
    """Test suite for POST /todo/ endpoint."""

    def test_create_todo_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post(ROOT, json={"description": "Bla bla bla"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["description"] == "Bla bla bla"
        assert data["isComplete"] is False
        assert UUID(data["id"]) != UUID(int=0)

        db_todo = db_session.query(models.Todo).filter_by(id=UUID(data["id"])).first()
        assert db_todo is not None
        assert db_todo.description == "Bla bla bla"

    def test_create_duplicate_description_fails(self, client: TestClient) -> None:
        create_todo(client, "Ololosh")

        response = client.post(ROOT, json={"description": "Ololosh"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert client.get(ROOT + "count").json() == 1

    @pytest.mark.parametrize("description", [" a", "Milk "])
    def test_create_keeps_surrounding_whitespace(
        self, client: TestClient, db_session: Session, description: str
    ) -> None:
        response = client.post(ROOT, json={"description": description})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["description"] == description
        db_todo = db_session.query(models.Todo).filter_by(id=UUID(response.json()["id"])).first()
        assert db_todo is not None
        assert db_todo.description == description

    @pytest.mark.parametrize("description", ["O", "       ", None, ""])
    def test_create_invalid_description_fails(
        self, client: TestClient, description: str | None
    ) -> None:
        response = client.post(ROOT, json={"description": description})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "description"
        assert client.get(ROOT + "count").json() == 0


class TestReadTodos:
    """Test suite for GET /todo/ endpoints."""

    def test_list_contains_created_todo(self, client: TestClient) -> None:
        created = create_todo(client, "Bla bla bla")

        response = client.get(ROOT)

        assert response.status_code == status.HTTP_200_OK
        assert [todo["id"] for todo in response.json()] == [created["id"]]

    def test_list_keeps_creation_order(self, client: TestClient) -> None:
        ids = [create_todo(client, name)["id"] for name in ("First", "Second", "Third")]

        assert [todo["id"] for todo in client.get(ROOT).json()] == ids

    def test_get_todo(self, client: TestClient) -> None:
        created = create_todo(client, "Bla bla bla")

        response = client.get(ROOT + created["id"])

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    def test_count(self, client: TestClient) -> None:
        create_todo(client, "One")

        response = client.get(ROOT + "count")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == 1

    def test_get_rejects_empty_id(self, client: TestClient) -> None:
        response = client.get(ROOT + EMPTY_ID)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_unknown_id(self, client: TestClient) -> None:
        response = client.get(ROOT + "8b1f4a5e-0e0f-4c1e-9a45-3c2d3e9f0a11")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateTodo:
    """Test suite for PUT /todo/:id endpoint."""

    def test_update_changes_description_but_not_completion(self, client: TestClient) -> None:
        created = create_todo(client, "Bla bla bla")

        response = client.put(
            ROOT + created["id"],
            json={"id": created["id"], "description": "Foo Bar Baz", "isComplete": True},
        )

        assert response.status_code == status.HTTP_200_OK
        result = client.get(ROOT + created["id"]).json()
        assert result["description"] == "Foo Bar Baz"
        assert result["isComplete"] is False

    def test_update_with_invalid_description_keeps_old_one(self, client: TestClient) -> None:
        created = create_todo(client, "Bla bla bla")

        response = client.put(ROOT + created["id"], json={"description": " "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(ROOT + created["id"]).json()["description"] == "Bla bla bla"

    def test_update_rejects_empty_id(self, client: TestClient) -> None:
        response = client.put(ROOT + EMPTY_ID, json={"description": "Bla bla bla"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteTodo:
    """Test suite for DELETE /todo/:id endpoint."""

    def test_delete_todo(self, client: TestClient) -> None:
        created = create_todo(client, "Bla bla bla")

        response = client.delete(ROOT + created["id"])

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert all(todo["id"] != created["id"] for todo in client.get(ROOT).json())

    def test_delete_accepts_empty_id(self, client: TestClient) -> None:
        response = client.delete(ROOT + EMPTY_ID)

        assert response.status_code == status.HTTP_200_OK

    def test_delete_unknown_id_is_noop(self, client: TestClient) -> None:
        create_todo(client, "Bla bla bla")

        response = client.delete(ROOT + "8b1f4a5e-0e0f-4c1e-9a45-3c2d3e9f0a11")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(ROOT + "count").json() == 1


class TestMakeComplete:
    """Test suite for POST /todo/:id/MakeComplete endpoint."""

    def test_make_complete_notifies_observers(self, client: TestClient) -> None:
        created = create_todo(client, "MakeComplete")

        with client.websocket_connect("/hub") as observer:
            response = client.post(ROOT + created["id"] + "/MakeComplete")
            assert response.status_code == status.HTTP_200_OK
            assert observer.receive_text() == "MakeComplete is complete"

        result = client.get(ROOT + created["id"]).json()
        assert result["id"] == created["id"]
        assert result["description"] == "MakeComplete"
        assert result["isComplete"] is True

    def test_every_observer_is_notified(self, client: TestClient) -> None:
        created = create_todo(client, "Water plants")

        with client.websocket_connect("/hub") as first, client.websocket_connect("/hub") as second:
            client.post(ROOT + created["id"] + "/MakeComplete")

            assert first.receive_text() == "Water plants is complete"
            assert second.receive_text() == "Water plants is complete"

    def test_completing_twice_notifies_twice(self, client: TestClient) -> None:
        created = create_todo(client, "Twice")

        with client.websocket_connect("/hub") as observer:
            client.post(ROOT + created["id"] + "/MakeComplete")
            client.post(ROOT + created["id"] + "/MakeComplete")

            assert observer.receive_text() == "Twice is complete"
            assert observer.receive_text() == "Twice is complete"

    def test_make_complete_without_observers(self, client: TestClient) -> None:
        created = create_todo(client, "Nobody listens")

        response = client.post(ROOT + created["id"] + "/MakeComplete")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["isComplete"] is True

    def test_make_complete_rejects_empty_id(self, client: TestClient) -> None:
        response = client.post(ROOT + EMPTY_ID + "/MakeComplete")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_failed_notification_keeps_completed_state(self, client: TestClient) -> None:
        created = create_todo(client, "Fragile")

        def failing_handler(event: TodoCompleted) -> None:
            raise RuntimeError("push failed")

        failing_dispatcher = EventDispatcher()
        failing_dispatcher.register(TodoCompleted, failing_handler)
        failing_dispatcher.freeze()

        with container.event_dispatcher.override(providers.Object(failing_dispatcher)):
            response = client.post(ROOT + created["id"] + "/MakeComplete")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert client.get(ROOT + created["id"]).json()["isComplete"] is True
