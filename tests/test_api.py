"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.http_server import create_app
from store import TodoStore


@pytest.fixture
def store():
    """Create a fresh todo store."""
    return TodoStore()


@pytest.fixture
def static_dir(tmp_path):
    """Create a static directory holding a minimal UI."""
    (tmp_path / "index.html").write_text("<html><body>todo ui</body></html>")
    return tmp_path


@pytest.fixture
def client(store, static_dir):
    """Create test client."""
    return TestClient(create_app(store=store, static_dir=str(static_dir)))


class TestTodoEndpoints:
    """Test todo-related endpoints."""

    def test_list_empty(self, client):
        """Test listing with no todos."""
        response = client.get("/todo")

        assert response.status_code == 200
        assert response.json() == []

    def test_add_todo(self, client, store):
        """Test creating a new todo."""
        response = client.post("/todo", json={"message": "buy milk"})

        assert response.status_code == 201
        todo_id = response.json()["id"]
        assert store.get(todo_id).message == "buy milk"

    def test_add_empty_message(self, client):
        """Test that an empty message is accepted."""
        response = client.post("/todo", json={"message": ""})

        assert response.status_code == 201

    def test_add_missing_message(self, client):
        """Test that a body without a message is rejected."""
        response = client.post("/todo", json={})

        assert response.status_code == 422

    def test_complete_missing_id(self, client, store):
        """Test that completing without an id is rejected."""
        store.add("walk dog")

        response = client.put("/todo", json={})

        assert response.status_code == 422
        assert [t.complete for t in store.list()] == [False]

    def test_list_todos(self, client):
        """Test listing todos keeps insertion order and field names."""
        first = client.post("/todo", json={"message": "first"}).json()["id"]
        second = client.post("/todo", json={"message": "second"}).json()["id"]

        response = client.get("/todo")

        assert response.status_code == 200
        assert response.json() == [
            {"id": first, "message": "first", "complete": False},
            {"id": second, "message": "second", "complete": False},
        ]

    def test_get_todo(self, client, store):
        """Test getting a specific todo."""
        todo_id = store.add("read book")

        response = client.get(f"/todo/{todo_id}")

        assert response.status_code == 200
        assert response.json() == {"id": todo_id, "message": "read book", "complete": False}

    def test_get_todo_not_found(self, client):
        """Test getting non-existent todo."""
        response = client.get("/todo/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Todo not found"

    def test_complete_todo(self, client, store):
        """Test marking a todo as complete."""
        todo_id = store.add("walk dog")
        other_id = store.add("feed cat")

        response = client.put("/todo", json={"id": todo_id})

        assert response.status_code == 200
        assert response.json()["complete"] is True
        assert store.get(todo_id).complete is True
        assert store.get(other_id).complete is False

    def test_complete_twice(self, client, store):
        """Test completing an already complete todo."""
        todo_id = store.add("walk dog")

        assert client.put("/todo", json={"id": todo_id}).status_code == 200
        response = client.put("/todo", json={"id": todo_id})

        assert response.status_code == 200
        assert response.json()["complete"] is True

    def test_complete_not_found(self, client):
        """Test completing a non-existent todo."""
        response = client.put("/todo", json={"id": "missing"})

        assert response.status_code == 404

    def test_delete_todo(self, client, store):
        """Test deleting a todo."""
        ids = [store.add(m) for m in ("a", "b", "c")]

        response = client.delete(f"/todo/{ids[1]}")

        assert response.status_code == 200
        assert response.json()["message"] == "Todo deleted successfully"
        assert [t.id for t in store.list()] == [ids[0], ids[2]]

    def test_delete_not_found(self, client, store):
        """Test deleting a todo that was already deleted."""
        todo_id = store.add("a")
        client.delete(f"/todo/{todo_id}")

        response = client.delete(f"/todo/{todo_id}")

        assert response.status_code == 404
        assert len(store) == 0


class TestStaticFallback:
    """Test serving the single-page UI."""

    def test_root_serves_index(self, client):
        """Test the UI is served at the root."""
        response = client.get("/")

        assert response.status_code == 200
        assert "todo ui" in response.text

    def test_api_routes_take_priority(self, client):
        """Test API paths are not shadowed by the static mount."""
        response = client.get("/todo")

        assert response.headers["content-type"].startswith("application/json")

    def test_missing_static_dir(self, store, tmp_path):
        """Test the API still works without a UI directory."""
        client = TestClient(create_app(store=store, static_dir=str(tmp_path / "nope")))

        assert client.get("/").status_code == 404
        assert client.get("/todo").status_code == 200


class TestHealthEndpoints:
    """Test health and status endpoints."""

    def test_health_endpoint(self, client, store):
        """Test health check endpoint."""
        store.add("one")
        store.add("two")

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["todos"] == 2

    def test_each_app_gets_its_own_store(self, static_dir):
        """Test apps built without a store do not share state."""
        first = TestClient(create_app(static_dir=str(static_dir)))
        second = TestClient(create_app(static_dir=str(static_dir)))

        first.post("/todo", json={"message": "only here"})

        assert len(first.get("/todo").json()) == 1
        assert second.get("/todo").json() == []
