from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from core.domain.ports.task_repository import TaskRepository
from infrastructure.settings import Settings


def _create(client, **body):
    response = client.post("/tasks", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_service_info(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Task Manager API"}


def test_create_applies_defaults(client):
    task = _create(client, title="Buy milk")

    assert task == {
        "id": 1,
        "title": "Buy milk",
        "description": "",
        "completed": False,
        "status": "pending",
    }


@pytest.mark.parametrize(
    "body",
    [{}, {"title": ""}, {"title": 12}, {"title": None}, {"description": "no title"}],
)
def test_create_rejects_missing_or_invalid_title(client, body):
    response = client.post("/tasks", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "title is required and must be a string"}
    assert client.get("/tasks").json() == []


def test_create_rejects_unknown_status(client):
    response = client.post("/tasks", json={"title": "x", "status": "done"})

    assert response.status_code == 400
    assert "status must be one of" in response.json()["error"]
    assert client.get("/tasks").json() == []


def test_create_rejects_malformed_json(client):
    response = client.post(
        "/tasks", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_list_filters_by_status(client):
    _create(client, title="a")
    _create(client, title="b", status="in-progress")
    _create(client, title="c", status="in-progress")

    in_progress = client.get("/tasks", params={"status": "in-progress"}).json()

    assert [t["title"] for t in in_progress] == ["b", "c"]
    assert len(client.get("/tasks").json()) == 3


def test_list_ignores_unknown_status(client):
    _create(client, title="a")

    assert len(client.get("/tasks", params={"status": "done"}).json()) == 1


def test_list_search_is_case_insensitive_on_title_and_description(client):
    _create(client, title="Alpha release")
    _create(client, title="Notes", description="about alpha")
    _create(client, title="Beta")

    lower = client.get("/tasks", params={"q": "alpha"}).json()
    upper = client.get("/tasks", params={"q": "ALPHA"}).json()

    assert [t["title"] for t in lower] == ["Alpha release", "Notes"]
    assert upper == lower


def test_list_blank_query_returns_everything(client):
    _create(client, title="a")
    _create(client, title="b")

    assert len(client.get("/tasks", params={"q": "   "}).json()) == 2


def test_get_unknown_and_malformed_ids(client):
    assert client.get("/tasks/99").status_code == 404
    response = client.get("/tasks/abc")
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_update_is_partial(client):
    task = _create(client, title="Write docs", description="api")

    response = client.put(f"/tasks/{task['id']}", json={"completed": True})

    assert response.status_code == 200
    assert response.json() == {**task, "completed": True}


def test_update_allows_empty_title(client):
    task = _create(client, title="Temp")

    response = client.put(f"/tasks/{task['id']}", json={"title": ""})

    assert response.status_code == 200
    assert response.json()["title"] == ""


def test_update_rejects_invalid_status_and_null(client):
    task = _create(client, title="Temp")

    assert client.put(f"/tasks/{task['id']}", json={"status": "done"}).status_code == 400
    assert client.put(f"/tasks/{task['id']}", json={"status": None}).status_code == 400
    assert client.get(f"/tasks/{task['id']}").json() == task


def test_update_unknown_id(client):
    response = client.put("/tasks/42", json={"title": "x"})

    assert response.status_code == 404


def test_delete_unknown_id_leaves_collection(client):
    _create(client, title="keep")

    response = client.delete("/tasks/42")

    assert response.status_code == 404
    assert len(client.get("/tasks").json()) == 1


def test_buy_milk_lifecycle(client):
    task = _create(client, title="Buy milk")
    assert task["status"] == "pending"
    assert task["completed"] is False

    pending = client.get("/tasks", params={"status": "pending"}).json()
    assert task["id"] in [t["id"] for t in pending]

    response = client.put(
        f"/tasks/{task['id']}", json={"completed": True, "status": "completed"}
    )
    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert response.json()["status"] == "completed"

    pending = client.get("/tasks", params={"status": "pending"}).json()
    assert task["id"] not in [t["id"] for t in pending]

    response = client.delete(f"/tasks/{task['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True}

    assert client.get(f"/tasks/{task['id']}").status_code == 404


def test_store_failures_become_generic_500():
    repository = MagicMock(spec=TaskRepository)
    repository.list.side_effect = RuntimeError("connection refused")
    repository.add.side_effect = RuntimeError("connection refused")
    app = create_app(repository=repository, settings=Settings())

    with TestClient(app) as client:
        listed = client.get("/tasks")
        created = client.post("/tasks", json={"title": "x"})

    assert listed.status_code == 500
    assert listed.json() == {"error": "Failed to fetch tasks"}
    assert created.status_code == 500
    assert created.json() == {"error": "Failed to create task"}


def test_startup_fails_when_store_is_unreachable():
    repository = MagicMock(spec=TaskRepository)
    repository.check_connection.side_effect = ConnectionError("no server")
    app = create_app(repository=repository, settings=Settings())

    with pytest.raises(Exception):
        with TestClient(app):
            pass


def test_update_without_body_returns_task_unchanged(client):
    task = _create(client, title="Untouched", description="same")

    response = client.put(f"/tasks/{task['id']}")

    assert response.status_code == 200
    assert response.json() == task


def test_update_with_non_string_title_reports_update_message(client):
    task = _create(client, title="Typed")

    response = client.put(f"/tasks/{task['id']}", json={"title": 12})

    assert response.status_code == 400
    assert response.json() == {"error": "title must be a string"}
    assert client.get(f"/tasks/{task['id']}").json() == task


@pytest.mark.parametrize(
    "body",
    [
        {"title": "x", "completed": "true"},
        {"title": "x", "completed": 1},
        {"title": "x", "description": 5},
    ],
)
def test_create_rejects_loosely_typed_fields(client, body):
    response = client.post("/tasks", json=body)

    assert response.status_code == 400
    assert client.get("/tasks").json() == []


def test_update_rejects_loosely_typed_fields(client):
    task = _create(client, title="Typed")

    assert client.put(f"/tasks/{task['id']}", json={"completed": "yes"}).status_code == 400
    assert client.put(f"/tasks/{task['id']}", json={"description": 3}).status_code == 400
    assert client.get(f"/tasks/{task['id']}").json() == task
