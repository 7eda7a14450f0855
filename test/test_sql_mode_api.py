import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db
from infrastructure.settings import Settings


@pytest.fixture
def sql_client():
    app = create_app(settings=Settings(database_url="sqlite:///:memory:"))
    try:
        with TestClient(app) as client:
            yield client
    finally:
        db.drop_tables([TaskModel])
        db.close()


def test_in_memory_sqlite_serves_requests_across_threads(sql_client):
    created = sql_client.post("/tasks", json={"title": "Buy milk"})

    assert created.status_code == 201
    task = created.json()
    assert task["id"] == 1
    assert task["status"] == "pending"

    listed = sql_client.get("/tasks")
    assert listed.status_code == 200
    assert [t["title"] for t in listed.json()] == ["Buy milk"]

    updated = sql_client.put("/tasks/1", json={"completed": True, "status": "completed"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "completed"

    assert sql_client.get("/tasks", params={"status": "pending"}).json() == []
    assert sql_client.delete("/tasks/1").json() == {"success": True}
    assert sql_client.get("/tasks/1").status_code == 404
