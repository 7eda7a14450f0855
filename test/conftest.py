import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.settings import Settings


@pytest.fixture
def repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def client(repository):
    app = create_app(repository=repository, settings=Settings())
    with TestClient(app) as test_client:
        yield test_client
