import pytest
from fastapi.testclient import TestClient

from backend_fastapi.main import create_app
from fakes import InMemoryTaskRepository
from infrastructure.config import Settings
from infrastructure.container import Container


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def app(repository):
    return create_app(
        settings=Settings(), container=Container.from_repository(repository)
    )


@pytest.fixture
def client(app):
    return TestClient(app)
