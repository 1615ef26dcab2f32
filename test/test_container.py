import pytest

from infrastructure.config import Settings
from infrastructure.container import Container, build_container, build_task_repository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TASK_STORE", " Peewee ")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("RELOAD", "no")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://example.com")

    settings = Settings.from_env()

    assert settings.task_store == "peewee"
    assert settings.port == 9000
    assert settings.reload is False
    assert settings.cors_origins == ["http://localhost:5173", "http://example.com"]


def test_settings_defaults(monkeypatch):
    for name in ("TASK_STORE", "MONGO_DB_NAME", "CORS_ORIGINS", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.task_store == "mongo"
    assert settings.mongo_db_name == "task_manager"
    assert settings.cors_origins == ["*"]
    assert settings.port == 8000


def test_build_container_with_peewee_store():
    container = build_container(
        Settings(task_store="peewee", database_url="sqlite:///:memory:")
    )

    assert isinstance(container, Container)
    assert isinstance(container.repository, PeeweeTaskRepository)
    assert container.create_task._repository is container.repository
    assert container.list_tasks.execute() == []
    container.repository.db.drop_tables([TaskModel])
    container.repository.db.close()


def test_unknown_store_is_rejected():
    with pytest.raises(ValueError):
        build_task_repository(Settings(task_store="redis"))
