import logging
from dataclasses import dataclass

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import Settings
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.mongo.session.client import create_client, get_db
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import create_database

logger = logging.getLogger(__name__)


def build_task_repository(settings: Settings) -> TaskRepository:
    store = settings.task_store

    if store == "peewee":
        logger.info("Using peewee task store at %s", settings.database_url)
        return PeeweeTaskRepository(create_database(settings.database_url))
    elif store != "mongo":
        raise ValueError(f"Unknown TASK_STORE: {store!r}")

    # Default to Mongo
    logger.info("Using mongo task store db=%s", settings.mongo_db_name)
    client = create_client(settings.mongo_uri)
    repository = MongoTaskRepository(get_db(client, settings.mongo_db_name))
    repository.ensure_indexes()
    return repository


@dataclass(slots=True)
class Container:
    """Raíz de composición: un repositorio y los casos de uso que lo comparten."""

    repository: TaskRepository
    list_tasks: ListTasksUseCase
    create_task: CreateTaskUseCase
    get_task: GetTaskUseCase
    update_task: UpdateTaskUseCase
    delete_task: DeleteTaskUseCase

    @classmethod
    def from_repository(cls, repository: TaskRepository) -> "Container":
        return cls(
            repository=repository,
            list_tasks=ListTasksUseCase(repository=repository),
            create_task=CreateTaskUseCase(repository=repository),
            get_task=GetTaskUseCase(repository=repository),
            update_task=UpdateTaskUseCase(repository=repository),
            delete_task=DeleteTaskUseCase(repository=repository),
        )


def build_container(settings: Settings) -> Container:
    return Container.from_repository(build_task_repository(settings))
