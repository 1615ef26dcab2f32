import logging
from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ListTasksCommand:
    pass


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        tasks = self._repository.list()
        logger.debug("Listed %d tasks", len(tasks))
        return tasks
