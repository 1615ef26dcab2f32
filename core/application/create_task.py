import logging
from dataclasses import dataclass
from typing import Any

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_create

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    payload: Any = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        new_task = validate_create(cmd.payload)
        task = self._repository.add(new_task)
        logger.info("Created task %s (%r)", task.id, task.title)
        return task
