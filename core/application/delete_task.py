import logging
from dataclasses import dataclass

from core.domain.errors import NotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import parse_task_id

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: str


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> Task:
        task_id = parse_task_id(cmd.id)
        task = self._repository.delete(task_id)
        if task is None:
            raise NotFoundError(task_id)
        logger.info("Deleted task %s (%r)", task.id, task.title)
        return task
