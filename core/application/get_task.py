from dataclasses import dataclass

from core.domain.errors import NotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import parse_task_id


@dataclass(slots=True)
class GetTaskCommand:
    id: str


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: GetTaskCommand) -> Task:
        task_id = parse_task_id(cmd.id)
        task = self._repository.get(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task
