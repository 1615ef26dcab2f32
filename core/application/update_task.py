import logging
from dataclasses import dataclass
from typing import Any

from core.domain.errors import NotFoundError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import parse_task_id, validate_update

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    id: str
    payload: Any = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: UpdateTaskCommand) -> Task:
        """
        Aplica una actualización parcial.

        El id se comprueba antes que el cuerpo, de modo que un id mal formado
        siempre gana a un error de validación.
        """
        task_id = parse_task_id(cmd.id)
        changes = validate_update(cmd.payload)
        task = self._repository.update(task_id, changes)
        if task is None:
            raise NotFoundError(task_id)
        logger.info("Updated task %s fields=%s", task_id, sorted(changes))
        return task
