from abc import ABC, abstractmethod
from typing import Any

from core.domain.models.task import NewTask, Task


class TaskRepository(ABC):
    """
    Puerto de almacenamiento de tareas.

    Los identificadores con forma incorrecta lanzan `MalformedIdentifierError`;
    un identificador bien formado sin registro devuelve None.
    """

    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def add(self, new_task: NewTask) -> Task:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: str) -> Task | None:
        raise NotImplementedError
