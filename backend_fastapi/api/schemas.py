from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.domain.models.task import Priority, Task


class TaskOut(BaseModel):
    """Representación de una tarea en la API (claves camelCase, fechas ISO-8601)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            priority=task.priority,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskDeletedOut(BaseModel):
    message: str = "Task deleted successfully"
    id: str
    title: str


class MessageOut(BaseModel):
    message: str
    field: str | None = None
