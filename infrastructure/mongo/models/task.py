from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator

from core.domain.models.task import Priority, Task
from core.domain.timeutils import normalize_timestamp


class TaskDocument(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    due_date: datetime | None = Field(default=None, alias="dueDate")
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"populate_by_name": True}

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_to_str(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            due_date=normalize_timestamp(self.due_date) if self.due_date else None,
            priority=self.priority,
            completed=self.completed,
            created_at=normalize_timestamp(self.created_at),
            updated_at=normalize_timestamp(self.updated_at),
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskDocument":
        """
        Crea un TaskDocument a partir de una entidad de dominio.

        Argumentos:
            task (Task): La entidad de dominio.

        Retorna:
            TaskDocument: El documento de MongoDB.
        """
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

    def to_mongo(self) -> dict[str, Any]:
        """Diccionario listo para `insert_one`, con `_id` como ObjectId."""
        doc = self.model_dump(by_alias=True, exclude_none=True, mode="python")
        doc["_id"] = ObjectId(self.id)
        doc["priority"] = self.priority.value
        return doc
