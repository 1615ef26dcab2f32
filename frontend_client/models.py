from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RemoteTask(BaseModel):
    """Tarea tal y como la devuelve la API. Inmutable: el estado se reemplaza, no se edita."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: Priority | None = None
    completed: bool = False
    created_at: datetime
    updated_at: datetime
