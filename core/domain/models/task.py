from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(slots=True)
class NewTask:
    """Datos validados para insertar una tarea; el store asigna id y timestamps."""

    title: str
    description: str | None = None
    due_date: datetime | None = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False


@dataclass(slots=True)
class Task:
    id: str
    title: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    due_date: datetime | None = None
    priority: Priority = Priority.MEDIUM
    completed: bool = False
