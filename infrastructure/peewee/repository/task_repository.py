from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from peewee import Database

from core.domain.models.task import NewTask, Priority, Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.timeutils import next_update_stamp, normalize_timestamp, utc_now
from core.domain.validation import parse_task_id, validate_priority
from infrastructure.peewee.model.models import TaskModel


def _to_db(value: datetime | None) -> datetime | None:
    # SQLite guarda datetimes sin zona; se almacenan siempre en UTC.
    if value is None:
        return None
    return normalize_timestamp(value).replace(tzinfo=None)


def _from_db(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return normalize_timestamp(value.replace(tzinfo=timezone.utc))


def _to_domain(row: TaskModel) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        due_date=_from_db(row.due_date),
        priority=Priority(row.priority),
        completed=row.completed,
        created_at=_from_db(row.created_at),
        updated_at=_from_db(row.updated_at),
    )


class PeeweeTaskRepository(TaskRepository):
    def __init__(self, db: Database) -> None:
        self.db = db
        self.db.bind([TaskModel])
        # Sin migraciones: la tabla se crea al arrancar si no existe.
        self.db.connect(reuse_if_open=True)
        self.db.create_tables([TaskModel], safe=True)

    def list(self) -> list[Task]:
        query = TaskModel.select().order_by(
            TaskModel.created_at.desc(), TaskModel.id.desc()
        )
        return [_to_domain(row) for row in query]

    def add(self, new_task: NewTask) -> Task:
        now = utc_now()
        with self.db.atomic():
            row = TaskModel.create(
                id=str(ObjectId()),
                title=new_task.title,
                description=new_task.description,
                due_date=_to_db(new_task.due_date),
                priority=validate_priority(new_task.priority).value,
                completed=new_task.completed,
                created_at=_to_db(now),
                updated_at=_to_db(now),
            )
        return _to_domain(row)

    def get(self, task_id: str) -> Task | None:
        row = TaskModel.get_or_none(TaskModel.id == parse_task_id(task_id))
        if row is None:
            return None
        return _to_domain(row)

    def update(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        with self.db.atomic():
            row = TaskModel.get_or_none(TaskModel.id == parse_task_id(task_id))
            if row is None:
                return None
            for name, value in changes.items():
                if name == "priority":
                    value = validate_priority(value).value
                elif name == "due_date":
                    value = _to_db(value)
                setattr(row, name, value)
            row.updated_at = _to_db(next_update_stamp(_from_db(row.updated_at)))
            row.save()
        return _to_domain(row)

    def delete(self, task_id: str) -> Task | None:
        with self.db.atomic():
            row = TaskModel.get_or_none(TaskModel.id == parse_task_id(task_id))
            if row is None:
                return None
            task = _to_domain(row)
            row.delete_instance()
        return task
