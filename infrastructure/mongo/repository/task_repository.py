import logging
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from core.domain.models.task import NewTask, Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.timeutils import next_update_stamp, normalize_timestamp, utc_now
from core.domain.validation import parse_task_id, validate_priority
from infrastructure.mongo.models.task import TaskDocument

logger = logging.getLogger(__name__)

# Nombre de atributo del dominio -> clave del documento.
_FIELD_NAMES = {
    "title": "title",
    "description": "description",
    "due_date": "dueDate",
    "priority": "priority",
    "completed": "completed",
}


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).
    """

    def __init__(self, db: Database[Any], collection_name: str = "tasks") -> None:
        self.db = db
        self.collection: Collection[Any] = db[collection_name]

    def ensure_indexes(self) -> None:
        name = self.collection.create_index([("createdAt", DESCENDING)])
        logger.debug("Mongo index ready: %s", name)

    def list(self) -> list[Task]:
        """
        Lista todas las tareas, de la más reciente a la más antigua.

        Retorna:
            list[Task]: Lista de todas las tareas.
        """
        docs = self.collection.find().sort(
            [("createdAt", DESCENDING), ("_id", DESCENDING)]
        )
        return [TaskDocument(**doc).to_domain() for doc in docs]

    def add(self, new_task: NewTask) -> Task:
        """
        Inserta una tarea nueva asignando id y timestamps.

        Argumentos:
            new_task (NewTask): Datos ya validados.

        Retorna:
            Task: La tarea tal y como quedó almacenada.
        """
        now = utc_now()
        task = Task(
            id=str(ObjectId()),
            title=new_task.title,
            description=new_task.description,
            due_date=new_task.due_date,
            priority=validate_priority(new_task.priority),
            completed=new_task.completed,
            created_at=now,
            updated_at=now,
        )
        self.collection.insert_one(TaskDocument.from_domain(task).to_mongo())
        return task

    def get(self, task_id: str) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            task_id (str): El ID de la tarea.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": ObjectId(parse_task_id(task_id))})
        if not doc:
            return None

        return TaskDocument(**doc).to_domain()

    def update(self, task_id: str, changes: dict[str, Any]) -> Task | None:
        """
        Aplica una actualización parcial y refresca `updatedAt`.

        Un `due_date` a None elimina el campo del documento.

        Retorna:
            Task | None: La tarea actualizada o None si no existe.
        """
        oid = ObjectId(parse_task_id(task_id))
        current = self.collection.find_one({"_id": oid}, {"updatedAt": 1})
        if not current:
            return None

        to_set: dict[str, Any] = {}
        to_unset: dict[str, Any] = {}
        for name, value in changes.items():
            key = _FIELD_NAMES[name]
            if name == "priority":
                value = validate_priority(value).value
            if value is None:
                to_unset[key] = ""
            else:
                to_set[key] = value
        to_set["updatedAt"] = next_update_stamp(
            normalize_timestamp(current["updatedAt"])
        )

        update: dict[str, Any] = {"$set": to_set}
        if to_unset:
            update["$unset"] = to_unset
        doc = self.collection.find_one_and_update(
            {"_id": oid}, update, return_document=ReturnDocument.AFTER
        )
        if not doc:
            return None
        return TaskDocument(**doc).to_domain()

    def delete(self, task_id: str) -> Task | None:
        """
        Elimina una tarea por su ID.

        Argumentos:
            task_id (str): El ID de la tarea a eliminar.

        Retorna:
            Task | None: La tarea eliminada o None si no existía.
        """
        doc = self.collection.find_one_and_delete(
            {"_id": ObjectId(parse_task_id(task_id))}
        )
        if not doc:
            return None
        return TaskDocument(**doc).to_domain()
