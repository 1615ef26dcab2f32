"""
Reglas de validación de tareas.

Módulo único compartido por la capa de aplicación (validación de peticiones)
y por los repositorios (enum de prioridad en la frontera del almacenamiento).
Todas las funciones son puras: reciben datos crudos y devuelven el valor
validado o lanzan `ValidationError` nombrando el campo.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from bson import ObjectId
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.domain.errors import MalformedIdentifierError, ValidationError
from core.domain.models.task import NewTask, Priority
from core.domain.timeutils import normalize_timestamp

_DATETIME = TypeAdapter(datetime)
_NUMERIC = re.compile(r"[+-]?\d+(\.\d*)?")

PRIORITY_CHOICES = ", ".join(p.value for p in Priority)


def parse_task_id(raw: Any) -> str:
    """
    Comprueba que `raw` tenga forma de identificador de tarea (ObjectId hex).

    Lanza:
        MalformedIdentifierError: si no es una cadena hex de 24 caracteres.
    """
    if isinstance(raw, ObjectId):
        return str(raw)
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise MalformedIdentifierError(raw)
    return raw.lower()


def validate_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            "title", "title is required and must be a non-empty string"
        )
    return value.strip()


def validate_description(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("description", "description must be a string")
    return value.strip()


def validate_due_date(value: Any, *, allow_null: bool = False) -> datetime | None:
    if value is None:
        if allow_null:
            return None
        raise ValidationError("dueDate", "dueDate must be a valid date")
    if isinstance(value, datetime):
        parsed = value
    elif not isinstance(value, str) or not value.strip():
        raise ValidationError("dueDate", "dueDate must be a valid date")
    elif _NUMERIC.fullmatch(value.strip()):
        # pydantic leería un número como epoch Unix.
        raise ValidationError("dueDate", "Invalid due date format")
    else:
        try:
            parsed = _DATETIME.validate_python(value.strip())
        except PydanticValidationError:
            raise ValidationError("dueDate", "Invalid due date format") from None
    try:
        return normalize_timestamp(parsed)
    except OverflowError:
        # Fechas en el borde de datetime.min/max no caben en UTC.
        raise ValidationError("dueDate", "Invalid due date format") from None


def validate_priority(value: Any) -> Priority:
    if isinstance(value, Priority):
        return value
    try:
        return Priority(value)
    except ValueError:
        raise ValidationError(
            "priority", f"priority must be one of: {PRIORITY_CHOICES}"
        ) from None


def validate_completed(value: Any) -> bool:
    # bool solamente: 0/1 o "true" no cuentan.
    if not isinstance(value, bool):
        raise ValidationError("completed", "completed must be a boolean")
    return value


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("body", "Request body must be a JSON object")
    return payload


def validate_create(payload: Any) -> NewTask:
    """
    Valida el cuerpo de una creación y construye el `NewTask`.

    Falla en el primer campo inválido. Las claves desconocidas se ignoran;
    un `null` en un campo opcional es inválido, igual que en la actualización
    (salvo `dueDate: null`, que allí borra la fecha).

    Argumentos:
        payload: Cuerpo crudo de la petición.

    Retorna:
        NewTask: Datos listos para insertar (completed siempre False).
    """
    data = _require_mapping(payload)
    new_task = NewTask(title=validate_title(data.get("title")))
    if "description" in data:
        new_task.description = validate_description(data["description"])
    if "dueDate" in data:
        new_task.due_date = validate_due_date(data["dueDate"])
    if "priority" in data:
        new_task.priority = validate_priority(data["priority"])
    return new_task


def validate_update(payload: Any) -> dict[str, Any]:
    """
    Valida una actualización parcial.

    Retorna un diccionario con los nombres de atributo del dominio
    (`title`, `description`, `due_date`, `priority`, `completed`) y solo
    con las claves presentes en el cuerpo. `due_date: None` significa
    borrar la fecha límite.
    """
    data = _require_mapping(payload)
    changes: dict[str, Any] = {}
    if "title" in data:
        changes["title"] = validate_title(data["title"])
    if "description" in data:
        changes["description"] = validate_description(data["description"])
    if "dueDate" in data:
        changes["due_date"] = validate_due_date(data["dueDate"], allow_null=True)
    if "priority" in data:
        changes["priority"] = validate_priority(data["priority"])
    if "completed" in data:
        changes["completed"] = validate_completed(data["completed"])
    return changes
