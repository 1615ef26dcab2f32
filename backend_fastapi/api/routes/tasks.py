from typing import Any

from fastapi import APIRouter, Body, Depends, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import MessageOut, TaskDeletedOut, TaskOut
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskCommand, GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase

router = APIRouter(prefix="/tasks", tags=["tasks"])

_RESPONSE_OPTIONS: dict[str, Any] = {
    "response_model_by_alias": True,
    "response_model_exclude_none": True,
}

_ERRORS_400 = {status.HTTP_400_BAD_REQUEST: {"model": MessageOut}}
_ERRORS_ID = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageOut},
    status.HTTP_404_NOT_FOUND: {"model": MessageOut},
}


@router.get(
    "",
    response_model=list[TaskOut],
    summary="List all tasks",
    **_RESPONSE_OPTIONS,
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskOut]:
    """
    Devuelve todas las tareas, de la más reciente a la más antigua.
    """
    return [TaskOut.from_domain(task) for task in use_case.execute()]


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses=_ERRORS_400,
    **_RESPONSE_OPTIONS,
)
def create_task(
    payload: Any = Body(default=None),
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskOut:
    """
    Crea una nueva tarea.

    - **title**: Título obligatorio (no vacío).
    - **description**: Descripción opcional.
    - **dueDate**: Fecha límite opcional (ISO-8601).
    - **priority**: Low, Medium o High (por defecto Medium).
    """
    return TaskOut.from_domain(use_case.execute(CreateTaskCommand(payload=payload)))


@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Get a task by id",
    responses=_ERRORS_ID,
    **_RESPONSE_OPTIONS,
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskOut:
    return TaskOut.from_domain(use_case.execute(GetTaskCommand(id=task_id)))


@router.put(
    "/{task_id}",
    response_model=TaskOut,
    summary="Update a task",
    responses=_ERRORS_ID,
    **_RESPONSE_OPTIONS,
)
@router.patch(
    "/{task_id}",
    response_model=TaskOut,
    summary="Partially update a task",
    responses=_ERRORS_ID,
    **_RESPONSE_OPTIONS,
)
def update_task(
    task_id: str,
    payload: Any = Body(default=None),
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskOut:
    """
    Modifica solo los campos enviados.

    - **task_id**: Id de la tarea a modificar.
    - **dueDate**: `null` elimina la fecha límite.
    """
    cmd = UpdateTaskCommand(id=task_id, payload=payload)
    return TaskOut.from_domain(use_case.execute(cmd))


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedOut,
    summary="Delete a task",
    responses=_ERRORS_ID,
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> TaskDeletedOut:
    """
    Elimina una tarea de forma permanente.

    - **task_id**: Id de la tarea a eliminar.
    """
    task = use_case.execute(DeleteTaskCommand(id=task_id))
    return TaskDeletedOut(id=task.id, title=task.title)
