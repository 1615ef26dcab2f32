"""
Estado local de la lista de tareas.

`reduce` es una función pura `(estado, evento) -> estado nuevo`. Las tuplas
hacen que el estado anterior nunca se modifique.
"""

from dataclasses import dataclass, replace

from frontend_client.models import RemoteTask


@dataclass(frozen=True, slots=True)
class TaskListState:
    tasks: tuple[RemoteTask, ...] = ()
    error: str | None = None
    loaded: bool = False


@dataclass(frozen=True, slots=True)
class Listed:
    tasks: tuple[RemoteTask, ...]


@dataclass(frozen=True, slots=True)
class Created:
    task: RemoteTask


@dataclass(frozen=True, slots=True)
class Updated:
    task: RemoteTask


@dataclass(frozen=True, slots=True)
class Deleted:
    task_id: str


@dataclass(frozen=True, slots=True)
class FetchFailed:
    message: str


TaskEvent = Listed | Created | Updated | Deleted | FetchFailed


def reduce(state: TaskListState, event: TaskEvent) -> TaskListState:
    if isinstance(event, Listed):
        return TaskListState(tasks=tuple(event.tasks), error=None, loaded=True)

    if isinstance(event, Created):
        # El servidor ordena de más reciente a más antigua.
        return replace(state, tasks=(event.task, *state.tasks))

    if isinstance(event, Updated):
        # Se reemplaza en su sitio; no se reordena aunque cambie la prioridad.
        tasks = tuple(
            event.task if task.id == event.task.id else task for task in state.tasks
        )
        return replace(state, tasks=tasks)

    if isinstance(event, Deleted):
        tasks = tuple(task for task in state.tasks if task.id != event.task_id)
        return replace(state, tasks=tasks)

    if isinstance(event, FetchFailed):
        return replace(state, error=event.message)

    raise TypeError(f"Unknown task event: {event!r}")
