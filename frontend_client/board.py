import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any, TypeVar

from frontend_client.api import ApiError, TaskApiClient
from frontend_client.models import Priority, RemoteTask
from frontend_client.state import (
    Created,
    Deleted,
    FetchFailed,
    Listed,
    TaskEvent,
    TaskListState,
    Updated,
    reduce,
)
from frontend_client.views import SortOrder, StatusFilter, visible_tasks

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActionBusyError(RuntimeError):
    """La misma acción ya tiene una petición en curso."""


def build_edit_changes(
    task: RemoteTask,
    title: str,
    priority: Priority | str | None = None,
    due_date: datetime | None = None,
) -> dict[str, Any]:
    """
    Calcula el PATCH de una edición: solo los campos que cambian.

    Lanza:
        ValueError: si el título queda vacío tras recortarlo.
    """
    trimmed = title.strip()
    if not trimmed:
        raise ValueError("Title cannot be empty.")

    changes: dict[str, Any] = {}
    if trimmed != task.title:
        changes["title"] = trimmed
    new_priority = Priority(priority) if priority is not None else Priority.MEDIUM
    if new_priority != task.priority:
        changes["priority"] = new_priority.value
    if due_date != task.due_date:
        changes["dueDate"] = due_date.isoformat() if due_date else None
    return changes


class TaskBoard:
    """
    Controlador de la vista de tareas.

    Mantiene el estado canónico (sin filtrar) y un indicador de ocupado por
    acción: la misma acción sobre la misma tarea no puede solaparse, pero
    acciones distintas sí.
    """

    def __init__(self, api: TaskApiClient) -> None:
        self.api = api
        self.state = TaskListState()
        self._busy: set[tuple[str, str | None]] = set()
        # Último error de cualquier acción, para mostrarlo una sola vez.
        self.last_error: str | None = None

    @property
    def tasks(self) -> tuple[RemoteTask, ...]:
        return self.state.tasks

    @property
    def error(self) -> str | None:
        return self.state.error

    def is_busy(self, action: str, task_id: str | None = None) -> bool:
        return (action, task_id) in self._busy

    @contextmanager
    def _busy_flag(self, action: str, task_id: str | None) -> Iterator[None]:
        key = (action, task_id)
        if key in self._busy:
            raise ActionBusyError(f"{action} already in progress")
        self._busy.add(key)
        try:
            yield
        finally:
            self._busy.discard(key)

    def dispatch(self, event: TaskEvent) -> TaskListState:
        self.state = reduce(self.state, event)
        return self.state

    def _run(
        self,
        action: str,
        task_id: str | None,
        call: Callable[[], T],
        to_event: Callable[[T], TaskEvent],
    ) -> T | None:
        with self._busy_flag(action, task_id):
            try:
                result = call()
            except ApiError as exc:
                logger.warning("%s failed: %s", action, exc.message)
                self.last_error = exc.message
                if action == "list":
                    self.dispatch(FetchFailed(exc.message))
                return None
        self.last_error = None
        self.dispatch(to_event(result))
        return result

    def refresh(self) -> tuple[RemoteTask, ...] | None:
        return self._run(
            "list", None, lambda: tuple(self.api.fetch_tasks()), Listed
        )

    def create(
        self,
        title: str,
        description: str | None = None,
        due_date: datetime | None = None,
        priority: Priority | str | None = None,
    ) -> RemoteTask | None:
        return self._run(
            "create",
            None,
            lambda: self.api.add_task(title, description, due_date, priority),
            Created,
        )

    def update(self, task_id: str, changes: dict[str, Any]) -> RemoteTask | None:
        return self._run(
            "edit",
            task_id,
            lambda: self.api.update_task(task_id, changes),
            Updated,
        )

    def toggle(self, task: RemoteTask) -> RemoteTask | None:
        return self._run(
            "complete",
            task.id,
            lambda: self.api.toggle_task_completion(task),
            Updated,
        )

    def remove(self, task_id: str) -> bool:
        result = self._run(
            "delete",
            task_id,
            lambda: self.api.delete_task(task_id),
            lambda _: Deleted(task_id),
        )
        return result is not None

    def view(
        self,
        status: StatusFilter | str = StatusFilter.ALL,
        query: str = "",
        order: SortOrder | str = SortOrder.NEWEST,
    ) -> list[RemoteTask]:
        return visible_tasks(self.state.tasks, status, query, order)
