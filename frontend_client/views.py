"""Vistas derivadas de la lista local: filtrar, buscar y ordenar sin mutarla."""

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from enum import Enum

from frontend_client.models import Priority, RemoteTask


class StatusFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRIORITY = "priority"


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2, None: 3}


def filter_by_status(
    tasks: Iterable[RemoteTask], status: StatusFilter | str = StatusFilter.ALL
) -> list[RemoteTask]:
    status = StatusFilter(status)
    if status is StatusFilter.ACTIVE:
        return [task for task in tasks if not task.completed]
    if status is StatusFilter.COMPLETED:
        return [task for task in tasks if task.completed]
    return list(tasks)


def search_by_title(tasks: Iterable[RemoteTask], query: str = "") -> list[RemoteTask]:
    """Coincidencia por subcadena en el título, sin distinguir mayúsculas."""
    if not query:
        return list(tasks)
    needle = query.lower()
    return [task for task in tasks if needle in task.title.lower()]


def sort_tasks(
    tasks: Iterable[RemoteTask], order: SortOrder | str = SortOrder.NEWEST
) -> list[RemoteTask]:
    order = SortOrder(order)
    if order is SortOrder.OLDEST:
        return sorted(tasks, key=lambda task: task.created_at)
    if order is SortOrder.PRIORITY:
        return sorted(tasks, key=lambda task: _PRIORITY_RANK[task.priority])
    return sorted(tasks, key=lambda task: task.created_at, reverse=True)


def visible_tasks(
    tasks: Sequence[RemoteTask],
    status: StatusFilter | str = StatusFilter.ALL,
    query: str = "",
    order: SortOrder | str = SortOrder.NEWEST,
) -> list[RemoteTask]:
    return sort_tasks(search_by_title(filter_by_status(tasks, status), query), order)


def status_counts(tasks: Sequence[RemoteTask]) -> dict[StatusFilter, int]:
    active = sum(1 for task in tasks if not task.completed)
    return {
        StatusFilter.ALL: len(tasks),
        StatusFilter.ACTIVE: active,
        StatusFilter.COMPLETED: len(tasks) - active,
    }


def is_past_due(task: RemoteTask, now: datetime | None = None) -> bool:
    if task.due_date is None or task.completed:
        return False
    now = now or datetime.now(timezone.utc)
    due = task.due_date
    if due.tzinfo is None:
        due = due.replace(tzinfo=timezone.utc)
    return due < now
