from fastapi import Request

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from infrastructure.container import Container


def get_container(request: Request) -> Container:
    return request.app.state.container


def create_task_use_case(request: Request) -> CreateTaskUseCase:
    return get_container(request).create_task


def get_task_use_case(request: Request) -> GetTaskUseCase:
    return get_container(request).get_task


def update_task_use_case(request: Request) -> UpdateTaskUseCase:
    return get_container(request).update_task


def delete_task_use_case(request: Request) -> DeleteTaskUseCase:
    return get_container(request).delete_task


def list_tasks_use_case(request: Request) -> ListTasksUseCase:
    return get_container(request).list_tasks
