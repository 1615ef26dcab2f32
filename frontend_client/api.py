import logging
import os
from datetime import datetime
from typing import Any

import httpx
from dotenv import load_dotenv

from frontend_client.models import Priority, RemoteTask

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Fallo de una petición a la API de tareas.

    Atributos:
        message (str): Mensaje del servidor tal cual, o el error de transporte.
        status_code (int | None): Código HTTP; None si no hubo respuesta.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"API error: {response.status_code} {response.reason_phrase}"


def _priority_value(priority: Priority | str) -> str:
    # Se valida antes de enviar; el error llega como ApiError sin status.
    try:
        return Priority(priority).value
    except ValueError:
        choices = ", ".join(p.value for p in Priority)
        raise ApiError(f"priority must be one of: {choices}") from None


class TaskApiClient:
    """
    Cliente HTTP de la API de tareas.

    No reintenta ni aplica timeouts propios: cada fallo se informa una vez
    como `ApiError`.
    """

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def from_url(cls, base_url: str) -> "TaskApiClient":
        return cls(httpx.Client(base_url=base_url))

    @classmethod
    def from_env(cls) -> "TaskApiClient":
        load_dotenv()
        return cls.from_url(os.getenv("TASK_API_URL", "http://localhost:8000"))

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            raise ApiError(str(exc) or "Unknown API error occurred") from exc
        if response.is_error:
            message = _error_message(response)
            logger.error(
                "API error %s on %s %s: %s",
                response.status_code,
                method,
                path,
                message,
            )
            raise ApiError(message, response.status_code)
        return response.json()

    def fetch_tasks(self) -> list[RemoteTask]:
        items = self._request("GET", "/tasks")
        return [RemoteTask.model_validate(item) for item in items]

    def get_task(self, task_id: str) -> RemoteTask:
        return RemoteTask.model_validate(self._request("GET", f"/tasks/{task_id}"))

    def add_task(
        self,
        title: str,
        description: str | None = None,
        due_date: datetime | None = None,
        priority: Priority | str | None = None,
    ) -> RemoteTask:
        body: dict[str, Any] = {"title": title}
        if description is not None:
            body["description"] = description
        if due_date is not None:
            body["dueDate"] = due_date.isoformat()
        if priority is not None:
            body["priority"] = _priority_value(priority)
        return RemoteTask.model_validate(self._request("POST", "/tasks", json=body))

    def update_task(self, task_id: str, changes: dict[str, Any]) -> RemoteTask:
        """
        Envía un PATCH con los campos en formato de la API (`dueDate`, ...).
        """
        payload = {
            key: (value.isoformat() if isinstance(value, datetime) else value)
            for key, value in changes.items()
        }
        return RemoteTask.model_validate(
            self._request("PATCH", f"/tasks/{task_id}", json=payload)
        )

    def delete_task(self, task_id: str) -> dict[str, Any]:
        return self._request("DELETE", f"/tasks/{task_id}")

    def toggle_task_completion(self, task: RemoteTask) -> RemoteTask:
        return self.update_task(task.id, {"completed": not task.completed})
