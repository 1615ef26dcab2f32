class TaskError(Exception):
    """Error base del dominio de tareas."""


class ValidationError(TaskError):
    """
    Un campo enviado por el cliente no cumple su regla.

    Atributos:
        field (str): Nombre del campo en el formato de la API (p. ej. "dueDate").
        message (str): Mensaje legible que nombra el campo.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(TaskError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class MalformedIdentifierError(TaskError):
    def __init__(self, raw_id: object) -> None:
        super().__init__(f"Invalid task id format: {raw_id!r}")
        self.raw_id = raw_id
