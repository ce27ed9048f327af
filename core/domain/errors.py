class TaskServiceError(Exception):
    """Error base del servicio de tareas."""


class InvalidInputError(TaskServiceError):
    """Falta un campo obligatorio (p. ej. el título al crear)."""


class TaskNotFoundError(TaskServiceError):
    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class DependencyError(TaskServiceError):
    """Fallo de la base de datos o de la caché (conexión, query, timeout)."""
