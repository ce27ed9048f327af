from dataclasses import dataclass

from core.application.create_task import require_title
from core.application.list_tasks import invalidate_tasks_cache
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Task, TaskPriority, TaskStatus
from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None


class UpdateTaskUseCase:
    """
    Reemplazo completo de una tarea.

    Los campos omitidos no se conservan del registro previo: `description`
    queda en None y `status`/`priority` vuelven a sus valores por defecto.
    """

    def __init__(self, repository: TaskRepository, cache: TaskCache) -> None:
        self._repository = repository
        self._cache = cache

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        title = require_title(cmd.title)

        task = self._repository.update(
            task_id,
            title=title,
            description=cmd.description,
            status=cmd.status or TaskStatus.PENDING.value,
            priority=cmd.priority or TaskPriority.MEDIUM.value,
        )
        if task is None:
            raise TaskNotFoundError(task_id)

        invalidate_tasks_cache(self._cache)
        return task
