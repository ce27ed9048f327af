from dataclasses import dataclass

from core.application.list_tasks import invalidate_tasks_cache
from core.domain.errors import InvalidInputError
from core.domain.models.task import Task, TaskPriority, TaskStatus
from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: str | None = None
    priority: str | None = None


def require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise InvalidInputError("Title is required")
    return title


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository, cache: TaskCache) -> None:
        self._repository = repository
        self._cache = cache

    def execute(self, cmd: CreateTaskCommand) -> Task:
        title = require_title(cmd.title)

        task = self._repository.create(
            title=title,
            description=cmd.description,
            status=cmd.status or TaskStatus.PENDING.value,
            priority=cmd.priority or TaskPriority.MEDIUM.value,
        )
        invalidate_tasks_cache(self._cache)
        return task
