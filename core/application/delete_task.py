from dataclasses import dataclass

from core.application.list_tasks import invalidate_tasks_cache
from core.domain.errors import TaskNotFoundError
from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository

DELETED_MESSAGE = "Task deleted successfully"


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository, cache: TaskCache) -> None:
        self._repository = repository
        self._cache = cache

    def execute(self, cmd: DeleteTaskCommand) -> str:
        if not self._repository.delete(cmd.id):
            raise TaskNotFoundError(cmd.id)
        invalidate_tasks_cache(self._cache)
        return DELETED_MESSAGE
