from core.domain.models.task import TaskStats
from core.domain.ports.task_repository import TaskRepository


class TaskStatsUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> TaskStats:
        return self._repository.stats()
