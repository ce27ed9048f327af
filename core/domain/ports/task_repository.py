from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskStats


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas ordenadas por `created_at` descendente."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        task_id: int,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def stats(self) -> TaskStats:
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> None:
        raise NotImplementedError
