from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository


class CheckReadinessUseCase:
    """
    Verifica que la BDD y la caché respondan.

    Lanza DependencyError con el mensaje del primer fallo encontrado.
    """

    def __init__(self, repository: TaskRepository, cache: TaskCache) -> None:
        self._repository = repository
        self._cache = cache

    def execute(self) -> None:
        self._repository.ping()
        self._cache.ping()
