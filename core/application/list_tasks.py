import logging

from pydantic import TypeAdapter, ValidationError

from core.domain.errors import DependencyError
from core.domain.models.task import Task
from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

TASKS_CACHE_KEY = "tasks:all"
DEFAULT_CACHE_TTL = 60

_tasks_adapter = TypeAdapter(list[Task])


def invalidate_tasks_cache(cache: TaskCache) -> None:
    """Borra el snapshot de la lista. Los fallos se propagan al llamador."""
    cache.delete(TASKS_CACHE_KEY)
    logger.debug(f"🧹 Caché invalidada ({TASKS_CACHE_KEY})")


class ListTasksUseCase:
    """
    Lista las tareas aplicando cache-aside sobre el repositorio.

    - Hit: devuelve el snapshot deserializado.
    - Miss (o caché caída / payload corrupto): consulta el repositorio y
      repuebla la caché con TTL. Si la escritura en caché falla, se ignora.
    """

    def __init__(
        self,
        repository: TaskRepository,
        cache: TaskCache,
        ttl: int = DEFAULT_CACHE_TTL,
    ) -> None:
        self._repository = repository
        self._cache = cache
        self._ttl = ttl

    def execute(self) -> list[Task]:
        cached = self._read_cache()
        if cached is not None:
            logger.info("📦 Cache hit")
            return cached

        tasks = self._repository.list()
        logger.info("Database query")

        try:
            self._cache.set(
                TASKS_CACHE_KEY,
                _tasks_adapter.dump_json(tasks).decode("utf-8"),
                self._ttl,
            )
        except DependencyError as e:
            logger.warning(f"⚠️ No se pudo poblar la caché: {e}")

        return tasks

    def _read_cache(self) -> list[Task] | None:
        try:
            payload = self._cache.get(TASKS_CACHE_KEY)
        except DependencyError as e:
            logger.warning(f"⚠️ Caché no disponible, leyendo de la BDD: {e}")
            return None

        if not payload:
            return None

        try:
            return _tasks_adapter.validate_json(payload)
        except ValidationError as e:
            logger.warning(f"⚠️ Snapshot en caché ilegible, se descarta: {e}")
            return None
