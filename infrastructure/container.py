from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.readiness import CheckReadinessUseCase
from core.application.task_stats import TaskStatsUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_cache import TaskCache
from core.domain.ports.task_repository import TaskRepository
from infrastructure import settings
from infrastructure.memory.task_cache import InMemoryTaskCache

_memory_cache: InMemoryTaskCache | None = None


def get_task_repository() -> TaskRepository:
    if settings.orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


def get_task_cache() -> TaskCache:
    global _memory_cache
    if settings.cache_backend() == "memory":
        if _memory_cache is None:
            _memory_cache = InMemoryTaskCache()
        return _memory_cache
    # Default to Redis
    from infrastructure.redis.repository.task_cache import RedisTaskCache

    return RedisTaskCache()


def init_storage() -> None:
    """Crea el esquema en la base configurada."""
    if settings.orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.session.db import init_db
    else:
        from infrastructure.peewee.session.db import init_db
    init_db()


def shutdown_storage() -> None:
    if settings.cache_backend() == "redis":
        from infrastructure.redis.session.client import close_client

        close_client()


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(
        repository=get_task_repository(),
        cache=get_task_cache(),
        ttl=settings.cache_ttl_seconds(),
    )


def get_get_task_use_case() -> GetTaskUseCase:
    return GetTaskUseCase(repository=get_task_repository())


def get_create_task_use_case() -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=get_task_repository(), cache=get_task_cache())


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository(), cache=get_task_cache())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository(), cache=get_task_cache())


def get_task_stats_use_case() -> TaskStatsUseCase:
    return TaskStatsUseCase(repository=get_task_repository())


def get_check_readiness_use_case() -> CheckReadinessUseCase:
    return CheckReadinessUseCase(
        repository=get_task_repository(), cache=get_task_cache()
    )
