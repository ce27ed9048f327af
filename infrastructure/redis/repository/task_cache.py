import logging
from contextlib import contextmanager
from typing import Iterator

from redis import Redis
from redis.exceptions import RedisError

from core.domain.errors import DependencyError
from core.domain.ports.task_cache import TaskCache
from infrastructure.redis.session.client import get_client

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (RedisError, OSError) as e:
        logger.error(f"✗ Redis falló en {operation}: {e}")
        raise DependencyError(str(e)) from e


class RedisTaskCache(TaskCache):
    """
    Implementación de TaskCache sobre Redis.
    """

    def __init__(self, client: Redis | None = None) -> None:
        self.client = client or get_client()

    def get(self, key: str) -> str | None:
        """
        Obtiene el valor guardado en `key`.

        Retorna:
            str | None: El valor, o None si no existe o expiró.
        """
        with _translate_errors("get"):
            return self.client.get(key)

    def set(self, key: str, value: str, ttl: int) -> None:
        """
        Guarda `value` en `key` con expiración de `ttl` segundos (SETEX).
        """
        with _translate_errors("set"):
            self.client.setex(key, ttl, value)

    def delete(self, key: str) -> None:
        with _translate_errors("delete"):
            self.client.delete(key)

    def ping(self) -> None:
        with _translate_errors("ping"):
            self.client.ping()
