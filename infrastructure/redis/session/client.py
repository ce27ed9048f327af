from redis import Redis

from infrastructure.settings import (
    redis_db,
    redis_host,
    redis_password,
    redis_port,
    redis_socket_timeout,
)

_client: Redis | None = None


def get_client() -> Redis:
    """
    Obtiene el cliente de Redis (Singleton).

    El cliente mantiene su propio pool de conexiones y es seguro entre hilos.
    """
    global _client
    if _client is None:
        timeout = redis_socket_timeout()
        _client = Redis(
            host=redis_host(),
            port=redis_port(),
            password=redis_password(),
            db=redis_db(),
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )
    return _client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
