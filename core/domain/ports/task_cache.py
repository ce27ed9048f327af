from abc import ABC, abstractmethod


class TaskCache(ABC):
    """
    Puerto de caché clave/valor con expiración.

    Los valores son texto ya serializado; la lógica de la aplicación decide
    el formato.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str, ttl: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def ping(self) -> None:
        raise NotImplementedError
