import logging
import os
from urllib.parse import quote_plus, urlsplit, urlunsplit

DEFAULT_DATABASE_URL = "sqlite:///tasks.db"


def as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def database_url() -> str:
    """
    DSN de la base relacional.

    Prioridad: DATABASE_URL > variables DB_* (PostgreSQL) > SQLite local.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("DB_HOST")
    if not host:
        return DEFAULT_DATABASE_URL

    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "tasks")
    user = quote_plus(os.getenv("DB_USER", "postgres"))
    password = os.getenv("DB_PASSWORD")
    credentials = f"{user}:{quote_plus(password)}" if password else user
    return f"postgresql://{credentials}@{host}:{port}/{name}"


def masked_database_url() -> str:
    """DSN apto para logs (sin contraseña)."""
    parts = urlsplit(database_url())
    if parts.password is None:
        return urlunsplit(parts)
    netloc = parts.netloc.replace(f":{parts.password}@", ":***@")
    return urlunsplit(parts._replace(netloc=netloc))


def orm() -> str:
    return os.getenv("ORM", "peewee").lower()


def cache_backend() -> str:
    return os.getenv("CACHE_BACKEND", "redis").lower()


def cache_ttl_seconds() -> int:
    return int(os.getenv("CACHE_TTL_SECONDS", "60"))


def redis_host() -> str:
    return os.getenv("REDIS_HOST", "localhost")


def redis_port() -> int:
    return int(os.getenv("REDIS_PORT", "6379"))


def redis_password() -> str | None:
    return os.getenv("REDIS_PASSWORD") or None


def redis_db() -> int:
    return int(os.getenv("REDIS_DB", "0"))


def redis_socket_timeout() -> float:
    return float(os.getenv("REDIS_SOCKET_TIMEOUT", "3"))


def app_env() -> str:
    return os.getenv("APP_ENV", "development")


def app_version() -> str:
    return os.getenv("APP_VERSION", "v2")


def logging_level(name: str) -> int:
    """
    Traduce un nivel de uvicorn (`trace`, `debug`, `info`...) al de logging.

    `trace` no existe en logging y se asimila a DEBUG; lo desconocido cae a INFO.
    """
    name = name.strip().lower()
    if name == "trace":
        return logging.DEBUG
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
