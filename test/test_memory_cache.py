from unittest.mock import patch

from infrastructure.memory.task_cache import InMemoryTaskCache


def test_set_get_delete():
    cache = InMemoryTaskCache()

    cache.set("tasks:all", "[]", 60)
    assert cache.get("tasks:all") == "[]"

    cache.delete("tasks:all")
    assert cache.get("tasks:all") is None


def test_delete_de_clave_inexistente_no_falla():
    InMemoryTaskCache().delete("nada")


def test_entrada_expira_tras_ttl():
    cache = InMemoryTaskCache()

    with patch("infrastructure.memory.task_cache.time.monotonic", return_value=100.0):
        cache.set("tasks:all", "[]", 60)
    with patch("infrastructure.memory.task_cache.time.monotonic", return_value=159.9):
        assert cache.get("tasks:all") == "[]"
    with patch("infrastructure.memory.task_cache.time.monotonic", return_value=160.0):
        assert cache.get("tasks:all") is None
