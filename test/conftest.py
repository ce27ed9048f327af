import os

# Entorno aislado: SQLite en memoria y caché en proceso.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CACHE_BACKEND"] = "memory"
os.environ["ORM"] = "peewee"
