import logging

from peewee import PeeweeException
from playhouse.db_url import connect

from infrastructure.settings import database_url

logger = logging.getLogger(__name__)

# SQLite por defecto; PostgreSQL vía DATABASE_URL o DB_*
db = connect(database_url())


def reset_connection() -> None:
    """
    Descarta la conexión del hilo actual tras un fallo.

    Peewee no detecta por sí solo una conexión cortada por el servidor
    (`is_closed()` sigue en False); al cerrarla, la siguiente consulta
    abre una nueva.
    """
    if db.is_closed() or db.in_transaction():
        return
    try:
        db.close()
    except PeeweeException as e:
        # El estado del hilo queda reiniciado aunque el cierre falle.
        logger.warning(f"⚠️ Error cerrando la conexión caída: {e}")


def init_db() -> None:
    """Crea la tabla de tareas si no existe (equivalente a CREATE TABLE IF NOT EXISTS)."""
    from infrastructure.peewee.model.models import TaskModel

    try:
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)
        logger.info("Database initialized")
    except PeeweeException as e:
        logger.error(f"Database initialization error: {e}")
    finally:
        reset_connection()
