import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from infrastructure.settings import database_url

logger = logging.getLogger(__name__)

DATABASE_URL = database_url()

_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


def get_session() -> Session:
    return SessionLocal()


def init_db() -> None:
    """Crea la tabla de tareas si no existe."""
    from infrastructure.sqlalchemy.model import models  # noqa: F401  (registra TaskModel)

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized")
    except SQLAlchemyError as e:
        logger.error(f"Database initialization error: {e}")
