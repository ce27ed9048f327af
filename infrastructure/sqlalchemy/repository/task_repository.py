import logging

from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError

from core.domain.errors import DependencyError
from core.domain.models.task import Task, TaskStats, utcnow
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import get_session

logger = logging.getLogger(__name__)


def _dependency_error(operation: str, e: Exception) -> DependencyError:
    logger.error(f"✗ SQLAlchemy falló en {operation}: {e}")
    return DependencyError(str(e))


class SqlAlchemyTaskRepository(TaskRepository):
    def list(self) -> list[Task]:
        session = get_session()
        try:
            task_models = (
                session.query(TaskModel)
                .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
                .all()
            )
            return [task_model.to_domain() for task_model in task_models]
        except SQLAlchemyError as e:
            raise _dependency_error("list", e) from e
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return task_model.to_domain()
        except SQLAlchemyError as e:
            raise _dependency_error("get", e) from e
        finally:
            session.close()

    def create(
        self,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task:
        session = get_session()
        try:
            now = utcnow()
            task_model = TaskModel(
                title=title,
                description=description,
                status=status,
                priority=priority,
                created_at=now,
                updated_at=now,
            )
            session.add(task_model)
            session.commit()
            return task_model.to_domain()
        except SQLAlchemyError as e:
            session.rollback()
            raise _dependency_error("create", e) from e
        finally:
            session.close()

    def update(
        self,
        task_id: int,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None

            task_model.title = title
            task_model.description = description
            task_model.status = status
            task_model.priority = priority
            task_model.updated_at = utcnow()

            session.commit()
            return task_model.to_domain()
        except SQLAlchemyError as e:
            session.rollback()
            raise _dependency_error("update", e) from e
        finally:
            session.close()

    def delete(self, task_id: int) -> bool:
        session = get_session()
        try:
            rows = session.query(TaskModel).filter(TaskModel.id == task_id).delete()
            session.commit()
            return rows > 0
        except SQLAlchemyError as e:
            session.rollback()
            raise _dependency_error("delete", e) from e
        finally:
            session.close()

    def stats(self) -> TaskStats:
        session = get_session()
        try:
            rows = (
                session.query(TaskModel.status, func.count(TaskModel.id))
                .group_by(TaskModel.status)
                .all()
            )
            return TaskStats.from_counts({status: count for status, count in rows})
        except SQLAlchemyError as e:
            raise _dependency_error("stats", e) from e
        finally:
            session.close()

    def ping(self) -> None:
        session = get_session()
        try:
            session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise _dependency_error("ping", e) from e
        finally:
            session.close()
