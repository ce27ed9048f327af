import logging
from contextlib import contextmanager
from typing import Iterator

from peewee import PeeweeException, fn

from core.domain.errors import DependencyError
from core.domain.models.task import Task, TaskStats, utcnow
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db, reset_connection

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (PeeweeException, OSError) as e:
        logger.error(f"✗ Peewee falló en {operation}: {e}")
        reset_connection()
        raise DependencyError(str(e)) from e


class PeeweeTaskRepository(TaskRepository):
    def list(self) -> list[Task]:
        with _translate_errors("list"):
            query = TaskModel.select().order_by(
                TaskModel.created_at.desc(), TaskModel.id.desc()
            )
            return [t.to_domain() for t in query]

    def get(self, task_id: int) -> Task | None:
        with _translate_errors("get"):
            task_model = TaskModel.get_or_none(TaskModel.id == task_id)
            return task_model.to_domain() if task_model is not None else None

    def create(
        self,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task:
        with _translate_errors("create"):
            now = utcnow()
            task_model = TaskModel.create(
                title=title,
                description=description,
                status=status,
                priority=priority,
                created_at=now,
                updated_at=now,
            )
            return task_model.to_domain()

    def update(
        self,
        task_id: int,
        title: str,
        description: str | None,
        status: str,
        priority: str,
    ) -> Task | None:
        with _translate_errors("update"), db.atomic():
            rows = (
                TaskModel.update(
                    title=title,
                    description=description,
                    status=status,
                    priority=priority,
                    updated_at=utcnow(),
                )
                .where(TaskModel.id == task_id)
                .execute()
            )
            if rows == 0:
                return None
            return TaskModel.get_by_id(task_id).to_domain()

    def delete(self, task_id: int) -> bool:
        with _translate_errors("delete"):
            rows = TaskModel.delete().where(TaskModel.id == task_id).execute()
            return rows > 0

    def stats(self) -> TaskStats:
        with _translate_errors("stats"):
            query = (
                TaskModel.select(TaskModel.status, fn.COUNT(TaskModel.id))
                .group_by(TaskModel.status)
                .tuples()
            )
            return TaskStats.from_counts({status: count for status, count in query})

    def ping(self) -> None:
        with _translate_errors("ping"):
            db.execute_sql("SELECT 1")
