import os
import unittest

os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from core.domain.errors import DependencyError
from core.domain.models.task import TaskStats

try:
    from infrastructure.sqlalchemy.session.db import Base, engine
    from infrastructure.sqlalchemy.repository.task_repository import SqlAlchemyTaskRepository

    HAS_SQLALCHEMY = True
except ModuleNotFoundError:
    HAS_SQLALCHEMY = False


@unittest.skipUnless(HAS_SQLALCHEMY, "SQLAlchemy no está disponible en este entorno")
class SqlAlchemyTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        self.repo = SqlAlchemyTaskRepository()

    def test_create_and_get(self) -> None:
        task = self.repo.create("Tarea SQL", "desc", "in_progress", "low")
        loaded = self.repo.get(task.id)

        self.assertIsNotNone(loaded)
        assert loaded is not None
        self.assertEqual(loaded.id, task.id)
        self.assertEqual(loaded.title, "Tarea SQL")
        self.assertEqual(loaded.description, "desc")
        self.assertEqual(loaded.status, "in_progress")
        self.assertEqual(loaded.priority, "low")

    def test_list_ordena_por_created_at_descendente(self) -> None:
        first = self.repo.create("Primera", None, "pending", "medium")
        second = self.repo.create("Segunda", None, "pending", "medium")

        self.assertEqual([t.id for t in self.repo.list()], [second.id, first.id])

    def test_update(self) -> None:
        task = self.repo.create("Inicial", "d1", "pending", "medium")

        updated = self.repo.update(task.id, "Final", None, "completed", "high")

        assert updated is not None
        self.assertEqual(updated.title, "Final")
        self.assertIsNone(updated.description)
        self.assertEqual(updated.status, "completed")
        self.assertIsNone(self.repo.update(999, "x", None, "pending", "medium"))

    def test_delete(self) -> None:
        task = self.repo.create("Eliminar SQL", None, "pending", "medium")

        self.assertTrue(self.repo.delete(task.id))
        self.assertIsNone(self.repo.get(task.id))
        self.assertFalse(self.repo.delete(task.id))

    def test_stats(self) -> None:
        self.repo.create("a", None, "in_progress", "medium")
        self.repo.create("b", None, "pending", "medium")

        self.assertEqual(
            self.repo.stats(),
            TaskStats(total=2, pending=1, in_progress=1, completed=0),
        )

    def test_ping_y_errores(self) -> None:
        self.repo.ping()
        Base.metadata.drop_all(bind=engine)

        with self.assertRaises(DependencyError):
            self.repo.list()


if __name__ == "__main__":
    unittest.main()
