import json
import unittest

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import TASKS_CACHE_KEY, ListTasksUseCase
from core.application.readiness import CheckReadinessUseCase
from core.application.task_stats import TaskStatsUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import DependencyError, InvalidInputError, TaskNotFoundError
from core.domain.models.task import TaskStats
from fakes import FakeTaskCache, InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()
        self.cache = FakeTaskCache()

    def _create(self, title: str, **kwargs):
        return CreateTaskUseCase(self.repo, self.cache).execute(
            CreateTaskCommand(title=title, **kwargs)
        )

    # ── Create ────────────────────────────────────────────────────────────────

    def test_crear_tarea_aplica_defaults(self) -> None:
        task = self._create("Buy milk", priority="low")

        self.assertIsNotNone(task.id)
        self.assertIsNotNone(task.created_at)
        self.assertEqual(task.status, "pending")
        self.assertEqual(task.priority, "low")
        self.assertEqual(self.repo.get(task.id), task)

    def test_crear_tarea_asigna_ids_unicos(self) -> None:
        ids = {self._create(f"t{i}").id for i in range(5)}
        self.assertEqual(len(ids), 5)

    def test_crear_tarea_sin_titulo_falla_y_no_guarda(self) -> None:
        use_case = CreateTaskUseCase(self.repo, self.cache)

        for title in (None, "", "   "):
            with self.subTest(title=title):
                with self.assertRaises(InvalidInputError):
                    use_case.execute(CreateTaskCommand(title=title))

        self.assertEqual(self.repo.list(), [])
        self.assertEqual(self.cache.deleted, [])

    def test_crear_tarea_acepta_estado_fuera_del_enum(self) -> None:
        task = self._create("Libre", status="blocked", priority="urgent")

        self.assertEqual(task.status, "blocked")
        self.assertEqual(task.priority, "urgent")

    def test_crear_tarea_invalida_cache(self) -> None:
        self.cache.data[TASKS_CACHE_KEY] = "[]"

        self._create("Nueva")

        self.assertNotIn(TASKS_CACHE_KEY, self.cache.data)
        self.assertEqual(self.cache.deleted, [TASKS_CACHE_KEY])

    def test_crear_tarea_propaga_fallo_de_invalidacion(self) -> None:
        self.cache.fail_delete = True

        with self.assertRaises(DependencyError):
            self._create("Nueva")

    # ── Get ───────────────────────────────────────────────────────────────────

    def test_get_tarea_inexistente_lanza_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            GetTaskUseCase(self.repo).execute(999)

    def test_get_no_usa_cache(self) -> None:
        task = self._create("Directa")
        self.cache.fail_get = True

        self.assertEqual(GetTaskUseCase(self.repo).execute(task.id), task)

    # ── Update ────────────────────────────────────────────────────────────────

    def test_editar_tarea_reemplaza_todos_los_campos(self) -> None:
        original = self._create("Inicial", description="d1", status="in_progress")

        updated = UpdateTaskUseCase(self.repo, self.cache).execute(
            original.id,
            UpdateTaskCommand(
                title="Actualizada",
                description="d2",
                status="completed",
                priority="high",
            ),
        )

        self.assertEqual(updated.id, original.id)
        self.assertEqual(updated.title, "Actualizada")
        self.assertEqual(updated.description, "d2")
        self.assertEqual(updated.status, "completed")
        self.assertEqual(updated.priority, "high")
        self.assertEqual(updated.created_at, original.created_at)
        self.assertGreater(updated.updated_at, original.updated_at)

    def test_editar_tarea_no_conserva_campos_omitidos(self) -> None:
        original = self._create(
            "Inicial", description="d1", status="completed", priority="high"
        )

        updated = UpdateTaskUseCase(self.repo, self.cache).execute(
            original.id, UpdateTaskCommand(title="Solo título")
        )

        self.assertIsNone(updated.description)
        self.assertEqual(updated.status, "pending")
        self.assertEqual(updated.priority, "medium")

    def test_editar_permite_volver_de_completed_a_pending(self) -> None:
        task = self._create("Ida y vuelta", status="completed")

        updated = UpdateTaskUseCase(self.repo, self.cache).execute(
            task.id, UpdateTaskCommand(title="Ida y vuelta", status="pending")
        )

        self.assertEqual(updated.status, "pending")

    def test_editar_tarea_inexistente_lanza_error(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            UpdateTaskUseCase(self.repo, self.cache).execute(
                42, UpdateTaskCommand(title="x", description="y")
            )
        self.assertEqual(self.cache.deleted, [])

    def test_editar_tarea_sin_titulo_falla(self) -> None:
        task = self._create("Con título")

        with self.assertRaises(InvalidInputError):
            UpdateTaskUseCase(self.repo, self.cache).execute(
                task.id, UpdateTaskCommand(title="")
            )
        self.assertEqual(self.repo.get(task.id).title, "Con título")

    # ── Delete ────────────────────────────────────────────────────────────────

    def test_eliminar_tarea_borra_registro_e_invalida(self) -> None:
        task = self._create("Eliminar")
        self.cache.deleted.clear()

        message = DeleteTaskUseCase(self.repo, self.cache).execute(
            DeleteTaskCommand(id=task.id)
        )

        self.assertEqual(message, "Task deleted successfully")
        self.assertIsNone(self.repo.get(task.id))
        self.assertEqual(self.cache.deleted, [TASKS_CACHE_KEY])

    def test_eliminar_tarea_inexistente_lanza_error(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            DeleteTaskUseCase(self.repo, self.cache).execute(DeleteTaskCommand(id=7))

    # ── List (cache-aside) ────────────────────────────────────────────────────

    def test_listar_miss_consulta_bdd_y_puebla_cache(self) -> None:
        self._create("Primera")
        self._create("Segunda")
        use_case = ListTasksUseCase(self.repo, self.cache, ttl=60)

        tasks = use_case.execute()

        self.assertEqual([t.title for t in tasks], ["Segunda", "Primera"])
        self.assertEqual(self.cache.ttls[TASKS_CACHE_KEY], 60)
        cached = json.loads(self.cache.data[TASKS_CACHE_KEY])
        self.assertEqual([t["title"] for t in cached], ["Segunda", "Primera"])

    def test_listar_hit_no_consulta_bdd(self) -> None:
        self._create("Cacheada")
        use_case = ListTasksUseCase(self.repo, self.cache)

        first = use_case.execute()
        second = use_case.execute()

        self.assertEqual(self.repo.list_calls, 1)
        self.assertEqual(first, second)

    def test_listar_refleja_cada_escritura(self) -> None:
        list_use_case = ListTasksUseCase(self.repo, self.cache)
        task = self._create("A")
        self.assertEqual([t.title for t in list_use_case.execute()], ["A"])

        UpdateTaskUseCase(self.repo, self.cache).execute(
            task.id, UpdateTaskCommand(title="A2")
        )
        self.assertEqual([t.title for t in list_use_case.execute()], ["A2"])

        DeleteTaskUseCase(self.repo, self.cache).execute(DeleteTaskCommand(id=task.id))
        self.assertEqual(list_use_case.execute(), [])

    def test_listar_con_cache_caida_lee_de_bdd(self) -> None:
        self._create("Sin caché")
        self.cache.fail_get = True
        self.cache.fail_set = True

        tasks = ListTasksUseCase(self.repo, self.cache).execute()

        self.assertEqual([t.title for t in tasks], ["Sin caché"])

    def test_listar_descarta_snapshot_corrupto(self) -> None:
        self._create("Real")
        self.cache.data[TASKS_CACHE_KEY] = "{no es json"

        tasks = ListTasksUseCase(self.repo, self.cache).execute()

        self.assertEqual([t.title for t in tasks], ["Real"])
        self.assertEqual(self.repo.list_calls, 1)

    def test_listar_propaga_fallo_de_bdd(self) -> None:
        self.repo.fail = True

        with self.assertRaises(DependencyError):
            ListTasksUseCase(self.repo, self.cache).execute()

    # ── Stats ─────────────────────────────────────────────────────────────────

    def test_stats_rellena_estados_ausentes_con_cero(self) -> None:
        self.assertEqual(TaskStatsUseCase(self.repo).execute(), TaskStats())

        self._create("p1")
        self._create("p2")
        self._create("c1", status="completed")

        stats = TaskStatsUseCase(self.repo).execute()

        self.assertEqual(stats, TaskStats(total=3, pending=2, in_progress=0, completed=1))
        self.assertEqual(
            stats.total, stats.pending + stats.in_progress + stats.completed
        )

    # ── Readiness ─────────────────────────────────────────────────────────────

    def test_readiness_ok(self) -> None:
        CheckReadinessUseCase(self.repo, self.cache).execute()

    def test_readiness_falla_si_bdd_caida(self) -> None:
        self.repo.fail = True

        with self.assertRaises(DependencyError):
            CheckReadinessUseCase(self.repo, self.cache).execute()

    def test_readiness_falla_si_cache_caida(self) -> None:
        self.cache.fail_ping = True

        with self.assertRaises(DependencyError):
            CheckReadinessUseCase(self.repo, self.cache).execute()


if __name__ == "__main__":
    unittest.main()
