import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    task_stats_use_case,
    update_task_use_case,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.task_stats import TaskStatsUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import DependencyError, InvalidInputError, TaskNotFoundError
from core.domain.models.task import Task, TaskStats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tasks"])


@router.get(
    "/tasks",
    response_model=list[Task],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[Task]:
    """
    Obtiene todas las tareas, de la más reciente a la más antigua.

    Sirve el snapshot cacheado si existe; si no, consulta la base de datos.
    """
    try:
        return use_case.execute()
    except DependencyError:
        logger.exception("Error fetching tasks")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")


@router.get(
    "/tasks/{task_id}",
    response_model=Task,
    summary="Obtener una tarea",
)
def get_task(
    task_id: int,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Task:
    try:
        return use_case.execute(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DependencyError:
        logger.exception("Error fetching task")
        raise HTTPException(status_code=500, detail="Failed to fetch task")


@router.post(
    "/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    cmd: CreateTaskCommand = Body(default_factory=CreateTaskCommand),
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Task:
    """
    Crea una nueva tarea en el sistema.

    - **title**: Título de la tarea (obligatorio).
    - **description**: Descripción opcional.
    - **status**: Estado inicial (por defecto `pending`).
    - **priority**: Prioridad (por defecto `medium`).
    """
    try:
        return use_case.execute(cmd)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DependencyError:
        logger.exception("Error creating task")
        raise HTTPException(status_code=500, detail="Failed to create task")


@router.put(
    "/tasks/{task_id}",
    response_model=Task,
    summary="Reemplazar una tarea existente",
)
def update_task(
    task_id: int,
    cmd: UpdateTaskCommand = Body(default_factory=UpdateTaskCommand),
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Task:
    """
    Reemplaza todos los campos editables de una tarea.

    Los campos omitidos no se conservan: `description` queda vacía y
    `status`/`priority` vuelven a sus valores por defecto.
    """
    try:
        return use_case.execute(task_id, cmd)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DependencyError:
        logger.exception("Error updating task")
        raise HTTPException(status_code=500, detail="Failed to update task")


@router.delete(
    "/tasks/{task_id}",
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: int,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> dict[str, str]:
    try:
        return {"message": use_case.execute(DeleteTaskCommand(id=task_id))}
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DependencyError:
        logger.exception("Error deleting task")
        raise HTTPException(status_code=500, detail="Failed to delete task")


@router.get(
    "/stats",
    response_model=TaskStats,
    summary="Conteo de tareas por estado",
)
def task_stats(
    use_case: TaskStatsUseCase = Depends(task_stats_use_case),
) -> TaskStats:
    try:
        return use_case.execute()
    except DependencyError:
        logger.exception("Error fetching stats")
        raise HTTPException(status_code=500, detail="Failed to fetch stats")
