from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def utcnow() -> datetime:
    """Marca de tiempo UTC sin tzinfo, tal como la guardan las columnas TIMESTAMP."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str | None = None
    # Se aceptan valores fuera de los enums: el servicio solo aplica defaults.
    status: str = TaskStatus.PENDING.value
    priority: str = TaskPriority.MEDIUM.value
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(slots=True)
class TaskStats:
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0

    @classmethod
    def from_counts(cls, counts: dict[str, int]) -> "TaskStats":
        """
        Construye el resumen a partir de conteos agrupados por estado.

        Los estados ausentes se reportan como cero; `total` incluye también
        las filas con estados no reconocidos.
        """
        return cls(
            total=sum(counts.values()),
            pending=counts.get(TaskStatus.PENDING.value, 0),
            in_progress=counts.get(TaskStatus.IN_PROGRESS.value, 0),
            completed=counts.get(TaskStatus.COMPLETED.value, 0),
        )
