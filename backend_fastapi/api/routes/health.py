import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from backend_fastapi.api.deps import check_readiness_use_case
from core.application.readiness import CheckReadinessUseCase
from core.domain.errors import DependencyError
from infrastructure.settings import app_version

SERVICE_NAME = "task-backend"

_started_at = time.monotonic()

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness")
def health() -> dict:
    """Responde siempre que el proceso esté vivo; no consulta dependencias."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": app_version(),
        "uptime": time.monotonic() - _started_at,
    }


@router.get("/ready", summary="Readiness")
def ready(
    use_case: CheckReadinessUseCase = Depends(check_readiness_use_case),
) -> JSONResponse:
    try:
        use_case.execute()
    except DependencyError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not ready", "error": str(e)},
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"status": "ready", "database": "connected", "cache": "connected"},
    )
