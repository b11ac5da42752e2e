"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from app.config import Settings
from app.database.connection import Database, get_database
from app.models import HealthResponse
from app.services import RedisCache, get_app_settings, get_cache

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and its dependencies."
)
async def health_check(
    database: Database = Depends(get_database),
    cache: RedisCache = Depends(get_cache),
    settings: Settings = Depends(get_app_settings),
):
    """
    Check health of all dependencies.

    Returns 200 if all healthy, 503 if any unhealthy.
    """
    dependencies: dict[str, str] = {}

    db_healthy, db_error = await database.health_check()
    dependencies["database"] = "healthy" if db_healthy else f"unhealthy: {db_error}"

    if cache.enabled:
        redis_healthy, redis_error = await cache.health_check()
        dependencies["redis"] = "healthy" if redis_healthy else f"unhealthy: {redis_error}"
    else:
        dependencies["redis"] = "disabled"

    # Determine overall status
    all_healthy = all(v in ("healthy", "disabled") for v in dependencies.values())
    overall_status = "healthy" if all_healthy else "degraded"

    response = HealthResponse(
        status=overall_status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        dependencies=dependencies
    )

    # Return 503 if degraded
    if not all_healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump()
        )

    return response
