from fastapi import APIRouter
from sqlalchemy import text

from pos.database import engine
from pos.utils.cache import cache_service

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check if the datastore (and Redis, when caching is on) is ready."
)
def readiness_check():
    """
    Readiness check for all dependencies.

    Returns status of:
    - Database connection
    - Redis connection (reported as skipped when the cache is disabled)
    """
    checks = {"database": False}

    # Check database
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
            checks["database"] = True
    except Exception as e:
        checks["database_error"] = str(e)

    # Check Redis
    if cache_service.enabled:
        checks["redis"] = False
        try:
            checks["redis"] = cache_service.ping()
        except Exception as e:
            checks["redis_error"] = str(e)
    else:
        checks["redis"] = "skipped"

    all_healthy = checks["database"] and checks["redis"] in (True, "skipped")

    return {
        "status": "ready" if all_healthy else "not_ready",
        "checks": checks
    }
