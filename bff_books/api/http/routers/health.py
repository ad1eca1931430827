"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from bff_books.api.http.deps import get_app_dependencies
from bff_books.api.http.app_data import ApplicationDependencies
from bff_books.runtime.config.config_data import ConfigData

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "books"}


@router.get("/ready")
async def readiness(
    request: Request,
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any]:
    """Readiness check.

    Redis only carries best-effort notifications, so an unreachable Redis
    degrades the service but never makes it unready.
    """
    config: ConfigData = request.app.state.config
    checks: dict[str, Any] = {
        "store": {"status": "healthy", "books": len(app_deps.book_store)},
    }

    if not config.redis.enabled:
        checks["redis"] = {"status": "disabled"}
    elif await app_deps.redis_service.health_check():
        checks["redis"] = {
            "status": "healthy",
            "channel": config.redis.channel,
            "info": await app_deps.redis_service.get_info(),
        }
    else:
        checks["redis"] = {
            "status": "degraded",
            "note": "Book notifications are being dropped",
        }

    return {"status": "ready", "checks": checks}
