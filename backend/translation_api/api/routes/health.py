"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from translation_api.infrastructure.database import get_db_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "translation-api"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Liveness: 200 while the process serves requests; version comes from the app."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness_check():
    db_manager = get_db_manager()
    if db_manager is None or not await db_manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
