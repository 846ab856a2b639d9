"""Health & Readiness — liveness plus the two preconditions for serving profile traffic.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 until the profile store is hydrated and while the
      database is unreachable: mutations persist before committing, so neither can be
      served without both

Design Decisions:
    - db_manager read from the module at request time: tests swap the singleton
    - Store size reported on readiness, it is the count hydrated at startup plus
      everything committed since
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import app.infrastructure.database as db_module

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "status": "healthy",
        "service": "ddate-profiles-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    service = getattr(request.app.state, "profile_service", None)
    if service is None:
        return _not_ready("profile_store_not_loaded")

    manager = db_module.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return _not_ready("database_unavailable")
    return {
        "status": "ready",
        "checks": {"database": "healthy", "profile_store": "loaded"},
        "profiles": len(service.store),
    }


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
