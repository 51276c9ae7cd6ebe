from __future__ import annotations

from fastapi import APIRouter, Depends

from organization_management.core.config import settings
from organization_management.core.database import Database
from organization_management.core.dependencies import get_database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(database: Database = Depends(get_database)):  # noqa: B008
    services: dict[str, str] = {}

    if database.initialized:
        ok = await database.check_connection()
        services["database"] = "ok" if ok else "error"
    else:
        services["database"] = "not_configured"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
