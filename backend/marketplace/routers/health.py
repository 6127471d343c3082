from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from marketplace.config import settings
from marketplace.database import Database, get_database

router = APIRouter()


@router.get("/health")
def health_check(database: Database = Depends(get_database)) -> dict:
    return {
        "status": "success",
        "message": "API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "appName": settings.app_name,
        "database": "ok" if database.ping() else "unavailable",
    }
