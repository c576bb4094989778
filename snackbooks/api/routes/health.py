"""
Health check endpoints.
"""

import time

import aiosqlite
from fastapi import APIRouter

from snackbooks import __version__
from snackbooks.application.dto.responses import HealthResponse
from snackbooks.core.exceptions import DatabaseError

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service status and uptime."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """SQLite connectivity check."""
    from snackbooks.infrastructure.storage.sqlite import get_pool

    try:
        await (await get_pool()).ping()
        database = "ok"
        status = "healthy"
    except (aiosqlite.Error, OSError, DatabaseError) as e:
        database = str(e)
        status = "unhealthy"

    return HealthResponse(
        status=status,
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        database=database,
    )
