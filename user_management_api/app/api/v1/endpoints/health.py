"""
Health endpoints for API v1.

``GET /health`` reports whether the application can reach its
database, together with uptime and memory figures.  Load balancers
and deployment scripts poll it; it answers 503 when the database
check fails.  ``GET /health/info`` describes the runtime, operating
system and application build.
"""

import logging
import platform
import sqlite3
import sys
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from user_management_api.app.core.config import settings
from user_management_api.app.core.db import check_connection
from user_management_api.app.schemas.health import (
    ApplicationInfo,
    HealthResponse,
    MemoryInfo,
    OsInfo,
    RuntimeInfo,
    SystemInfoResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def format_uptime(started_at: datetime, now: datetime) -> str:
    """Render the time since ``started_at`` as ``"2h 15m 30s"``."""
    seconds = max(int((now - started_at).total_seconds()), 0)
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}h {minutes}m {seconds}s"


def max_rss_bytes() -> Optional[int]:
    """Peak resident set size of this process, or ``None`` where unsupported."""
    try:
        import resource
    except ImportError:
        # Not available on Windows.
        return None
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # Linux reports kilobytes, macOS bytes.
    return peak if sys.platform == "darwin" else peak * 1024


@router.get("", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
async def health(request: Request) -> JSONResponse:
    database = {"status": "UP", "details": {"database": "SQLite", "validationQuery": "SELECT 1"}}
    try:
        check_connection()
    except sqlite3.Error as exc:
        logger.error("Database health check failed: %s", exc)
        database = {"status": "DOWN", "details": {"database": "SQLite", "error": str(exc)}}
    overall = database["status"]
    now = datetime.now(timezone.utc)
    peak = max_rss_bytes()
    body = HealthResponse(
        status=overall,
        timestamp=now,
        application=settings.project_name,
        version=settings.api_version,
        environment=settings.environment,
        components={"database": database},
        uptime=format_uptime(request.app.state.started_at, now),
        memory_usage={"maxRssBytes": peak} if peak is not None else None,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if overall == "UP" else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json", by_alias=True),
    )


@router.get("/info", response_model=SystemInfoResponse)
async def system_info(request: Request) -> SystemInfoResponse:
    """Runtime, OS and application details.

    Exposes interpreter paths and versions; restrict access to it at
    the proxy in production.
    """
    return SystemInfoResponse(
        runtime=RuntimeInfo(
            implementation=platform.python_implementation(),
            version=platform.python_version(),
            executable=sys.executable,
        ),
        os=OsInfo(name=platform.system(), version=platform.release(), arch=platform.machine()),
        memory=MemoryInfo(max_rss_bytes=max_rss_bytes()),
        application=ApplicationInfo(
            name=settings.project_name,
            version=settings.api_version,
            environment=settings.environment,
            start_time=request.app.state.started_at,
        ),
    )
