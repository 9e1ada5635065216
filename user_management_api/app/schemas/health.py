"""Pydantic models for the health endpoints."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from .error import CamelModel


class HealthResponse(CamelModel):
    status: str = Field(..., examples=["UP"])
    timestamp: datetime
    application: str
    version: str
    environment: str
    components: Dict[str, Any]
    uptime: str = Field(..., examples=["2h 15m 30s"])
    memory_usage: Optional[Dict[str, Any]] = None


class RuntimeInfo(CamelModel):
    implementation: str = Field(..., examples=["CPython"])
    version: str = Field(..., examples=["3.12.1"])
    executable: str


class OsInfo(CamelModel):
    name: str = Field(..., examples=["Linux"])
    version: str
    arch: str = Field(..., examples=["x86_64"])


class MemoryInfo(CamelModel):
    """Peak resident set size of the process, when the platform reports it."""

    max_rss_bytes: Optional[int] = None


class ApplicationInfo(CamelModel):
    name: str
    version: str
    environment: str
    start_time: datetime


class SystemInfoResponse(CamelModel):
    runtime: RuntimeInfo
    os: OsInfo
    memory: MemoryInfo
    application: ApplicationInfo
