"""
Health endpoints.

GET /health        Primary health with service metadata.
GET /health/live   Liveness probe, 200 while the process runs.
GET /health/ready  Readiness probe, 200 while a composition would be
                   admitted without waiting, 503 when every slot is busy.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from mesostic.api.deps import Runner, Settings

# Set on first import
_START_TIME = time.monotonic()

router = APIRouter(prefix="/health")


class HealthResponse(BaseModel):
    """Standard health response envelope."""

    status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
    service: str = ""
    version: str = ""
    uptime_s: float = Field(default_factory=lambda: round(time.monotonic() - _START_TIME, 1))
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    max_concurrent_compositions: int = 0


class LivenessResponse(BaseModel):
    """Response for liveness probes: ``{"status": "alive"}``."""

    status: str = "alive"


def _health(settings: Settings, runner: Runner) -> HealthResponse:
    return HealthResponse(
        status="degraded" if runner.saturated else "healthy",
        service=settings.api_title,
        version=settings.api_version,
        max_concurrent_compositions=runner.max_concurrency,
    )


@router.get("", response_model=HealthResponse)
async def health(settings: Settings, runner: Runner) -> HealthResponse:
    """Report service metadata and composition capacity.

    Always 200; ``status`` is ``degraded`` while every composition slot is busy.
    """
    return _health(settings, runner)


@router.get("/ready", response_model=HealthResponse)
async def readiness(settings: Settings, runner: Runner, response: Response) -> HealthResponse:
    """Readiness probe: 503 while new compositions would have to wait."""
    body = _health(settings, runner)
    if runner.saturated:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return body


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe, always 200 if the process is running."""
    return LivenessResponse()
