"""
Readiness ping.

GET /ping  →  ``pong``

Pings are counted in ``mesostic_ping_total`` but never logged.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from mesostic.observability.metrics import ping_counter

router = APIRouter()


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> PlainTextResponse:
    """Readiness probe for load balancers and orchestrators."""
    ping_counter.inc()
    return PlainTextResponse("pong\n")
