"""
Error handling: maps composition errors to RFC 7807 responses.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from mesostic.api.schemas import ErrorDetail, ProblemDetail
from mesostic.core.errors import MesosticError
from mesostic.core.logging import get_logger

logger = get_logger(__name__)

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "EMPTY_SOURCE": 422,
    "EMPTY_SPINE": 422,
    "SPINE_EXHAUSTS_SOURCE": 422,
    "SOURCE_TOO_LARGE": 413,
    "COMPOSE_TIMEOUT": 504,
    "INTERNAL": 500,
}

# Which part of the submission an error code refers to
_ERROR_FIELDS: dict[str, str] = {
    "EMPTY_SOURCE": "text",
    "SOURCE_TOO_LARGE": "text",
    "EMPTY_SPINE": "spine",
    "SPINE_EXHAUSTS_SOURCE": "spine",
}


def status_for_error_code(code: str) -> int:
    """Resolve an error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def problem_response(
    *,
    status: int,
    title: str,
    detail: str = "",
    instance: str = "",
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build a RFC 7807 JSON error response."""
    body = ProblemDetail(
        title=title,
        status=status,
        detail=detail,
        instance=instance,
    )
    if errors:
        body.errors = [ErrorDetail(**e) for e in errors]
    return JSONResponse(status_code=status, content=body.model_dump())


def error_response(request: Request, error: MesosticError) -> JSONResponse:
    """Convert a ``MesosticError`` into a Problem Details response."""
    return problem_response(
        status=status_for_error_code(error.code),
        title=error.message,
        detail=error.code,
        instance=str(request.url),
        errors=[{"code": error.code, "message": error.message, "field": _ERROR_FIELDS.get(error.code)}],
    )


async def mesostic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle ``MesosticError`` raised outside the engine (limits, timeouts)."""
    if not isinstance(exc, MesosticError):
        return await unhandled_exception_handler(request, exc)
    return error_response(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions, returned as a 500 with ProblemDetail."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    return problem_response(
        status=500,
        title="Internal Server Error",
        detail=str(exc) if request.app.state.settings.debug else "An unexpected error occurred.",
        instance=str(request.url),
    )
