"""Request context middleware: request IDs, timing and structured request logging.

Every request gets an ``X-Request-ID`` (taken from the incoming header when
present) that is bound into the structlog context for the lifetime of the
request, and an ``X-Process-Time-Ms`` header with the time spent serving
it.  One ``request_completed`` event is logged per request; readiness pings
and metrics scrapes are counted elsewhere but not logged.
"""

from __future__ import annotations

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from mesostic.core.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

DEFAULT_QUIET_PATHS: tuple[str, ...] = ("/ping", "/metrics", "/health")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a request ID, time the request and log it with its transport details.

    Parameters
    ----------
    app:
        The ASGI application to wrap.
    quiet_paths:
        Path prefixes that are served without a log line.
    """

    def __init__(self, app: object, quiet_paths: tuple[str, ...] = DEFAULT_QUIET_PATHS) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self.quiet_paths = quiet_paths

    def _is_quiet(self, path: str) -> bool:
        return any(path.startswith(p) for p in self.quiet_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )
        bind_context(request_id=request_id)
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise
        else:
            elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
            if not self._is_quiet(request.url.path):
                logger.info(
                    "request_completed",
                    host=request.headers.get("host", ""),
                    ref=f"{request.client.host}:{request.client.port}" if request.client else "unknown",
                    xref=request.headers.get("X-Forwarded-For", ""),
                    method=request.method,
                    path=request.url.path,
                    proto=f"HTTP/{request.scope.get('http_version', '1.1')}",
                    agent=request.headers.get("User-Agent", ""),
                    response=response.status_code,
                    duration_ms=elapsed_ms,
                )
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time-Ms"] = str(elapsed_ms)
            return response
        finally:
            clear_context()
