"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, the Prometheus
endpoint and the composition runner into a single ``FastAPI`` instance.

Routes::

    POST /app            JSON submission
    POST /app/{spine}    form / file submission
    GET  /ping           readiness ping (counted, not logged)
    GET  /metrics        Prometheus exposition
    GET  /health[/live|/ready]

Manifesto:
    The app factory is the single composition root. The engine, metrics
    and logging are injected here so none of them reference each other.

Tags:
    mesostic, api, app-factory, composition-root, FastAPI
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from mesostic.api.middleware.errors import mesostic_exception_handler, unhandled_exception_handler
from mesostic.api.middleware.request_context import RequestContextMiddleware
from mesostic.api.runner import CompositionRunner
from mesostic.api.settings import MesosticSettings, get_settings
from mesostic.core.errors import MesosticError
from mesostic.core.logging import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — startup / shutdown hooks."""
    settings: MesosticSettings = app.state.settings
    configure_logging(level=settings.log_level, json_format=settings.json_logs, service="mesostic")
    logger.info(
        "mesostic API starting",
        version=app.version,
        max_concurrent_compositions=settings.max_concurrent_compositions,
    )
    yield
    logger.info("mesostic API shutting down")


def create_app(*, settings: MesosticSettings | None = None) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : MesosticSettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # Stash settings on app state for middleware access
    app.state.settings = settings
    app.state.runner = CompositionRunner(
        max_concurrency=settings.max_concurrent_compositions,
        timeout_seconds=settings.compose_timeout_seconds,
        max_source_chars=settings.max_source_chars,
    )

    # Override DI so endpoints use the provided settings
    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (last added is outermost) ──────────────────────────
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(MesosticError, mesostic_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from mesostic.api.routers import compose, health, ping

    app.include_router(compose.router, tags=["compose"])
    app.include_router(ping.router, tags=["health"])
    app.include_router(health.router, tags=["health"])

    # ── Metrics endpoint (root-level, Prometheus format) ─────────────
    app.mount("/metrics", make_asgi_app())

    return app
