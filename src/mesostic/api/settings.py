"""
Settings for the mesostic HTTP service.

All values can be overridden via environment variables prefixed with
``MESOSTIC_`` (``MESOSTIC_PORT``, ``MESOSTIC_LOG_LEVEL`` ...) or a ``.env``
file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MesosticSettings(BaseSettings):
    """Settings for the mesostic REST API.

    Order of precedence (highest → lowest):
        1. Constructor keyword arguments (tests)
        2. Environment variables (``MESOSTIC_PORT``, etc.)
        3. ``.env`` file
        4. Defaults below
    """

    model_config = SettingsConfigDict(
        env_prefix="MESOSTIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9999, description="Bind port")
    debug: bool = Field(default=False, description="Expose exception detail in 500 responses")

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "console", "auto"] = Field(
        default="auto",
        description="json, console, or auto (json unless stdout is a tty)",
    )

    # ── API ──────────────────────────────────────────────────────────────
    api_title: str = Field(default="Mesostic API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # ── Composition ──────────────────────────────────────────────────────
    compose_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Give up waiting for a composition after this many seconds",
    )
    max_concurrent_compositions: int = Field(
        default=8,
        ge=1,
        description="Compositions allowed to run at once; others wait",
    )
    max_source_chars: int = Field(
        default=1_000_000,
        ge=1,
        description="Reject submissions whose source text is longer than this",
    )

    @property
    def json_logs(self) -> bool | None:
        """Value for ``configure_logging(json_format=...)``."""
        if self.log_format == "auto":
            return None
        return self.log_format == "json"


@lru_cache(maxsize=1)
def get_settings() -> MesosticSettings:
    """Cached settings, loaded once per process."""
    return MesosticSettings()
