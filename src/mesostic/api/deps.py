"""
FastAPI dependency injection: settings and the composition runner.

Usage in routers::

    from mesostic.api.deps import Runner, Settings

    @router.post("/things")
    async def make_thing(runner: Runner, settings: Settings):
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from mesostic.api.runner import CompositionRunner
from mesostic.api.settings import MesosticSettings, get_settings


def get_runner(request: Request) -> CompositionRunner:
    """The app-wide runner created by ``create_app``."""
    return request.app.state.runner


Settings = Annotated[MesosticSettings, Depends(get_settings)]
Runner = Annotated[CompositionRunner, Depends(get_runner)]
