"""
Shared pytest fixtures and configuration for mesostic tests.

This module provides:
- Auto-marking of tests as unit / integration by location
- structlog reset between tests
- An HTTP test client built from explicit settings
"""

import sys
from pathlib import Path

import pytest
import structlog

# Ensure mesostic package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastapi.testclient import TestClient  # noqa: E402

from mesostic.api.app import create_app  # noqa: E402
from mesostic.api.settings import MesosticSettings  # noqa: E402


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.path).relative_to(Path(__file__).parent)
        if test_path.parts and test_path.parts[0] == "api":
            item.add_marker(pytest.mark.integration)
        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any ``configure_logging`` call made by a test or an app lifespan."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> MesosticSettings:
    return MesosticSettings(log_format="json", log_level="WARNING")


@pytest.fixture
def client(settings):
    """A TestClient running the full app (lifespan included)."""
    app = create_app(settings=settings)
    with TestClient(app) as c:
        yield c
