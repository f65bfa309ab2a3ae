"""
Tests for the FastAPI application factory.
"""

from __future__ import annotations

from fastapi import FastAPI

from mesostic.api.app import create_app
from mesostic.api.runner import CompositionRunner
from mesostic.api.settings import MesosticSettings


class TestCreateApp:
    def test_returns_fastapi_instance(self, settings):
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_title_and_version_from_settings(self):
        app = create_app(settings=MesosticSettings(api_title="Poems", api_version="9.9"))
        assert app.title == "Poems"
        assert app.version == "9.9"

    def test_settings_on_state(self, settings):
        app = create_app(settings=settings)
        assert app.state.settings is settings

    def test_runner_reflects_settings(self):
        settings = MesosticSettings(
            max_concurrent_compositions=3,
            compose_timeout_seconds=2.0,
            max_source_chars=100,
        )
        runner = create_app(settings=settings).state.runner
        assert isinstance(runner, CompositionRunner)
        assert runner.max_concurrency == 3
        assert runner.timeout_seconds == 2.0
        assert runner.max_source_chars == 100

    def test_routes_registered(self, settings):
        app = create_app(settings=settings)
        paths = {getattr(route, "path", None) for route in app.routes}
        assert "/app" in paths
        assert "/app/{spine}" in paths
        assert "/ping" in paths
        assert "/health" in paths
        assert "/health/live" in paths
        assert "/metrics" in paths

    def test_openapi_schema(self, client):
        resp = client.get("/openapi.json")
        assert resp.status_code == 200
        assert "/app" in resp.json()["paths"]

    def test_cors_headers(self, client):
        resp = client.options(
            "/app",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
        )
        assert resp.status_code == 200
        assert "access-control-allow-origin" in resp.headers
