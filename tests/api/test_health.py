"""
Tests for readiness ping and health endpoints.
"""

from __future__ import annotations

from prometheus_client import REGISTRY

from mesostic.api.runner import CompositionRunner


class TestPing:
    def test_pong(self, client):
        resp = client.get("/ping")
        assert resp.status_code == 200
        assert resp.text == "pong\n"

    def test_ping_is_counted(self, client):
        before = REGISTRY.get_sample_value("mesostic_ping_total") or 0.0
        client.get("/ping")
        client.get("/ping")
        assert REGISTRY.get_sample_value("mesostic_ping_total") == before + 2


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["service"] == "Mesostic API"
        assert body["max_concurrent_compositions"] == 8

    def test_ready(self, client):
        assert client.get("/health/ready").status_code == 200

    def test_live(self, client):
        resp = client.get("/health/live")
        assert resp.status_code == 200
        assert resp.json() == {"status": "alive"}


class TestReadinessUnderLoad:
    def test_saturated_runner_is_not_ready(self, client, monkeypatch):
        monkeypatch.setattr(CompositionRunner, "saturated", property(lambda self: True))

        resp = client.get("/health/ready")

        assert resp.status_code == 503
        assert resp.json()["status"] == "degraded"

    def test_saturated_runner_still_reports_health(self, client, monkeypatch):
        monkeypatch.setattr(CompositionRunner, "saturated", property(lambda self: True))

        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "degraded"
