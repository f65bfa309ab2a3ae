"""Observability: Prometheus collectors for the HTTP front end."""

from mesostic.observability.metrics import (
    compose_failures_counter,
    ping_counter,
    post_app_counter,
    post_app_duration_histogram,
)

__all__ = [
    "compose_failures_counter",
    "ping_counter",
    "post_app_counter",
    "post_app_duration_histogram",
]
