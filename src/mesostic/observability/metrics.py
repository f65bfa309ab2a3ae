"""Prometheus metrics for the mesostic front end.

The engine never touches these; the request handler increments them.
"""

from prometheus_client import Counter, Histogram

post_app_counter = Counter(
    "mesostic_post_app_total",
    "Total number of POST /app requests.",
)

ping_counter = Counter(
    "mesostic_ping_total",
    "Total number of readiness pings.",
)

# 50 buckets, 10ms each, starting at 1ms
post_app_duration_histogram = Histogram(
    "mesostic_post_app_timer_seconds",
    "Histogram for the runtime of POST to /app",
    buckets=[round(0.001 + 0.01 * i, 3) for i in range(50)],
)

compose_failures_counter = Counter(
    "mesostic_compose_failures_total",
    "Total number of compositions that returned an error.",
    ["kind"],
)
