"""API routers: composition submissions, readiness ping, health."""
