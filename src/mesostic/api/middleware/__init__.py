"""API middleware package.

Cross-cutting concerns (request IDs, request logging, timing, error
mapping) live here so routers stay focused on composition.
"""

from mesostic.api.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
