"""
HTTP front end for the mesostic engine.

This package owns the HTTP boundary: decoding submissions, running
compositions in worker threads, mapping failures to Problem Details,
request logging and Prometheus metrics.  All composition logic lives in
``mesostic.engine``.

Quick start::

    from mesostic.api import create_app

    app = create_app()  # ready for uvicorn
"""

from mesostic.api.app import create_app

__all__ = ["create_app"]
