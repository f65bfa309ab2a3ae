"""Command line interface (``mesostic`` entry point)."""

from mesostic.cli.app import app

__all__ = ["app"]
