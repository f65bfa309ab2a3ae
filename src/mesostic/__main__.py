"""Allow ``python -m mesostic``."""

from mesostic.cli.app import app

app()
