"""
Mesostic — compose mesostics from source text and a spine string.

A mesostic is a text in which each line is drawn from a source and carries,
at a marked position, the next letter of the spine, so the spine reads down
the page.

Packages:
- ``mesostic.engine``         the composition engine (pure, synchronous)
- ``mesostic.core``           errors, result envelope, logging
- ``mesostic.observability``  Prometheus metrics
- ``mesostic.api``            HTTP front end (FastAPI)
- ``mesostic.cli``            command line (Typer)
"""

__version__ = "0.1.0"

from mesostic.core.result import Err, Ok, Result  # noqa: E402
from mesostic.engine import Mesostic, compose  # noqa: E402

__all__ = ["__version__", "compose", "Mesostic", "Ok", "Err", "Result"]
