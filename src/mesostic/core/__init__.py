"""
Core primitives shared by the engine, the API and the CLI.

- ``errors``  — the composition error taxonomy
- ``result``  — ``Ok`` / ``Err`` envelope returned by ``compose()``
- ``logging`` — structlog configuration
"""

from mesostic.core.errors import (
    CompositionTimeoutError,
    EmptySourceError,
    EmptySpineError,
    ErrorCategory,
    MesosticError,
    SourceTooLargeError,
    SpineExhaustsSourceError,
)
from mesostic.core.result import Err, Ok, Result

__all__ = [
    "CompositionTimeoutError",
    "EmptySourceError",
    "EmptySpineError",
    "ErrorCategory",
    "MesosticError",
    "SourceTooLargeError",
    "SpineExhaustsSourceError",
    "Err",
    "Ok",
    "Result",
]
