"""
Mesostic engine — a pure function from (source text, spine) to a result.

Quick start::

    from mesostic.engine import compose

    match compose(open("poem.txt").read(), "CAGE"):
        case Ok(mesostic):
            print(mesostic.render())
        case Err(error):
            print(error.code)

The engine has no dependencies on the API, the CLI or observability.
"""

from mesostic.engine.composer import compose
from mesostic.engine.models import (
    Line,
    MatchedLine,
    Mesostic,
    RenderedLine,
    SourceText,
    Spine,
    SpineLetter,
)

__all__ = [
    "compose",
    "Line",
    "MatchedLine",
    "Mesostic",
    "RenderedLine",
    "SourceText",
    "Spine",
    "SpineLetter",
]
