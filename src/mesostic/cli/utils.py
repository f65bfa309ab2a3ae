"""
CLI utility helpers: consoles and input reading.
"""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def read_source(path: Path | None) -> str:
    """Read source text from *path*, or from stdin when *path* is ``None`` or ``-``.

    Undecodable bytes become U+FFFD, as they do for uploads to the API.
    """
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8", errors="replace")
