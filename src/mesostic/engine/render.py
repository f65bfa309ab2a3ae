"""
Turn a composed ``Mesostic`` into output lines.

Consecutive matches on the same physical source line collapse into a single
output line with several marked columns, unless the spine has a
non-alphabetic character between them.  Alignment pads each output line on
the left so the first marked letter of every line sits on one vertical axis.
"""

from __future__ import annotations

from mesostic.engine.models import Mesostic, RenderedLine


def collapse(mesostic: Mesostic) -> list[RenderedLine]:
    """Group matches into output lines, preserving spine order."""
    letters = mesostic.spine.letters
    rendered: list[RenderedLine] = []
    current_line = None
    columns: list[int] = []

    for match in mesostic.matches:
        starts_new = (
            current_line is None
            or match.line_index != current_line.index
            or letters[match.position].breaks_before
        )
        if starts_new:
            if current_line is not None:
                rendered.append(RenderedLine(current_line.index, current_line.text, tuple(columns)))
            current_line = match.line
            columns = []
        columns.append(match.column)

    if current_line is not None:
        rendered.append(RenderedLine(current_line.index, current_line.text, tuple(columns)))
    return rendered


def render(mesostic: Mesostic, *, align: bool = True) -> str:
    """Render the mesostic as newline-joined text."""
    lines = collapse(mesostic)
    if not align:
        return "\n".join(line.marked() for line in lines)

    axis = max((line.columns[0] for line in lines), default=0)
    return "\n".join(" " * (axis - line.columns[0]) + line.marked() for line in lines)


__all__ = ["collapse", "render"]
