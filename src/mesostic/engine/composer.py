"""
Mesostic composition.

``compose(source_text, spine)`` scans the source once, left to right, driven
by the spine's letters.  Two cursors only ever move forward:

- the **line cursor**: index of the source line currently eligible;
- the **column cursor**: first column of that line not yet consumed.

For each spine letter the remainder of the current line is searched first
(leftmost occurrence wins); if the letter is absent the line cursor advances
and the column resets to 0.  Running off the end of the source is a hard
failure: no partial mesostic is ever returned.

Examples:
    >>> result = compose("river\\nforest\\nplain", "RIP")
    >>> result.unwrap().line_indices()
    [0, 0, 2]
    >>> compose("ab\\ncd", "z").error.code
    'SPINE_EXHAUSTS_SOURCE'

Performance:
    - One pass over the source characters, amortised over the whole spine.
    - No shared state; concurrent calls need no coordination.

Tags:
    mesostic, engine, composition, deterministic, pure-function
"""

from __future__ import annotations

from mesostic.core.errors import EmptySourceError, EmptySpineError, SpineExhaustsSourceError
from mesostic.core.result import Err, Ok, Result
from mesostic.engine.models import MatchedLine, Mesostic, SourceText, Spine


def compose(source_text: str, spine: str) -> Result[Mesostic]:
    """Compose a mesostic of *spine* drawn from *source_text*.

    Returns:
        ``Ok(Mesostic)`` with exactly one ``MatchedLine`` per alphabetic spine
        character, or ``Err`` carrying ``EmptySourceError``,
        ``EmptySpineError`` or ``SpineExhaustsSourceError``.
    """
    source = SourceText.parse(source_text)
    if source.is_empty:
        return Err(EmptySourceError())

    parsed = Spine.parse(spine)
    if parsed.is_empty:
        return Err(EmptySpineError())

    matches: list[MatchedLine] = []
    line_no, column = 0, 0

    for letter in parsed:
        target = letter.target
        while line_no < len(source):
            found = source[line_no].find(target, column)
            if found >= 0:
                break
            line_no, column = line_no + 1, 0
        else:
            return Err(SpineExhaustsSourceError(letter.position, letter.char, letter.offset))

        matches.append(MatchedLine(letter.position, letter.char, source[line_no], found))
        column = found + 1

    return Ok(Mesostic(parsed, tuple(matches)))


__all__ = ["compose"]
