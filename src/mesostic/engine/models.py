"""
Value types for mesostic composition.

All types are frozen dataclasses: a ``SourceText`` and a ``Spine`` are built
once per call from raw strings and never mutated, and each ``MatchedLine``
belongs to exactly one ``Mesostic``.

Architecture:
    ::

        raw text ──► SourceText ── Line(index, text) ...
        raw spine ─► Spine ─────── SpineLetter(position, offset, char, breaks_before) ...

        compose() ──► Mesostic
                        ├── matches:  MatchedLine(position, letter, line, column) ...
                        └── rendered_lines() ──► RenderedLine(line_index, text, columns) ...

Tags:
    mesostic, engine, data-model, immutable
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line of the source text and its 0-based index."""

    index: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    def find(self, target: str, start: int = 0) -> int:
        """Return the first column >= *start* whose character matches *target*.

        Matching is case-insensitive and done per character, so the returned
        column always indexes the original ``text``.  Returns ``-1`` when the
        remainder of the line does not contain *target*.
        """
        text = self.text
        for column in range(start, len(text)):
            if text[column].lower() == target:
                return column
        return -1


@dataclass(frozen=True)
class SourceText:
    """Ordered, immutable sequence of source lines."""

    lines: tuple[Line, ...] = ()

    @classmethod
    def parse(cls, text: str) -> SourceText:
        """Split *text* on line boundaries (``str.splitlines`` semantics)."""
        return cls(tuple(Line(i, line) for i, line in enumerate(text.splitlines())))

    @property
    def is_empty(self) -> bool:
        """True when no line carries any non-whitespace character."""
        return all(line.is_blank for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)


@dataclass(frozen=True, slots=True)
class SpineLetter:
    """An alphabetic spine character.

    Attributes:
        position: Index among the spine's alphabetic characters.
        offset: Index in the raw spine string.
        char: The character exactly as given.
        breaks_before: A non-alphabetic character separates this letter from
            the previous one, forcing a new output line.
    """

    position: int
    offset: int
    char: str
    breaks_before: bool = False

    @property
    def target(self) -> str:
        return self.char.lower()


@dataclass(frozen=True)
class Spine:
    """The string spelled down the page, reduced to its letters."""

    text: str
    letters: tuple[SpineLetter, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Spine:
        letters: list[SpineLetter] = []
        pending_break = False
        for offset, char in enumerate(text):
            if not char.isalpha():
                pending_break = bool(letters)
                continue
            letters.append(SpineLetter(len(letters), offset, char, pending_break))
            pending_break = False
        return cls(text, tuple(letters))

    @property
    def is_empty(self) -> bool:
        return not self.letters

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[SpineLetter]:
        return iter(self.letters)


@dataclass(frozen=True, slots=True)
class MatchedLine:
    """A source line selected for one spine position, with the matched column."""

    position: int
    letter: str
    line: Line
    column: int

    @property
    def line_index(self) -> int:
        return self.line.index

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "letter": self.letter,
            "line_index": self.line.index,
            "column": self.column,
        }


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One output line: a physical source line with one or more marked columns."""

    line_index: int
    text: str
    columns: tuple[int, ...]

    def marked(self) -> str:
        """Lower-case the line and upper-case the characters at ``columns``."""
        columns = set(self.columns)
        return "".join(
            char.upper() if i in columns else char.lower()
            for i, char in enumerate(self.text)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "line_index": self.line_index,
            "text": self.marked(),
            "columns": list(self.columns),
        }


@dataclass(frozen=True)
class Mesostic:
    """A successful composition: one ``MatchedLine`` per spine letter, in spine order."""

    spine: Spine
    matches: tuple[MatchedLine, ...] = field(default_factory=tuple)

    def line_indices(self) -> list[int]:
        """Physical source-line index used for each spine position."""
        return [match.line_index for match in self.matches]

    def rendered_lines(self) -> list[RenderedLine]:
        from mesostic.engine.render import collapse

        return collapse(self)

    def render(self, *, align: bool = True) -> str:
        from mesostic.engine.render import render

        return render(self, align=align)

    def to_dict(self) -> dict[str, Any]:
        return {
            "spine": self.spine.text,
            "matches": [match.to_dict() for match in self.matches],
            "lines": [line.to_dict() for line in self.rendered_lines()],
        }

    def __len__(self) -> int:
        return len(self.matches)
