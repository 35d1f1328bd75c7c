"""Token types, source positions, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    TEXT = auto()  # literal run, value is escape-resolved
    MACRO_START = auto()  # NAME( -- value is the macro name
    ARG_SEP = auto()  # , at depth 1 inside a macro call
    MACRO_END = auto()  # ) returning depth to 0
    HORIZONTAL_LINE = auto()  # standalone HORIZONTALLINE word

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position

    def slice(self, source: str) -> str:
        """Return the source text covered by this span."""
        return source[self.start.offset : self.end.offset]


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token with resolved value and original source text."""

    type: TokenType
    value: str
    raw: str
    span: Span


START = Position(1, 1, 0)


def is_word_char(ch: str) -> bool:
    """Return True if ch belongs to a word (letters, digits, underscore)."""
    return ch.isalnum() or ch == "_"
