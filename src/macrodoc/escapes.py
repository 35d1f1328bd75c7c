"""Backslash escape resolution ahead of tokenization."""

from __future__ import annotations

from dataclasses import dataclass

from macrodoc.tokens import START, Position, Span

# Characters a backslash can escape. Anything else after a backslash
# leaves the backslash in place as ordinary text.
ESCAPABLE = frozenset("\\(),")


@dataclass(frozen=True, slots=True)
class ScannedChar:
    """One resolved character.

    ``escaped`` is True when a backslash escape produced the character; the
    tokenizer then treats it as text even if it is ``(``, ``)`` or ``,``.
    ``span`` covers the raw source, including the backslash.
    """

    value: str
    escaped: bool
    span: Span


class EscapeScanner:
    """Resolve escape sequences in raw input into a stream of ScannedChar."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    def scan(self) -> list[ScannedChar]:
        result: list[ScannedChar] = []
        while self._pos < len(self._source):
            start = self._current_pos()
            ch = self._advance()
            if ch == "\\" and self._peek() in ESCAPABLE:
                escaped = self._advance()
                result.append(ScannedChar(escaped, True, Span(start, self._current_pos())))
            else:
                result.append(ScannedChar(ch, False, Span(start, self._current_pos())))
        return result

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch


def scan_escapes(source: str) -> list[ScannedChar]:
    """Convenience function: resolve escapes in source."""
    return EscapeScanner(source).scan()


def end_position(chars: list[ScannedChar]) -> Position:
    """Position just past the last scanned character."""
    if chars:
        return chars[-1].span.end
    return START


def unknown_escapes(chars: list[ScannedChar]) -> list[Span]:
    """Spans of backslashes that escape nothing, together with the next character.

    A backslash left unescaped by the scanner is always followed by a
    character outside ESCAPABLE, or by the end of input.
    """
    spans: list[Span] = []
    for sc, following in zip(chars, chars[1:]):
        if sc.value == "\\" and not sc.escaped:
            spans.append(Span(sc.span.start, following.span.end))
    return spans
