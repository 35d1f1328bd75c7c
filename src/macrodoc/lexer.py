"""Macro markup lexer: converts escape-resolved input into a flat token stream."""

from __future__ import annotations

from macrodoc.escapes import ScannedChar, end_position, scan_escapes, unknown_escapes
from macrodoc.macros import HORIZONTAL_LINE, macro_names
from macrodoc.tokens import Position, Span, Token, TokenType, is_word_char


class Lexer:
    """Tokenize documentation markup into a stream of Token objects.

    Outside a macro call, words are matched against the macro names; a name
    directly followed by an unescaped ``(`` opens a call. Inside a call the
    lexer only tracks parenthesis depth: ``,`` at depth 1 separates
    arguments and the ``)`` that returns to depth 0 closes the call.
    Arguments are never scanned for nested macros.
    """

    def __init__(self, source: str, *, only_classic_markup: bool = False) -> None:
        self._source = source
        self._chars = scan_escapes(source)
        self.unknown_escapes = unknown_escapes(self._chars)
        self._pos = 0
        self._depth = 0
        self._tokens: list[Token] = []
        self._names = macro_names(only_classic_markup)
        self._text: list[str] = []
        self._text_start: Position | None = None
        self._text_end: Position | None = None

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._chars):
            if self._depth == 0:
                self._lex_prose()
            else:
                self._lex_argument()

        self._flush_text()
        end = end_position(self._chars)
        self._tokens.append(Token(TokenType.EOF, "", "", Span(end, end)))
        return self._tokens

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> ScannedChar | None:
        idx = self._pos + offset
        if idx < len(self._chars):
            return self._chars[idx]
        return None

    def _advance(self) -> ScannedChar:
        sc = self._chars[self._pos]
        self._pos += 1
        return sc

    def _at_unescaped(self, ch: str) -> bool:
        sc = self._peek()
        return sc is not None and not sc.escaped and sc.value == ch

    def _append_text(self, sc: ScannedChar) -> None:
        if self._text_start is None:
            self._text_start = sc.span.start
        self._text.append(sc.value)
        self._text_end = sc.span.end

    def _flush_text(self) -> None:
        if self._text_start is None or self._text_end is None:
            return
        span = Span(self._text_start, self._text_end)
        value = "".join(self._text)
        self._tokens.append(Token(TokenType.TEXT, value, span.slice(self._source), span))
        self._text.clear()
        self._text_start = None
        self._text_end = None

    def _emit(self, tt: TokenType, value: str, start: Position, end: Position) -> None:
        self._flush_text()
        span = Span(start, end)
        self._tokens.append(Token(tt, value, span.slice(self._source), span))

    # ------------------------------------------------------------------
    # Outside macro calls
    # ------------------------------------------------------------------

    def _lex_prose(self) -> None:
        sc = self._peek()
        assert sc is not None
        if not sc.escaped and is_word_char(sc.value):
            self._lex_word()
            return
        self._append_text(self._advance())

    def _lex_word(self) -> None:
        """Read a whole word; it is either a macro opener, the rule, or text."""
        first = self._pos
        while True:
            sc = self._peek()
            if sc is None or sc.escaped or not is_word_char(sc.value):
                break
            self._advance()
        word_chars = self._chars[first : self._pos]
        word = "".join(c.value for c in word_chars)
        start = word_chars[0].span.start

        if word in self._names and self._at_unescaped("("):
            paren = self._advance()
            self._emit(TokenType.MACRO_START, word, start, paren.span.end)
            self._depth = 1
            return

        if word == HORIZONTAL_LINE:
            self._emit(TokenType.HORIZONTAL_LINE, word, start, word_chars[-1].span.end)
            return

        for sc in word_chars:
            self._append_text(sc)

    # ------------------------------------------------------------------
    # Inside macro calls
    # ------------------------------------------------------------------

    def _lex_argument(self) -> None:
        sc = self._advance()
        if sc.escaped:
            self._append_text(sc)
            return

        if sc.value == "(":
            self._depth += 1
            self._append_text(sc)
        elif sc.value == ")":
            self._depth -= 1
            if self._depth == 0:
                self._emit(TokenType.MACRO_END, ")", sc.span.start, sc.span.end)
            else:
                self._append_text(sc)
        elif sc.value == "," and self._depth == 1:
            self._emit(TokenType.ARG_SEP, ",", sc.span.start, sc.span.end)
        else:
            self._append_text(sc)


def tokenize(source: str, *, only_classic_markup: bool = False) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, only_classic_markup=only_classic_markup).tokenize()
