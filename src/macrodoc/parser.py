"""Macro markup parser: converts a token stream into an AST plus diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from macrodoc.ast import Argument, HorizontalRule, Macro, MacroKind, MarkupDocument, Node, Text
from macrodoc.errors import Diagnostic, DiagnosticCode, Severity, compose_message
from macrodoc.lexer import Lexer
from macrodoc.macros import kind_for_name
from macrodoc.options import ParseContext, ParseOptions
from macrodoc.references import OptionLikeRef, ReferenceSyntaxError, parse_option_like
from macrodoc.tokens import START, Position, Span, Token, TokenType
from macrodoc.validate import validate

logger = logging.getLogger(__name__)

_OPTION_LIKE = frozenset({MacroKind.OPTION_REF, MacroKind.RETURN_VALUE_REF})


class Parser:
    """Single-pass parser for macro markup token streams.

    Never raises on malformed input: an unterminated call becomes a Text
    node holding its raw source and an error lands in ``diagnostics``.
    """

    def __init__(
        self,
        tokens: list[Token],
        source: str,
        *,
        options: ParseOptions | None = None,
        context: ParseContext | None = None,
    ) -> None:
        self._tokens = tokens
        self._source = source
        self._options = options if options is not None else ParseOptions()
        self._context = context if context is not None else ParseContext()
        self._pos = 0
        self.diagnostics: list[Diagnostic] = []

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return self._tokens[-1]  # EOF

    def _at(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _at_eof(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    # ------------------------------------------------------------------
    # Document level
    # ------------------------------------------------------------------

    def parse(self) -> MarkupDocument:
        nodes: list[Node] = []

        while not self._at_eof():
            if self._at(TokenType.MACRO_START):
                node = self._parse_macro()
                if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                    node = _join_text(nodes.pop(), node)
                nodes.append(node)
            elif self._at(TokenType.HORIZONTAL_LINE):
                nodes.append(HorizontalRule(self._advance().span))
            else:
                nodes.append(self._parse_text())

        end = self._peek().span.end
        return MarkupDocument(tuple(nodes), Span(START, end))

    def _parse_text(self) -> Text:
        """Merge consecutive text tokens into one Text node."""
        parts: list[str] = []
        first = self._peek()
        last = first
        # The lexer never emits ARG_SEP or MACRO_END at depth 0; hand-built
        # streams get them back as the characters they stand for.
        while self._at(TokenType.TEXT, TokenType.ARG_SEP, TokenType.MACRO_END):
            last = self._advance()
            parts.append(last.value)
        return Text("".join(parts), Span(first.span.start, last.span.end))

    # ------------------------------------------------------------------
    # Macro calls
    # ------------------------------------------------------------------

    def _parse_macro(self) -> Macro | Text:
        open_tok = self._advance()
        kind = kind_for_name(open_tok.value)
        arguments: list[Argument] = []
        parts: list[Token] = []
        arg_start = open_tok.span.end

        while True:
            if self._at_eof():
                return self._recover_unterminated(open_tok)

            tok = self._advance()
            if tok.type == TokenType.ARG_SEP:
                arguments.append(self._make_argument(parts, arg_start, tok.span.start))
                parts = []
                arg_start = tok.span.end
            elif tok.type == TokenType.MACRO_END:
                arguments.append(self._make_argument(parts, arg_start, tok.span.start))
                span = Span(open_tok.span.start, tok.span.end)
                reference = self._resolve_reference(kind, arguments)
                return Macro(kind, tuple(arguments), span, reference)
            else:
                parts.append(tok)

    def _make_argument(self, parts: list[Token], start: Position, end: Position) -> Argument:
        span = Span(start, end)
        return Argument("".join(t.value for t in parts), span.slice(self._source), span)

    def _resolve_reference(
        self, kind: MacroKind, arguments: list[Argument]
    ) -> OptionLikeRef | None:
        if kind not in _OPTION_LIKE or not arguments:
            return None
        try:
            return parse_option_like(arguments[0].value, self._context)
        except ReferenceSyntaxError:
            # Reported as a shape warning by the validator
            return None

    def _recover_unterminated(self, open_tok: Token) -> Text:
        span = Span(open_tok.span.start, self._peek().span.end)
        message = compose_message(
            self._source,
            span,
            open_tok.value,
            'Cannot find closing ")" after last parameter',
            helpful=self._options.helpful_errors,
            where=self._options.where,
        )
        self.diagnostics.append(
            Diagnostic(Severity.ERROR, DiagnosticCode.UNTERMINATED_MACRO, message, span)
        )
        return Text(span.slice(self._source), span)


def _join_text(first: Text, second: Text) -> Text:
    return Text(first.content + second.content, Span(first.span.start, second.span.end))


def _escape_warnings(spans: list[Span], source: str, options: ParseOptions) -> list[Diagnostic]:
    warnings: list[Diagnostic] = []
    for span in spans:
        escaped = span.slice(source)[1:]
        message = compose_message(
            source,
            span,
            None,
            f"Unnecessarily escaped {escaped!r}",
            helpful=options.helpful_errors,
            where=options.where,
        )
        warnings.append(
            Diagnostic(Severity.WARNING, DiagnosticCode.UNNECESSARY_ESCAPE, message, span)
        )
    return warnings


def parse(
    source: str,
    *,
    context: ParseContext | None = None,
    options: ParseOptions | None = None,
) -> tuple[MarkupDocument, list[Diagnostic]]:
    """Parse one markup string into a document and its diagnostics."""
    options = options if options is not None else ParseOptions()
    context = context if context is not None else ParseContext()

    lexer = Lexer(source, only_classic_markup=options.only_classic_markup)
    parser = Parser(lexer.tokenize(), source, options=options, context=context)
    document = parser.parse()

    diagnostics = list(parser.diagnostics)
    if options.strict:
        diagnostics += _escape_warnings(lexer.unknown_escapes, source, options)
    diagnostics += validate(document, source, options=options, context=context)
    diagnostics.sort(key=lambda d: d.span.start.offset)
    logger.debug("parsed %d nodes, %d diagnostics", len(document.nodes), len(diagnostics))
    return document, diagnostics


def parse_paragraphs(
    paragraphs: Iterable[str],
    *,
    context: ParseContext | None = None,
    options: ParseOptions | None = None,
) -> list[tuple[MarkupDocument, list[Diagnostic]]]:
    """Parse each string as its own paragraph.

    Diagnostic messages name the 1-based paragraph they come from.
    """
    options = options if options is not None else ParseOptions()
    return [
        parse(paragraph, context=context, options=options.with_paragraph(index))
        for index, paragraph in enumerate(paragraphs, start=1)
    ]
