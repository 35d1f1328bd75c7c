"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from macrodoc.ast import Macro, MacroKind, MarkupDocument, Node, Text
from macrodoc.errors import Diagnostic, DiagnosticCode
from macrodoc.lexer import tokenize
from macrodoc.options import ParseContext, ParseOptions
from macrodoc.parser import parse
from macrodoc.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str, *, only_classic_markup: bool = False) -> list[Token]:
        tokens = tokenize(source, only_classic_markup=only_classic_markup)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns (document, diagnostics)."""

    def _parse(
        source: str,
        *,
        context: ParseContext | None = None,
        options: ParseOptions | None = None,
    ) -> tuple[MarkupDocument, list[Diagnostic]]:
        return parse(source, context=context, options=options)

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_macro(node: Node, kind: MacroKind, *args: str) -> None:
    """Assert a node is a Macro of the given kind with the given argument values."""
    assert isinstance(node, Macro), f"Expected Macro, got {type(node).__name__}"
    assert node.kind is kind, f"Expected kind {kind}, got {node.kind}"
    actual = tuple(a.value for a in node.arguments)
    assert actual == args, f"Expected args {args}, got {actual}"


def assert_text(node: Node, content: str) -> None:
    """Assert a node is a Text node with the given content."""
    assert isinstance(node, Text), f"Expected Text, got {type(node).__name__}"
    assert node.content == content, f"Expected {content!r}, got {node.content!r}"


def codes(diagnostics: list[Diagnostic]) -> list[DiagnosticCode]:
    """Return the codes of the given diagnostics, in order."""
    return [d.code for d in diagnostics]
