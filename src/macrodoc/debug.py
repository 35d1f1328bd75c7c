"""Human-readable AST and diagnostics dump."""

from __future__ import annotations

import sys
from typing import TextIO

from macrodoc.ast import HorizontalRule, Macro, MarkupDocument, Text
from macrodoc.errors import Diagnostic
from macrodoc.tokens import Span


def dump_document(doc: MarkupDocument, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    file.write(f"MarkupDocument {_loc(doc.span)}\n")
    for node in doc:
        if isinstance(node, Text):
            file.write(f"{_indent(1)}Text({node.content!r}) {_loc(node.span)}\n")
        elif isinstance(node, HorizontalRule):
            file.write(f"{_indent(1)}HorizontalRule {_loc(node.span)}\n")
        elif isinstance(node, Macro):
            _dump_macro(node, 1, file)


def dump_diagnostics(
    diagnostics: list[Diagnostic],
    source: str,
    *,
    filename: str = "<markup>",
    file: TextIO = sys.stderr,
) -> None:
    """Print each diagnostic with its source context to *file*."""
    for diagnostic in diagnostics:
        file.write(diagnostic.format(source, filename))
        file.write("\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _loc(span: Span) -> str:
    return f"@{span.start.line}:{span.start.column}-{span.end.line}:{span.end.column}"


def _dump_macro(node: Macro, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Macro {node.kind.value} ({node.kind.name}) {_loc(node.span)}\n")
    for arg in node.arguments:
        f.write(f"{_indent(depth + 1)}Arg {arg.value!r}")
        if arg.raw != arg.value:
            f.write(f" raw={arg.raw!r}")
        f.write("\n")
    ref = node.reference
    if ref is not None:
        plugin = "-" if ref.plugin is None else str(ref.plugin)
        f.write(f"{_indent(depth + 1)}Ref plugin={plugin}")
        if ref.entrypoint is not None:
            f.write(f" entrypoint={ref.entrypoint}")
        f.write(f" name={ref.name!r}")
        if ref.value is not None:
            f.write(f" value={ref.value!r}")
        f.write("\n")
