"""Minimal LSP server for documentation markup: diagnostics only."""

from __future__ import annotations

import logging

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from macrodoc import __version__, errors
from macrodoc.parser import parse

logger = logging.getLogger(__name__)

server = LanguageServer(
    "macrodoc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)

_SEVERITIES = {
    errors.Severity.ERROR: DiagnosticSeverity.Error,
    errors.Severity.WARNING: DiagnosticSeverity.Warning,
}


def to_lsp_diagnostic(diagnostic: errors.Diagnostic) -> Diagnostic:
    """Convert a parse diagnostic (1-based positions) to LSP (0-based)."""
    span = diagnostic.span
    return Diagnostic(
        range=Range(
            start=Position(line=span.start.line - 1, character=span.start.column - 1),
            end=Position(line=span.end.line - 1, character=span.end.column - 1),
        ),
        message=diagnostic.message,
        severity=_SEVERITIES[diagnostic.severity],
        code=diagnostic.code.value,
        source="macrodoc",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse the open document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    _, found = parse(doc.source)
    diagnostics = [to_lsp_diagnostic(d) for d in found]
    logger.debug("publishing %d diagnostics for %s", len(diagnostics), uri)

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
