"""Test the AST and diagnostics dump."""

from __future__ import annotations

import io

from macrodoc.debug import dump_diagnostics, dump_document
from macrodoc.options import ParseContext
from macrodoc.references import PluginIdentifier


class TestDumpDocument:
    def test_nodes(self, parse_source):
        doc, _ = parse_source("Hello I(world) HORIZONTALLINE")
        out = io.StringIO()
        dump_document(doc, file=out)
        lines = out.getvalue().splitlines()
        assert lines[0].startswith("MarkupDocument @1:1-")
        assert lines[1] == "  Text('Hello ') @1:1-1:7"
        assert lines[2].startswith("  Macro I (ITALIC) @1:7-1:15")
        assert lines[3] == "    Arg 'world'"
        assert lines[5].startswith("  HorizontalRule")

    def test_raw_shown_when_different(self, parse_source):
        doc, _ = parse_source("C(a\\,b)")
        out = io.StringIO()
        dump_document(doc, file=out)
        assert "Arg 'a,b' raw='a\\\\,b'" in out.getvalue()

    def test_reference(self, parse_source):
        ctx = ParseContext(current_plugin=PluginIdentifier("ns.coll.mod", "module"))
        doc, _ = parse_source("O(foo=bar)", context=ctx)
        out = io.StringIO()
        dump_document(doc, file=out)
        assert "Ref plugin=ns.coll.mod#module name='foo' value='bar'" in out.getvalue()


class TestDumpDiagnostics:
    def test_formatted(self, parse_source):
        source = "B(x"
        _, diagnostics = parse_source(source)
        out = io.StringIO()
        dump_diagnostics(diagnostics, source, filename="doc.yml", file=out)
        text = out.getvalue()
        assert text.startswith("error[unterminated-macro]")
        assert "doc.yml:1:1" in text
        assert text.endswith("\n")

    def test_empty(self):
        out = io.StringIO()
        dump_diagnostics([], "", file=out)
        assert out.getvalue() == ""
