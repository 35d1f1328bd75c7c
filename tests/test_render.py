"""Test renderer dispatch, paragraphs, and fallback rendering."""

from __future__ import annotations

import pytest

from macrodoc import convert
from macrodoc.errors import MarkupError, UnknownFormatError
from macrodoc.parser import parse, parse_paragraphs
from macrodoc.render import OutputFormat, Renderer, get_renderer, render, render_paragraphs
from macrodoc.render_antsibull_html import AntsibullHtmlRenderer
from macrodoc.render_antsibull_rst import AntsibullRstRenderer
from macrodoc.render_html import HtmlRenderer
from macrodoc.render_md import MarkdownRenderer
from macrodoc.render_rst import RstRenderer
from macrodoc.render_text import PlainTextRenderer


class TestDispatch:
    @pytest.mark.parametrize(
        "fmt, cls",
        [
            ("text", PlainTextRenderer),
            ("rst", RstRenderer),
            ("html", HtmlRenderer),
            ("md", MarkdownRenderer),
            ("antsibull-rst", AntsibullRstRenderer),
            ("antsibull-html", AntsibullHtmlRenderer),
            (OutputFormat.HTML, HtmlRenderer),
        ],
    )
    def test_get_renderer(self, fmt, cls):
        assert isinstance(get_renderer(fmt), cls)

    def test_unknown_format(self):
        doc, _ = parse("x")
        with pytest.raises(UnknownFormatError, match="pdf"):
            render(doc, "pdf")

    def test_unknown_format_is_value_error(self):
        with pytest.raises(ValueError):
            get_renderer("docx")

    def test_unknown_format_is_markup_error(self):
        with pytest.raises(MarkupError):
            convert("x", "latex")

    def test_convert_returns_diagnostics(self):
        output, diagnostics = convert("B(x) L(y)", "html")
        assert output == "<b>x</b> <a href=''>y</a>"
        assert len(diagnostics) == 1

    def test_same_document_many_formats(self):
        doc, _ = parse("C(x)")
        outputs = {fmt: render(doc, fmt) for fmt in OutputFormat}
        assert outputs[OutputFormat.PLAIN_TEXT] == "`x'"
        assert outputs[OutputFormat.HTML] == "<code>x</code>"
        # Rendering does not change the document
        assert parse("C(x)")[0] == doc


class TestParagraphs:
    def _docs(self, *paragraphs):
        return [doc for doc, _ in parse_paragraphs(paragraphs)]

    def test_html(self):
        assert render_paragraphs(self._docs("a", "B(b)"), "html") == "<p>a</p><p><b>b</b></p>"

    def test_text(self):
        assert render_paragraphs(self._docs("a", "b"), "text") == "a\n\nb"

    def test_rst_empty_paragraph(self):
        assert render_paragraphs(self._docs("a", ""), "rst") == "a\n\n\\ "

    def test_md_empty_paragraph(self):
        assert render_paragraphs(self._docs(""), "md") == " "

    def test_html_empty_paragraph(self):
        assert render_paragraphs(self._docs(""), "html") == "<p></p>"

    def test_no_paragraphs(self):
        assert render_paragraphs([], "text") == ""


class _PartialRenderer(Renderer):
    """Knows how to escape text but has no per-macro rules."""

    def escape_text(self, raw):
        return raw.upper()

    def render_macro(self, node, url):
        return self.fallback(node)

    def render_horizontal_rule(self):
        return "--"


class TestFallback:
    def test_unhandled_macro_renders_arguments(self):
        doc, _ = parse("see L(a, b) HORIZONTALLINE")
        assert _PartialRenderer().render(doc) == "SEE A B --"

    def test_base_hooks_not_implemented(self):
        doc, _ = parse("x")
        with pytest.raises(NotImplementedError):
            Renderer().render(doc)
