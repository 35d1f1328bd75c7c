"""Renderer contract and output format dispatch."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from macrodoc.ast import HorizontalRule, Macro, MacroKind, MarkupDocument, Node, Text
from macrodoc.errors import UnknownFormatError
from macrodoc.links import LinkProvider, NoLinkProvider, OptionLike
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef, PluginIdentifier, fallback_option_like


class OutputFormat(Enum):
    PLAIN_TEXT = "text"
    RST = "rst"
    HTML = "html"
    MARKDOWN = "md"
    ANTSIBULL_RST = "antsibull-rst"
    ANTSIBULL_HTML = "antsibull-html"


class Renderer:
    """Base class for a per-format renderer.

    Subclasses supply ``escape_text``, ``render_macro`` and
    ``render_horizontal_rule``. Rendering never fails on odd input: a macro
    kind a subclass does not handle falls back to its escaped arguments.
    """

    paragraph_start = ""
    paragraph_end = ""
    paragraph_separator = "\n\n"
    empty_paragraph = ""

    def __init__(
        self,
        link_provider: LinkProvider | None = None,
        current_plugin: PluginIdentifier | None = None,
    ) -> None:
        self.link_provider = link_provider if link_provider is not None else NoLinkProvider()
        self.current_plugin = current_plugin

    # ------------------------------------------------------------------
    # Per-format hooks
    # ------------------------------------------------------------------

    def escape_text(self, raw: str) -> str:
        raise NotImplementedError

    def render_macro(self, node: Macro, url: str | None) -> str:
        raise NotImplementedError

    def render_horizontal_rule(self) -> str:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def render(self, document: MarkupDocument) -> str:
        """Render the document's nodes, concatenated without separators."""
        return "".join(self.render_node(node) for node in document)

    def render_paragraph(self, document: MarkupDocument) -> str:
        body = self.render(document) if len(document) else self.empty_paragraph
        return f"{self.paragraph_start}{body}{self.paragraph_end}"

    def render_paragraphs(self, documents: Iterable[MarkupDocument]) -> str:
        return self.paragraph_separator.join(self.render_paragraph(d) for d in documents)

    def render_node(self, node: Node) -> str:
        match node:
            case Text(content=content):
                return self.escape_text(content)
            case HorizontalRule():
                return self.render_horizontal_rule()
            case Macro():
                return self.render_macro(node, self.link_for(node))
        return ""

    def fallback(self, node: Macro) -> str:
        """Plain escaped arguments, for macros a format has no rule for."""
        return self.escape_text("".join(arg.value for arg in node.arguments))

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def link_for(self, node: Macro) -> str | None:
        """Ask the link provider for the URL a macro should point to."""
        match node.kind:
            case MacroKind.MODULE_REF:
                (fqcn,) = argument_values(node)
                return self.link_provider.plugin_link(PluginIdentifier(fqcn, "module"))
            case MacroKind.OPTION_REF | MacroKind.RETURN_VALUE_REF:
                ref = node.reference
                if ref is None or ref.plugin is None:
                    return None
                what = OptionLike.OPTION
                if node.kind is MacroKind.RETURN_VALUE_REF:
                    what = OptionLike.RETURN_VALUE
                return self.link_provider.plugin_option_like_link(
                    ref.plugin,
                    ref.entrypoint,
                    what,
                    ref.link,
                    ref.plugin == self.current_plugin,
                )
        return None


def option_like(node: Macro) -> OptionLikeRef:
    """The node's resolved reference, or a best-effort one from its argument."""
    if node.reference is not None:
        return node.reference
    (text,) = argument_values(node)
    return fallback_option_like(text)


def get_renderer(
    fmt: OutputFormat | str,
    *,
    link_provider: LinkProvider | None = None,
    current_plugin: PluginIdentifier | None = None,
) -> Renderer:
    """Return a renderer for the given output format."""
    from macrodoc.render_antsibull_html import AntsibullHtmlRenderer
    from macrodoc.render_antsibull_rst import AntsibullRstRenderer
    from macrodoc.render_html import HtmlRenderer
    from macrodoc.render_md import MarkdownRenderer
    from macrodoc.render_rst import RstRenderer
    from macrodoc.render_text import PlainTextRenderer

    try:
        output_format = OutputFormat(fmt)
    except ValueError:
        raise UnknownFormatError(fmt) from None

    renderers: dict[OutputFormat, type[Renderer]] = {
        OutputFormat.PLAIN_TEXT: PlainTextRenderer,
        OutputFormat.RST: RstRenderer,
        OutputFormat.HTML: HtmlRenderer,
        OutputFormat.MARKDOWN: MarkdownRenderer,
        OutputFormat.ANTSIBULL_RST: AntsibullRstRenderer,
        OutputFormat.ANTSIBULL_HTML: AntsibullHtmlRenderer,
    }
    return renderers[output_format](link_provider=link_provider, current_plugin=current_plugin)


def render(
    document: MarkupDocument,
    fmt: OutputFormat | str,
    *,
    link_provider: LinkProvider | None = None,
    current_plugin: PluginIdentifier | None = None,
) -> str:
    """Render a parsed document to the given output format."""
    renderer = get_renderer(fmt, link_provider=link_provider, current_plugin=current_plugin)
    return renderer.render(document)


def render_paragraphs(
    documents: Iterable[MarkupDocument],
    fmt: OutputFormat | str,
    *,
    link_provider: LinkProvider | None = None,
    current_plugin: PluginIdentifier | None = None,
) -> str:
    """Render parsed paragraphs with the format's paragraph markers."""
    renderer = get_renderer(fmt, link_provider=link_provider, current_plugin=current_plugin)
    return renderer.render_paragraphs(documents)
