"""HTML renderer."""

from __future__ import annotations

from collections.abc import Callable

from macrodoc.ast import Macro, MacroKind
from macrodoc.escaping import escape_html, escape_url_attr
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef
from macrodoc.render import Renderer, option_like

_TAGS = {
    MacroKind.BOLD: "b",
    MacroKind.ITALIC: "em",
    MacroKind.CODE: "code",
    MacroKind.VALUE_REF: "code",
    MacroKind.ENV_VAR: "code",
    MacroKind.CROSS_REF: "span",
}


class HtmlRenderer(Renderer):
    paragraph_start = "<p>"
    paragraph_end = "</p>"
    paragraph_separator = ""

    def escape_text(self, raw: str) -> str:
        return escape_html(raw)

    def render_horizontal_rule(self) -> str:
        return "<hr>"

    def render_macro(self, node: Macro, url: str | None) -> str:
        args = argument_values(node)
        match node.kind:
            case (
                MacroKind.BOLD
                | MacroKind.ITALIC
                | MacroKind.CODE
                | MacroKind.VALUE_REF
                | MacroKind.ENV_VAR
                | MacroKind.CROSS_REF
            ):
                tag = _TAGS[node.kind]
                return f"<{tag}>{escape_html(args[0])}</{tag}>"
            case MacroKind.MODULE_REF:
                if url is not None:
                    return f"<a href='{escape_url_attr(url)}'>{escape_html(args[0])}</a>"
                return f"<span>{escape_html(args[0])}</span>"
            case MacroKind.URL:
                return _link(args[0], args[0])
            case MacroKind.LINK:
                return _link(*args)
            case MacroKind.OPTION_REF:
                return option_like_html(option_like(node), url, escape_html, strong_if_bare=True)
            case MacroKind.RETURN_VALUE_REF:
                return option_like_html(option_like(node), url, escape_html, strong_if_bare=False)
            case _:
                return self.fallback(node)


def _link(text: str, url: str) -> str:
    return f"<a href='{escape_url_attr(url)}'>{escape_html(text)}</a>"


def option_like_html(
    ref: OptionLikeRef,
    url: str | None,
    escape: Callable[[str], str],
    *,
    strong_if_bare: bool,
    equals: str = "=",
) -> str:
    """Render an option or return value as ``<code>``.

    Options without a value are additionally wrapped in ``<strong>``.
    """
    strong = strong_if_bare and ref.value is None
    parts = ["<code>"]
    if strong:
        parts.append("<strong>")
    if url is not None:
        parts.append(f'<a href="{escape_url_attr(url)}">')
    parts.append(escape(ref.name))
    if ref.value is not None:
        parts.append(equals)
        parts.append(escape(ref.value))
    if url is not None:
        parts.append("</a>")
    if strong:
        parts.append("</strong>")
    parts.append("</code>")
    return "".join(parts)
