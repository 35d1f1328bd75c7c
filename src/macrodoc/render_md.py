"""Markdown renderer: inline HTML tags, Markdown-escaped text."""

from __future__ import annotations

from macrodoc.ast import Macro, MacroKind
from macrodoc.escaping import escape_md, escape_url
from macrodoc.macros import argument_values
from macrodoc.render import Renderer, option_like
from macrodoc.render_html import option_like_html

_TAGS = {
    MacroKind.BOLD: "b",
    MacroKind.ITALIC: "em",
    MacroKind.CODE: "code",
    MacroKind.VALUE_REF: "code",
    MacroKind.ENV_VAR: "code",
}


class MarkdownRenderer(Renderer):
    paragraph_separator = "\n\n"
    empty_paragraph = " "

    def escape_text(self, raw: str) -> str:
        return escape_md(raw)

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
            ):
                tag = _TAGS[node.kind]
                return f"<{tag}>{escape_md(args[0])}</{tag}>"
            case MacroKind.MODULE_REF:
                if url is not None:
                    return _link(args[0], url)
                return escape_md(args[0])
            case MacroKind.URL:
                return _link(args[0], args[0])
            case MacroKind.LINK:
                return _link(*args)
            case MacroKind.CROSS_REF:
                return escape_md(args[0])
            case MacroKind.OPTION_REF:
                return option_like_html(
                    option_like(node), url, escape_md, strong_if_bare=True, equals="\\="
                )
            case MacroKind.RETURN_VALUE_REF:
                return option_like_html(
                    option_like(node), url, escape_md, strong_if_bare=False, equals="\\="
                )
            case _:
                return self.fallback(node)


def _link(text: str, url: str) -> str:
    return f"[{escape_md(text)}]({escape_md(escape_url(url))})"
