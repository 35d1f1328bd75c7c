"""HTML renderer matching the markup antsibull-docs emits for its Sphinx theme."""

from __future__ import annotations

from macrodoc.ast import Macro, MacroKind
from macrodoc.escaping import escape_html, escape_url_attr
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef
from macrodoc.render import option_like
from macrodoc.render_html import HtmlRenderer

_CODE_TAGS = {
    MacroKind.CODE: "<code class='docutils literal notranslate'>",
    MacroKind.VALUE_REF: '<code class="ansible-value literal notranslate">',
    MacroKind.ENV_VAR: '<code class="xref std std-envvar literal notranslate">',
}


class AntsibullHtmlRenderer(HtmlRenderer):
    def render_horizontal_rule(self) -> str:
        return "<hr/>"

    def render_macro(self, node: Macro, url: str | None) -> str:
        match node.kind:
            case MacroKind.CODE | MacroKind.VALUE_REF | MacroKind.ENV_VAR:
                (text,) = argument_values(node)
                return f"{_CODE_TAGS[node.kind]}{escape_html(text)}</code>"
            case MacroKind.CROSS_REF:
                text, _ = argument_values(node)
                return f"<span class='module'>{escape_html(text)}</span>"
            case MacroKind.MODULE_REF:
                (fqcn,) = argument_values(node)
                if url is not None:
                    return (
                        f"<a href='{escape_url_attr(url)}' class='module'>"
                        f"{escape_html(fqcn)}</a>"
                    )
                return f"<span class='module'>{escape_html(fqcn)}</span>"
            case MacroKind.OPTION_REF:
                return _option_like(option_like(node), url, is_option=True)
            case MacroKind.RETURN_VALUE_REF:
                return _option_like(option_like(node), url, is_option=False)
            case _:
                return super().render_macro(node, url)


def _option_like(ref: OptionLikeRef, url: str | None, *, is_option: bool) -> str:
    strong = is_option and ref.value is None
    if strong:
        css = "ansible-option"
    elif is_option:
        css = "ansible-option-value"
    else:
        css = "ansible-return-value"

    parts = [f'<code class="{css} literal notranslate">']
    if strong:
        parts.append("<strong>")
    if url is not None:
        parts.append(
            f'<a class="reference internal" href="{escape_url_attr(url)}">'
            '<span class="std std-ref"><span class="pre">'
        )
    parts.append(escape_html(ref.name))
    if ref.value is not None:
        parts.append(f"={escape_html(ref.value)}")
    if url is not None:
        parts.append("</span></span></a>")
    if strong:
        parts.append("</strong>")
    parts.append("</code>")
    return "".join(parts)
