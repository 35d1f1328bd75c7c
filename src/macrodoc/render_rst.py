"""reStructuredText renderer.

Every inline construct is wrapped in ``\\ `` (escaped space) on both sides so
that it is recognized no matter which characters surround it.
"""

from __future__ import annotations

from macrodoc.ast import Macro, MacroKind
from macrodoc.escaping import escape_rst, escape_url
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef, describe_plugin_type
from macrodoc.render import Renderer, option_like

_ROLES = {
    MacroKind.BOLD: "strong",
    MacroKind.ITALIC: "emphasis",
    MacroKind.CODE: "literal",
    MacroKind.VALUE_REF: "literal",
    MacroKind.ENV_VAR: "envvar",
}


class RstRenderer(Renderer):
    paragraph_separator = "\n\n"
    empty_paragraph = "\\ "

    def escape_text(self, raw: str) -> str:
        return escape_rst(raw)

    def render_horizontal_rule(self) -> str:
        return "\n\n------------\n\n"

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
                return _role(_ROLES[node.kind], args[0])
            case MacroKind.MODULE_REF:
                return _plugin_ref(args[0], "module")
            case MacroKind.URL:
                return _link(args[0], args[0])
            case MacroKind.LINK:
                return _link(*args)
            case MacroKind.CROSS_REF:
                text, label = args
                return f"\\ :ref:`{escape_rst(text, True, True)} <{label}>`\\ "
            case MacroKind.OPTION_REF | MacroKind.RETURN_VALUE_REF:
                return _option_like(option_like(node))
            case _:
                return self.fallback(node)


def _role(role: str, text: str) -> str:
    return f"\\ :{role}:`{escape_rst(text, True, True)}`\\ "


def _link(text: str, url: str) -> str:
    if not text:
        return ""
    if not url:
        return escape_rst(text)
    return f"\\ `{escape_rst(text, True)} <{escape_url(url)}>`__\\ "


def _plugin_ref(fqcn: str, plugin_type: str) -> str:
    return f"\\ :ref:`{escape_rst(fqcn)} <ansible_collections.{fqcn}_{plugin_type}>`\\ "


def _option_like(ref: OptionLikeRef) -> str:
    text = ref.name if ref.value is None else f"{ref.name}={ref.value}"
    result = [f"\\ :literal:`{escape_rst(text, True, True)}`"]

    of: list[str] = []
    if ref.plugin is not None:
        of.append(
            f"{describe_plugin_type(ref.plugin.type)} :ref:`{ref.plugin.fqcn}"
            f" <ansible_collections.{ref.plugin.fqcn}_{ref.plugin.type}>`"
        )
    if ref.entrypoint is not None:
        of.append(f"entrypoint {escape_rst(ref.entrypoint, True, True)}")
    if of:
        result.append(f" (of {', '.join(of)})")

    result.append("\\ ")
    return "".join(result)
