"""Plain text renderer, in the style of ansible-doc's terminal output."""

from __future__ import annotations

from macrodoc.ast import Macro, MacroKind
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef, describe_plugin_type
from macrodoc.render import Renderer, option_like


class PlainTextRenderer(Renderer):
    paragraph_separator = "\n\n"

    def escape_text(self, raw: str) -> str:
        return raw

    def render_horizontal_rule(self) -> str:
        return "\n-------------\n"

    def render_macro(self, node: Macro, url: str | None) -> str:
        args = argument_values(node)
        match node.kind:
            case MacroKind.BOLD:
                return f"*{args[0]}*"
            case MacroKind.ITALIC | MacroKind.CODE | MacroKind.VALUE_REF | MacroKind.ENV_VAR:
                return f"`{args[0]}'"
            case MacroKind.MODULE_REF:
                return f"[{args[0]}]"
            case MacroKind.URL:
                return args[0]
            case MacroKind.LINK:
                text, target = args
                if not target:
                    return text
                return f"{text} <{target}>"
            case MacroKind.CROSS_REF:
                return args[0]
            case MacroKind.OPTION_REF | MacroKind.RETURN_VALUE_REF:
                return _option_like(option_like(node))
            case _:
                return self.fallback(node)


def _option_like(ref: OptionLikeRef) -> str:
    parts = ["`", ref.name]
    if ref.value is not None:
        parts.append(f"={ref.value}")
    parts.append("'")
    if ref.plugin is not None:
        parts.append(f" (of {describe_plugin_type(ref.plugin.type)} {ref.plugin.fqcn}")
        if ref.plugin.type == "role" and ref.entrypoint is not None:
            parts.append(f", {ref.entrypoint} entrypoint")
        parts.append(")")
    return "".join(parts)
