"""reStructuredText renderer using the roles of the antsibull Sphinx extension."""

from __future__ import annotations

from macrodoc.ast import Macro, MacroKind
from macrodoc.escaping import escape_rst
from macrodoc.macros import argument_values
from macrodoc.references import OptionLikeRef
from macrodoc.render import option_like
from macrodoc.render_rst import RstRenderer


class AntsibullRstRenderer(RstRenderer):
    """Like RstRenderer, but values and option references use :ansval:,
    :ansopt: and :ansretval: so Sphinx can resolve them itself."""

    def render_horizontal_rule(self) -> str:
        return "\n\n.. raw:: html\n\n  <hr>\n\n"

    def render_macro(self, node: Macro, url: str | None) -> str:
        match node.kind:
            case MacroKind.VALUE_REF:
                (value,) = argument_values(node)
                return f"\\ :ansval:`{escape_rst(value, True, True)}`\\ "
            case MacroKind.OPTION_REF:
                return _option_like("ansopt", option_like(node))
            case MacroKind.RETURN_VALUE_REF:
                return _option_like("ansretval", option_like(node))
            case _:
                return super().render_macro(node, url)


def _option_like(role: str, ref: OptionLikeRef) -> str:
    target = ref.name if ref.value is None else f"{ref.name}={ref.value}"
    if ref.entrypoint is not None:
        target = f"{ref.entrypoint}:{target}"
    if ref.plugin is not None:
        target = f"{ref.plugin}:{target}"
    return f"\\ :{role}:`{escape_rst(target, True, True)}`\\ "
