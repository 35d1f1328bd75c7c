"""Parser and multi-format renderer for Ansible documentation markup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from macrodoc.errors import Diagnostic
    from macrodoc.links import LinkProvider
    from macrodoc.options import ParseContext, ParseOptions
    from macrodoc.references import PluginIdentifier
    from macrodoc.render import OutputFormat

__version__ = "0.1.0"


def convert(
    source: str,
    fmt: OutputFormat | str,
    *,
    context: ParseContext | None = None,
    options: ParseOptions | None = None,
    link_provider: LinkProvider | None = None,
) -> tuple[str, list[Diagnostic]]:
    """Parse markup and render it to the given output format."""
    from macrodoc.parser import parse
    from macrodoc.render import render

    current_plugin: PluginIdentifier | None = None
    if context is not None:
        current_plugin = context.current_plugin

    document, diagnostics = parse(source, context=context, options=options)
    output = render(document, fmt, link_provider=link_provider, current_plugin=current_plugin)
    return output, diagnostics
