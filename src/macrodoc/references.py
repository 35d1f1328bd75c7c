"""Plugin identifiers and option / return value reference parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from macrodoc.options import ParseContext

IGNORE_MARKER = "ignore:"

# Plugin types that read naturally without a trailing "plugin".
BARE_PLUGIN_TYPES = frozenset({"module", "role", "playbook"})

_FQCN_RE = re.compile(r"^[a-z0-9_]+\.[a-z0-9_]+(?:\.[a-z0-9_]+)+$")
_PLUGIN_TYPE_RE = re.compile(r"^[a-z_]+$")
_ARRAY_STUB_RE = re.compile(r"\[([^\]]*)\]")
_FQCN_TYPE_PREFIX_RE = re.compile(r"^([^.]+\.[^.]+\.[^#]+)#([^:]+):(.*)$")


class ReferenceSyntaxError(ValueError):
    """Raised when an option or return value reference is malformed."""


@dataclass(frozen=True, slots=True)
class PluginIdentifier:
    """A plugin named by FQCN and plugin type."""

    fqcn: str
    type: str

    def __str__(self) -> str:
        return f"{self.fqcn}#{self.type}"


@dataclass(frozen=True, slots=True)
class OptionLikeRef:
    """A resolved O() or RV() argument.

    ``name`` keeps array stubs (``foo[1].bar``); ``link`` is the dotted path
    without them (``("foo", "bar")``).
    """

    plugin: PluginIdentifier | None
    entrypoint: str | None
    link: tuple[str, ...]
    name: str
    value: str | None


def is_fqcn(text: str) -> bool:
    return _FQCN_RE.fullmatch(text) is not None


def is_plugin_type(text: str) -> bool:
    return _PLUGIN_TYPE_RE.fullmatch(text) is not None


def describe_plugin_type(plugin_type: str) -> str:
    """Return "module", "role", or e.g. "lookup plugin"."""
    if plugin_type in BARE_PLUGIN_TYPES:
        return plugin_type
    return f"{plugin_type} plugin"


def parse_option_like(text: str, context: ParseContext) -> OptionLikeRef:
    """Resolve an O() / RV() argument against the parsing context.

    Raises ReferenceSyntaxError when the argument cannot be resolved.
    """
    value: str | None = None
    name, sep, rest = text.partition("=")
    if sep:
        value = rest

    plugin: PluginIdentifier | None = None
    entrypoint: str | None = None
    m = _FQCN_TYPE_PREFIX_RE.match(name)
    if m is not None:
        fqcn, plugin_type = m.group(1), m.group(2)
        if not is_fqcn(fqcn):
            raise ReferenceSyntaxError(f"Plugin name {fqcn!r} is not a FQCN")
        if not is_plugin_type(plugin_type):
            raise ReferenceSyntaxError(f"Plugin type {plugin_type!r} is not valid")
        plugin = PluginIdentifier(fqcn, plugin_type)
        name = m.group(3)
    elif name.startswith(IGNORE_MARKER):
        name = name[len(IGNORE_MARKER) :]
    else:
        plugin = context.current_plugin
        entrypoint = context.role_entrypoint

    if plugin is not None and plugin.type == "role":
        ep, sep, rest = name.partition(":")
        if sep:
            entrypoint = ep
            name = rest
        if entrypoint is None:
            raise ReferenceSyntaxError("Role reference is missing entrypoint")

    if ":" in name or "#" in name:
        raise ReferenceSyntaxError(f"Invalid option/return value name {name!r}")

    link = tuple(_ARRAY_STUB_RE.sub("", name).split("."))
    return OptionLikeRef(plugin, entrypoint, link, name, value)


def fallback_option_like(text: str) -> OptionLikeRef:
    """Best-effort reference for an argument parse_option_like rejected."""
    name, sep, value = text.partition("=")
    return OptionLikeRef(None, None, (name,), name, value if sep else None)
