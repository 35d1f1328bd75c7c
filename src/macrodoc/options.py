"""Parse options and parsing context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from macrodoc.references import PluginIdentifier


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs that change how markup is recognized and reported.

    only_classic_markup: recognize only I, B, C, M, U, L, R and
        HORIZONTALLINE; semantic macros (O, V, E, RV) stay plain text.
    strict: report backslashes that escape nothing as warnings instead of
        silently keeping them.
    helpful_errors: quote the offending source in diagnostic messages
        instead of just naming the macro.
    where: extra location text appended after the index in messages.
    """

    only_classic_markup: bool = False
    strict: bool = False
    helpful_errors: bool = True
    where: str | None = None

    def with_paragraph(self, index: int) -> ParseOptions:
        """Return a copy whose messages name the given 1-based paragraph."""
        prefix = f" of paragraph {index}"
        return replace(self, where=prefix + (self.where or ""))

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> ParseOptions:
        """Build options from a config mapping (camelCase keys)."""
        opts = cls()
        only_classic = config.get("onlyClassicMarkup")
        if isinstance(only_classic, bool):
            opts = replace(opts, only_classic_markup=only_classic)
        strict = config.get("strict")
        if isinstance(strict, bool):
            opts = replace(opts, strict=strict)
        helpful = config.get("helpfulErrors")
        if isinstance(helpful, bool):
            opts = replace(opts, helpful_errors=helpful)
        where = config.get("where")
        if where is not None:
            opts = replace(opts, where=str(where))
        return opts


@dataclass(frozen=True, slots=True)
class ParseContext:
    """What the markup being parsed documents.

    Used to resolve O() and RV() references that do not name a plugin.
    """

    current_plugin: PluginIdentifier | None = None
    role_entrypoint: str | None = None

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> ParseContext:
        return cls(
            current_plugin=plugin_from_mapping(config.get("currentPlugin")),
            role_entrypoint=_optional_str(config.get("roleEntrypoint")),
        )


def plugin_from_mapping(value: object) -> PluginIdentifier | None:
    """Read a ``{fqcn: ..., type: ...}`` mapping into a PluginIdentifier."""
    if not isinstance(value, Mapping):
        return None
    fqcn = value.get("fqcn")
    plugin_type = value.get("type")
    if fqcn is None or plugin_type is None:
        return None
    return PluginIdentifier(str(fqcn), str(plugin_type))


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)
