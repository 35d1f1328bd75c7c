"""Macro table: names, arities, argument shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from macrodoc.ast import Macro, MacroKind

HORIZONTAL_LINE = "HORIZONTALLINE"


class ArgShape(Enum):
    TEXT = auto()  # anything goes
    FQCN = auto()  # namespace.collection.name
    URL = auto()
    LABEL = auto()  # cross-reference label
    OPTION_NAME = auto()  # [plugin#type:][entrypoint:]name[=value]


@dataclass(frozen=True, slots=True)
class MacroSpec:
    """Definition of one macro kind."""

    kind: MacroKind
    shapes: tuple[ArgShape, ...]
    classic: bool

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def arity(self) -> int:
        return len(self.shapes)


def _make_macros() -> dict[MacroKind, MacroSpec]:
    defs: dict[MacroKind, MacroSpec] = {}

    def d(kind: MacroKind, *shapes: ArgShape, classic: bool = True) -> None:
        defs[kind] = MacroSpec(kind, shapes, classic)

    # Markup available before semantic markup was introduced
    d(MacroKind.ITALIC, ArgShape.TEXT)
    d(MacroKind.BOLD, ArgShape.TEXT)
    d(MacroKind.CODE, ArgShape.TEXT)
    d(MacroKind.MODULE_REF, ArgShape.FQCN)
    d(MacroKind.URL, ArgShape.URL)
    d(MacroKind.LINK, ArgShape.TEXT, ArgShape.URL)
    d(MacroKind.CROSS_REF, ArgShape.TEXT, ArgShape.LABEL)

    # Semantic markup
    d(MacroKind.OPTION_REF, ArgShape.OPTION_NAME, classic=False)
    d(MacroKind.VALUE_REF, ArgShape.TEXT, classic=False)
    d(MacroKind.ENV_VAR, ArgShape.TEXT, classic=False)
    d(MacroKind.RETURN_VALUE_REF, ArgShape.OPTION_NAME, classic=False)

    return defs


MACROS: dict[MacroKind, MacroSpec] = _make_macros()

_ALL_NAMES = frozenset(spec.name for spec in MACROS.values())
_CLASSIC_NAMES = frozenset(spec.name for spec in MACROS.values() if spec.classic)


def macro_names(only_classic_markup: bool = False) -> frozenset[str]:
    """Return the macro names the tokenizer should recognize."""
    return _CLASSIC_NAMES if only_classic_markup else _ALL_NAMES


def spec_for(kind: MacroKind) -> MacroSpec:
    return MACROS[kind]


def kind_for_name(name: str) -> MacroKind:
    """Map a macro name such as "RV" to its kind."""
    return MacroKind(name)


def argument_values(node: Macro) -> tuple[str, ...]:
    """Arguments as renderers see them: exactly ``arity`` strings.

    Missing arguments become empty strings and extras are dropped. Spaces
    next to a separating comma are removed, so ``L(text, url)`` yields
    ``("text", "url")``.
    """
    arity = spec_for(node.kind).arity
    last = len(node.arguments) - 1
    values: list[str] = []
    for i, argument in enumerate(node.arguments[:arity]):
        value = argument.value
        if i > 0:
            value = value.lstrip(" ")
        if i < last:
            value = value.rstrip(" ")
        values.append(value)
    values.extend("" for _ in range(arity - len(values)))
    return tuple(values)
