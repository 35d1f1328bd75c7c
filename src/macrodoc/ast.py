"""AST node types for parsed documentation markup."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from macrodoc.references import OptionLikeRef
from macrodoc.tokens import Span


class MacroKind(Enum):
    """The closed set of macros, valued by their markup name."""

    ITALIC = "I"
    BOLD = "B"
    CODE = "C"
    MODULE_REF = "M"
    URL = "U"
    LINK = "L"
    CROSS_REF = "R"
    OPTION_REF = "O"
    VALUE_REF = "V"
    ENV_VAR = "E"
    RETURN_VALUE_REF = "RV"


@dataclass(frozen=True, slots=True)
class Argument:
    """One macro argument: escape-resolved text plus its raw source."""

    value: str
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class Text:
    """Coalesced literal text."""

    content: str
    span: Span


@dataclass(frozen=True, slots=True)
class Macro:
    """A macro call such as C(foo) or L(text, url).

    ``reference`` is only set for O() and RV() calls whose argument could be
    resolved into an option or return value reference.
    """

    kind: MacroKind
    arguments: tuple[Argument, ...]
    span: Span
    reference: OptionLikeRef | None = None


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """The standalone HORIZONTALLINE separator."""

    span: Span


Node = Text | Macro | HorizontalRule


@dataclass(frozen=True, slots=True)
class MarkupDocument:
    """Root node: the ordered nodes of one parsed string."""

    nodes: tuple[Node, ...]
    span: Span

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
