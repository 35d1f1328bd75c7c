"""Diagnostics with formatted source context, and API misuse errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from macrodoc.tokens import Span


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


class DiagnosticCode(Enum):
    UNTERMINATED_MACRO = "unterminated-macro"
    ARITY_MISMATCH = "arity-mismatch"
    ARGUMENT_SHAPE = "argument-shape"
    UNNECESSARY_ESCAPE = "unnecessary-escape"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal observation about the parsed markup."""

    severity: Severity
    code: DiagnosticCode
    message: str
    span: Span

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def format(self, source: str, filename: str = "<markup>") -> str:
        lines = source.splitlines(keepends=True)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"{self.severity.value}[{self.code.value}]: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


def compose_message(
    source: str,
    span: Span,
    macro_name: str | None,
    problem: str,
    *,
    helpful: bool = True,
    where: str | None = None,
) -> str:
    """Build a "While parsing ... at index N: problem" message."""
    if helpful:
        what = f'"{span.slice(source)}"'
    else:
        what = f"{macro_name}()" if macro_name else "escape"
    return f"While parsing {what} at index {span.start.offset + 1}{where or ''}: {problem}"


def has_errors(diagnostics: list[Diagnostic]) -> bool:
    return any(d.is_error for d in diagnostics)


class MarkupError(Exception):
    """Base class for misuse of the macrodoc API."""


class UnknownFormatError(MarkupError, ValueError):
    """Raised when rendering to an output format that does not exist."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"unknown output format {name!r}")
