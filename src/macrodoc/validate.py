"""Arity and argument shape checks for parsed macro calls."""

from __future__ import annotations

from macrodoc.ast import Macro, MarkupDocument
from macrodoc.errors import Diagnostic, DiagnosticCode, Severity, compose_message
from macrodoc.macros import ArgShape, argument_values, spec_for
from macrodoc.options import ParseContext, ParseOptions
from macrodoc.references import ReferenceSyntaxError, is_fqcn, parse_option_like


class Validator:
    """Check every macro in a document against the macro table.

    Wrong argument counts are errors; odd looking arguments are warnings.
    Nodes are never dropped or rewritten.
    """

    def __init__(
        self,
        source: str,
        *,
        options: ParseOptions | None = None,
        context: ParseContext | None = None,
    ) -> None:
        self._source = source
        self._options = options if options is not None else ParseOptions()
        self._context = context if context is not None else ParseContext()
        self._diagnostics: list[Diagnostic] = []

    def validate(self, document: MarkupDocument) -> list[Diagnostic]:
        for node in document:
            if isinstance(node, Macro):
                self._check_macro(node)
        return self._diagnostics

    def _check_macro(self, node: Macro) -> None:
        spec = spec_for(node.kind)
        count = len(node.arguments)
        if count != spec.arity:
            plural = "" if spec.arity == 1 else "s"
            self._report(
                node,
                Severity.ERROR,
                DiagnosticCode.ARITY_MISMATCH,
                f"Expected {spec.arity} argument{plural}, got {count}",
            )

        values = argument_values(node)[:count]
        for shape, value in zip(spec.shapes, values):
            problem = self._check_shape(shape, value)
            if problem is not None:
                self._report(node, Severity.WARNING, DiagnosticCode.ARGUMENT_SHAPE, problem)

    def _check_shape(self, shape: ArgShape, value: str) -> str | None:
        match shape:
            case ArgShape.TEXT:
                return None
            case ArgShape.FQCN:
                if not is_fqcn(value):
                    return f"Module name {value!r} is not a FQCN"
                return None
            case ArgShape.URL:
                if not value.strip():
                    return "URL is empty"
                if any(ch.isspace() for ch in value):
                    return f"URL {value!r} contains whitespace"
                return None
            case ArgShape.LABEL:
                if not value.strip():
                    return "Reference label is empty"
                if any(ch in value for ch in "<>`"):
                    return f"Reference label {value!r} contains <, > or `"
                return None
            case ArgShape.OPTION_NAME:
                try:
                    parse_option_like(value, self._context)
                except ReferenceSyntaxError as exc:
                    return str(exc)
                return None

    def _report(
        self, node: Macro, severity: Severity, code: DiagnosticCode, problem: str
    ) -> None:
        message = compose_message(
            self._source,
            node.span,
            node.kind.value,
            problem,
            helpful=self._options.helpful_errors,
            where=self._options.where,
        )
        self._diagnostics.append(Diagnostic(severity, code, message, node.span))


def validate(
    document: MarkupDocument,
    source: str,
    *,
    options: ParseOptions | None = None,
    context: ParseContext | None = None,
) -> list[Diagnostic]:
    """Convenience function: validate a parsed document."""
    return Validator(source, options=options, context=context).validate(document)
