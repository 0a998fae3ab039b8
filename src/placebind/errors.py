"""
Errors raised by the transform.

Parsing is the only stage that can fail; binding and emission are total
over a well-formed `CallExpression`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from placebind.span import Span


@dataclass
class Diagnostic:
    """A message plus the location it refers to."""

    message: str
    span: Span = field(default_factory=Span)
    severity: str = "error"
    notes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.span is None:
            self.span = Span()


def render_context(source: str, span: Span, width: int = 40) -> str:
    """Return the offending source line with a caret under `span`."""
    if not span.known:
        return ""
    lines = source.split("\n")
    if not 1 <= span.line <= len(lines):
        return ""
    line = lines[span.line - 1]
    col = span.column - 1
    lo = max(0, col - width)
    hi = col + width
    return f"{line[lo:hi]}\n{' ' * (col - lo)}^"


class MalformedInputError(ValueError):
    """The input text does not denote a single call expression.

    The transform is aborted; nothing is emitted.
    """

    def __init__(self, message: str, source: str, span: Span | None = None):
        self.message = message
        self.source = source
        self.span = span if span is not None else Span()
        self.diagnostic = Diagnostic(message=message, span=self.span)
        super().__init__(message)

    def __str__(self) -> str:
        text = f"{self.message} at {self.span}"
        context = render_context(self.source, self.span)
        if context:
            text += "\n\n" + context
        return text


__all__ = ["Diagnostic", "MalformedInputError", "render_context"]
