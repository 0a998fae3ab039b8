"""
Source span attached to parsed fragments and to parse errors.

Line and column are 1-based, as lark reports them. `start`/`end` are
character offsets into the source text when known.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
    line: Optional[int] = None
    column: Optional[int] = None
    end_line: Optional[int] = None
    end_column: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def from_token(cls, token: Any) -> "Span":
        if token is None:
            return cls()
        return cls(
            line=getattr(token, "line", None),
            column=getattr(token, "column", None),
            end_line=getattr(token, "end_line", None),
            end_column=getattr(token, "end_column", None),
            start=getattr(token, "start_pos", None),
            end=getattr(token, "end_pos", None),
        )

    @classmethod
    def covering(cls, first: Any, last: Any) -> "Span":
        """Span from the start of `first` to the end of `last` (lark tokens)."""
        return cls(
            line=first.line,
            column=first.column,
            end_line=last.end_line,
            end_column=last.end_column,
            start=first.start_pos,
            end=last.end_pos,
        )

    @classmethod
    def end_of(cls, source: str) -> "Span":
        lines = source.split("\n")
        return cls(
            line=len(lines),
            column=len(lines[-1]) + 1,
            start=len(source),
            end=len(source),
        )

    @property
    def known(self) -> bool:
        return self.line is not None and self.column is not None

    def __str__(self) -> str:
        if not self.known:
            return "<unknown>"
        return f"line {self.line}, column {self.column}"


__all__ = ["Span"]
