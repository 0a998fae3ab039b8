"""Structured form of a call expression and of the callable bound from it."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from placebind.span import Span


@dataclass(frozen=True)
class Expression:
    """Opaque source fragment, carried through verbatim."""
    text: str
    span: Span = field(default_factory=Span, compare=False)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Reference:
    """A use of a generated parameter."""
    name: str

    @property
    def text(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Fixed:
    value: Union[Expression, Reference]

    @property
    def text(self) -> str:
        return self.value.text


class Placeholder:
    """Marks an argument whose value will be supplied later."""
    __slots__ = ("span",)

    def __init__(self, span: Span | None = None):
        self.span = span if span is not None else Span()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Placeholder)

    def __hash__(self) -> int:
        return hash(Placeholder)

    def __repr__(self) -> str:
        return "Placeholder()"


Argument = Union[Fixed, Placeholder]


def is_placeholder(argument: Argument) -> bool:
    return isinstance(argument, Placeholder)


@dataclass
class CallExpression:
    callee: Expression
    arguments: list[Argument] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        return sum(1 for a in self.arguments if is_placeholder(a))

    @property
    def text(self) -> str:
        """Source form of the call. Only valid once every placeholder is bound."""
        if self.placeholder_count:
            raise ValueError("Cannot render a call that still has unbound placeholders")
        return f"{self.callee.text}({', '.join(a.text for a in self.arguments)})"


@dataclass(frozen=True)
class ParameterBinding:
    index: int
    name: str


@dataclass
class BoundCallable:
    """
    The emitted callable.

    * `parameters` are in placeholder encounter order.
    * `body` is the original call with each placeholder replaced by a
      `Reference` to its parameter.
    * `source` is the serialized form produced by the emitter's syntax.
    """
    parameters: tuple[ParameterBinding, ...]
    body: CallExpression
    source: str = ""

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def call_text(self) -> str:
        return self.body.text

    def __str__(self) -> str:
        return self.source


__all__ = [
    "Argument",
    "BoundCallable",
    "CallExpression",
    "Expression",
    "Fixed",
    "ParameterBinding",
    "Placeholder",
    "Reference",
    "is_placeholder",
]
