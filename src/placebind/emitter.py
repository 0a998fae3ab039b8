"""
Callable emitter.

Turns the bindings and the rewritten call into a `BoundCallable` and
serializes it with a surface `Syntax`.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence, Union

from placebind.model import BoundCallable, CallExpression, ParameterBinding

logger = logging.getLogger(__name__)


class Syntax(ABC):
    name: str

    @abstractmethod
    def render(self, parameters: Sequence[str], body: str) -> str:
        ...


class PythonSyntax(Syntax):
    """`lambda __0, __1: foo(1, __0, 3, __1)`"""
    name = "python"

    def render(self, parameters: Sequence[str], body: str) -> str:
        if not parameters:
            return f"lambda: {body}"
        return f"lambda {', '.join(parameters)}: {body}"


class ClosureSyntax(Syntax):
    """`|__0, __1| { foo(1, __0, 3, __1) }`"""
    name = "closure"

    def render(self, parameters: Sequence[str], body: str) -> str:
        return f"|{', '.join(parameters)}| {{ {body} }}"


SYNTAXES: dict[str, Syntax] = {s.name: s for s in (PythonSyntax(), ClosureSyntax())}


def get_syntax(syntax: Union[str, Syntax]) -> Syntax:
    if isinstance(syntax, Syntax):
        return syntax
    try:
        return SYNTAXES[syntax]
    except KeyError:
        raise ValueError(f"Unknown syntax {syntax!r}, expected one of {', '.join(SYNTAXES)}") from None


def emit_callable(
    bindings: Sequence[ParameterBinding],
    call: CallExpression,
    syntax: Union[str, Syntax] = "python",
) -> BoundCallable:
    syntax = get_syntax(syntax)
    parameters = tuple(sorted(bindings, key=lambda b: b.index))
    bound = BoundCallable(parameters=parameters, body=call)
    bound.source = syntax.render(bound.parameter_names, bound.call_text)
    logger.debug("emitted %s", bound.source)
    return bound


__all__ = ["ClosureSyntax", "PythonSyntax", "SYNTAXES", "Syntax", "emit_callable", "get_syntax"]
