"""
Placeholder binder.

Walks the top-level arguments left to right and gives every placeholder a
fresh parameter name. Placeholders nested inside fixed arguments are not
visited.
"""
from __future__ import annotations

import copy
import logging

from placebind.model import CallExpression, Fixed, ParameterBinding, Reference, is_placeholder

logger = logging.getLogger(__name__)


def parameter_name(prefix: str, index: int) -> str:
    return f"{prefix}{index}"


def bind_placeholders(call: CallExpression, prefix: str = "__") -> tuple[list[ParameterBinding], CallExpression]:
    """Return the parameter bindings and a rewritten copy of `call`.

    The counter starts at 0 on every invocation, so the same call always
    produces the same names. `call` itself is left untouched.
    """
    call = copy.copy(call)
    call.arguments = list(call.arguments)

    bindings: list[ParameterBinding] = []
    for position, argument in enumerate(call.arguments):
        if not is_placeholder(argument):
            continue
        binding = ParameterBinding(index=len(bindings), name=parameter_name(prefix, len(bindings)))
        bindings.append(binding)
        call.arguments[position] = Fixed(Reference(binding.name))

    logger.debug("bound %d placeholder(s) in call to %s", len(bindings), call.callee.text)
    return bindings, call


__all__ = ["bind_placeholders", "parameter_name"]
