"""The transform: parse, bind, emit."""
from __future__ import annotations

from typing import Optional

from placebind.binder import bind_placeholders
from placebind.emitter import emit_callable
from placebind.model import BoundCallable
from placebind.parser import parse_call
from placebind.settings import BindSettings


def transform(source: str, settings: Optional[BindSettings] = None) -> BoundCallable:
    """Rewrite the call expression in `source` into a bound callable.

    >>> transform("foo(1, _, 3, _)").source
    'lambda __0, __1: foo(1, __0, 3, __1)'
    """
    settings = settings or BindSettings.default()
    call = parse_call(source, placeholder=settings.placeholder)
    bindings, call = bind_placeholders(call, prefix=settings.prefix)
    return emit_callable(bindings, call, syntax=settings.syntax)


def expand(source: str, settings: Optional[BindSettings] = None) -> str:
    """Return the emitted callable's source text."""
    return transform(source, settings).source


__all__ = ["expand", "transform"]
