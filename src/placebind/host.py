"""
Python host: compile the emitted lambda into a function.

Fixed arguments are evaluated each time the returned function is called,
against a snapshot of the namespace it was compiled in.
"""
from __future__ import annotations

import dataclasses
import inspect
import logging
import types
from typing import Any, Mapping, Optional

from placebind.core import transform
from placebind.settings import BindSettings

logger = logging.getLogger(__name__)


def compile_bound(
    source: str,
    namespace: Optional[Mapping[str, Any]] = None,
    *,
    settings: Optional[BindSettings] = None,
) -> types.FunctionType:
    """Return a new function that is the partial application described by `source`.

    `namespace` supplies the callee and any names used by fixed arguments.
    """
    settings = settings or BindSettings.default()
    if settings.syntax != "python":
        settings = dataclasses.replace(settings, syntax="python")
    bound = transform(source, settings)

    env: dict[str, Any] = dict(namespace or {})
    code = compile(bound.source, "<placebind>", "eval")
    fn = eval(code, env)
    fn.__placebind_source__ = bound.source
    fn.__doc__ = f"Partial application of `{source.strip()}`."
    logger.debug("compiled %s with %d parameter(s)", bound.source, bound.arity)
    return fn


def bind(source: str, *, settings: Optional[BindSettings] = None) -> types.FunctionType:
    """Like `compile_bound`, resolving names in the caller's scope.

    >>> def foo(a, b, c, d): return a + b + c + d
    >>> bar = bind("foo(1, _, 3, _)")
    >>> bar(2, 4) == foo(1, 2, 3, 4)
    True
    """
    frame = inspect.currentframe().f_back
    try:
        namespace = {**frame.f_globals, **frame.f_locals}
    finally:
        del frame
    return compile_bound(source, namespace, settings=settings)


__all__ = ["bind", "compile_bound"]
