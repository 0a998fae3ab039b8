"""Partial application as a source rewrite.

    >>> from placebind import expand
    >>> expand("foo(1, _, 3, _)")
    'lambda __0, __1: foo(1, __0, 3, __1)'
"""
from placebind.binder import bind_placeholders
from placebind.core import expand, transform
from placebind.emitter import ClosureSyntax, PythonSyntax, Syntax, emit_callable
from placebind.errors import Diagnostic, MalformedInputError
from placebind.host import bind, compile_bound
from placebind.model import (
    Argument,
    BoundCallable,
    CallExpression,
    Expression,
    Fixed,
    ParameterBinding,
    Placeholder,
    Reference,
)
from placebind.parser import parse_call
from placebind.settings import BindSettings
from placebind.span import Span

__version__ = "0.1.0"

__all__ = [
    "Argument",
    "BindSettings",
    "BoundCallable",
    "CallExpression",
    "ClosureSyntax",
    "Diagnostic",
    "Expression",
    "Fixed",
    "MalformedInputError",
    "ParameterBinding",
    "Placeholder",
    "PythonSyntax",
    "Reference",
    "Span",
    "Syntax",
    "bind",
    "bind_placeholders",
    "compile_bound",
    "emit_callable",
    "expand",
    "parse_call",
    "transform",
]
