"""
Call parser: source text -> `CallExpression`.

The grammar only knows about brackets, commas, strings and names, so the
callee and every argument stay opaque. Each argument's text is the exact
slice of the input it was parsed from.
"""
from __future__ import annotations

import keyword
import logging
from pathlib import Path
from typing import Iterator

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from placebind.errors import MalformedInputError
from placebind.model import Argument, CallExpression, Expression, Fixed, Placeholder
from placebind.span import Span

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
    _GRAMMAR_SRC,
    parser="earley",
    lexer="basic",
    start="start",
    keep_all_tokens=True,
    maybe_placeholders=False,
)


def parse_call(source: str, placeholder: str = "_") -> CallExpression:
    """Parse `source` as exactly one call expression.

    An argument made of the single token `placeholder` becomes a
    `Placeholder`; anything else is kept verbatim as a `Fixed` expression.
    Raises `MalformedInputError` if `source` is not a call.
    """
    if not isinstance(source, str):
        raise TypeError(f"source must be a str, not {type(source).__name__}")
    try:
        tree = _PARSER.parse(source)
    except UnexpectedInput as err:
        raise _malformed(source, err) from err

    callee_tree, arguments_tree = tree.children
    callee = _expression(source, callee_tree)
    arguments = [
        _argument(source, child, placeholder)
        for child in arguments_tree.children
        if isinstance(child, Tree) and child.data == "argument"
    ]
    logger.debug("parsed call to %s with %d argument(s)", callee.text, len(arguments))
    return CallExpression(callee=callee, arguments=arguments)


def _tokens(tree: Tree) -> Iterator[Token]:
    return tree.scan_values(lambda v: isinstance(v, Token))


def _expression(source: str, tree: Tree) -> Expression:
    tokens = list(_tokens(tree))
    first, last = tokens[0], tokens[-1]
    return Expression(
        text=source[first.start_pos:last.end_pos],
        span=Span.covering(first, last),
    )


def _argument(source: str, tree: Tree, placeholder: str) -> Argument:
    tokens = list(_tokens(tree))
    _check_juxtaposition(source, tokens)
    if len(tokens) == 1 and tokens[0].type == "NAME" and tokens[0].value == placeholder:
        return Placeholder(Span.from_token(tokens[0]))
    return Fixed(_expression(source, tree))


_LITERALS = ("True", "False", "None")


def _operand_kind(token: Token) -> str | None:
    if token.type == "STRING":
        return "string"
    if token.type == "NUMBER":
        return "operand"
    if token.type == "NAME" and (token.value in _LITERALS or not keyword.iskeyword(token.value)):
        return "operand"
    return None


def _check_juxtaposition(source: str, tokens: list[Token]) -> None:
    """Reject two operands side by side with no operator between them.

    `last[-1]` is the kind of the previous unit at the current bracket depth.
    A bracketed group may follow an operand (call or subscript); adjacent
    string literals concatenate.
    """
    last: list[str | None] = [None]
    for token in tokens:
        value = token.value if token.type not in ("NAME", "NUMBER", "STRING", "OP") else None
        if value in ("(", "[", "{"):
            last.append(None)
            continue
        if value in (")", "]", "}"):
            last.pop()
            last[-1] = "operand"
            continue
        kind = _operand_kind(token)
        if kind is not None and last[-1] is not None and not (kind == last[-1] == "string"):
            raise MalformedInputError(
                f"Unexpected {token.value!r}: missing operator or comma before it",
                source,
                Span.from_token(token),
            )
        last[-1] = kind


def _malformed(source: str, err: UnexpectedInput) -> MalformedInputError:
    if isinstance(err, UnexpectedEOF) or (isinstance(err, UnexpectedToken) and err.token.type == "$END"):
        message = "Unexpected end of input: not a complete call expression"
        if not source.strip():
            message = "Empty input: expected a call expression"
        return MalformedInputError(message, source, Span.end_of(source))
    if isinstance(err, UnexpectedCharacters):
        char = source[err.pos_in_stream] if 0 <= err.pos_in_stream < len(source) else ""
        message = f"Unexpected character {char!r}"
    elif isinstance(err, UnexpectedToken):
        message = f"Unexpected {err.token.value!r}: expected a single call of the form callee(arg, ...)"
    else:
        message = "Input is not a call expression"
    line = getattr(err, "line", None)
    column = getattr(err, "column", None)
    if line is None or column is None or line < 1 or column < 1:
        span = Span.end_of(source)
    else:
        span = Span(line=line, column=column, start=getattr(err, "pos_in_stream", None))
    return MalformedInputError(message, source, span)


__all__ = ["parse_call"]
