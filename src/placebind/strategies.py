"""Strategies that fabricate call-expression source texts for property tests.

Requires the ``hypothesis`` extra.
"""
import builtins
import keyword
import types
from dataclasses import dataclass, field
from typing import Any

from hypothesis import strategies as st
from hypothesis.strategies import DrawFn, SearchStrategy


def valid_name(x: str) -> bool:
    return (not (keyword.iskeyword(x) or keyword.issoftkeyword(x))) and not x.startswith("_") and len(x) > 0

ascii_pre_text = st.characters(codec='ascii', categories=("L",))
ascii_text = st.characters(codec='ascii',  categories=("L", "N"), include_characters='_')
NAME_STRATEGY = st.builds(''.join, st.tuples(st.text(ascii_pre_text, min_size=1), st.text(ascii_text))).filter(valid_name)

CALLEE_STRATEGY = NAME_STRATEGY.filter(lambda n: not hasattr(builtins, n))

SEPARATOR_STRATEGY = st.sampled_from([", ", ",", " , ", ",\n    "])


@dataclass(frozen=True)
class FixedArg:
    """A literal argument: its source text and the value it evaluates to."""
    text: str
    value: Any


LITERAL_STRATEGY = st.one_of(
    st.integers(),
    st.booleans(),
    st.none(),
    st.text(max_size=10),
    st.floats(allow_nan=False, allow_infinity=False),
    st.tuples(st.integers(), st.integers()),
    st.lists(st.integers(), max_size=3),
)


def _nested_len(s: str) -> FixedArg:
    return FixedArg(f"len({s!r})", len(s))


FIXED_ARG_STRATEGY = st.one_of(
    st.builds(lambda v: FixedArg(repr(v), v), LITERAL_STRATEGY),
    st.builds(_nested_len, st.text(alphabet=",()[]'_ ab", max_size=6)),
)


@dataclass
class CallCase:
    """
    A generated call expression.

    * `slots` holds one entry per argument: a `FixedArg`, or None for a
      placeholder.
    * `source` is the text handed to the transform.
    """
    callee: str
    slots: list[FixedArg | None]
    source: str
    placeholder: str = "_"
    fixed_texts: list[str] = field(init=False)

    def __post_init__(self):
        self.fixed_texts = [s.text for s in self.slots if s is not None]

    @property
    def placeholder_positions(self) -> list[int]:
        return [i for i, s in enumerate(self.slots) if s is None]

    @property
    def arity(self) -> int:
        return len(self.placeholder_positions)

    def direct_args(self, values) -> list[Any]:
        """The arguments of the equivalent direct call, given placeholder values."""
        values = list(values)
        if len(values) != self.arity:
            raise ValueError(f"expected {self.arity} values, got {len(values)}")
        values.reverse()
        return [values.pop() if s is None else s.value for s in self.slots]


@st.composite
def call_cases(
    draw: DrawFn,
    *,
    callee_strategy: SearchStrategy[str] = CALLEE_STRATEGY,
    fixed_strategy: SearchStrategy[FixedArg] = FIXED_ARG_STRATEGY,
    max_args: int = 8,
    placeholder: str = "_",
    with_placeholders: bool = True,
) -> CallCase:
    """
    Build a `CallCase` with a random mix of fixed arguments and placeholders.

    * Separators vary in whitespace and a trailing comma is sometimes added,
      so the parser sees more than the canonical `, ` form.
    """
    callee = draw(callee_strategy)
    slot_strategy = st.one_of(st.none(), fixed_strategy) if with_placeholders else fixed_strategy
    slots = draw(st.lists(slot_strategy, max_size=max_args))
    texts = [placeholder if s is None else s.text for s in slots]
    parts = []
    for i, text in enumerate(texts):
        parts.append(text)
        if i < len(texts) - 1:
            parts.append(draw(SEPARATOR_STRATEGY))
    if texts and draw(st.booleans()):
        parts.append(",")
    source = f"{callee}({''.join(parts)})"
    return CallCase(callee=callee, slots=slots, source=source, placeholder=placeholder)


def create_recorder(name: str) -> types.FunctionType:
    """
    Return a function called *name* that returns its positional arguments
    as a tuple, so a call can be compared with the bound version of it.
    """
    func_src = f"def {name}(*args): return args"
    namespace: dict[str, types.FunctionType] = {}
    exec(func_src, namespace)
    return namespace[name]


@st.composite
def placeholder_values(draw: DrawFn, case: CallCase, values: SearchStrategy[Any] = LITERAL_STRATEGY) -> list[Any]:
    """Concrete values for every placeholder of *case*."""
    return draw(st.lists(values, min_size=case.arity, max_size=case.arity))


@st.composite
def malformed_sources(draw: DrawFn, cases: SearchStrategy[CallCase] = call_cases()) -> str:
    """Break a well-formed call text so it no longer parses as a call."""
    case = draw(cases)
    breakage = draw(st.sampled_from(["drop_close", "no_args", "trailing_op", "empty_arg", "open_string"]))
    source = case.source
    if breakage == "drop_close":
        return source[:-1]
    if breakage == "no_args":
        return case.callee
    if breakage == "trailing_op":
        return source + " + 1"
    if breakage == "empty_arg":
        return f"{case.callee}(1,,2)"
    return source[:-1] + ", 'abc)"
