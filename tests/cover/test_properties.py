import pytest
from hypothesis import given, note, strategies as st

from placebind import MalformedInputError, compile_bound, expand, transform
from placebind.model import Reference
from placebind.strategies import call_cases, create_recorder, malformed_sources, placeholder_values


@given(call_cases())
def test_one_parameter_per_placeholder(case):
    bound = transform(case.source)
    assert bound.arity == case.arity


@given(call_cases())
def test_order_is_preserved(case):
    bound = transform(case.source)
    args = bound.body.arguments
    for i, position in enumerate(case.placeholder_positions):
        assert args[position].value == Reference(bound.parameters[i].name)
        assert bound.parameters[i].index == i
    fixed = [a.text for a in args if not isinstance(a.value, Reference)]
    assert fixed == case.fixed_texts


@given(st.data())
def test_bound_call_equals_direct_call(data):
    case = data.draw(call_cases())
    values = data.draw(placeholder_values(case))
    note(case.source)
    recorder = create_recorder(case.callee)
    bound = compile_bound(case.source, {case.callee: recorder})
    assert bound(*values) == recorder(*case.direct_args(values))


@given(call_cases())
def test_is_deterministic(case):
    first, second = transform(case.source), transform(case.source)
    assert first.parameter_names == second.parameter_names
    assert first.source == second.source


@given(call_cases(with_placeholders=False))
def test_zero_placeholders_means_zero_parameters(case):
    recorder = create_recorder(case.callee)
    assert expand(case.source).startswith("lambda: ")
    assert compile_bound(case.source, {case.callee: recorder})() == recorder(*case.direct_args([]))


@given(malformed_sources())
def test_malformed_input_is_rejected(source):
    with pytest.raises(MalformedInputError):
        transform(source)
