import inspect

import pytest

from placebind import BindSettings, MalformedInputError, bind, compile_bound


def foo(a, b, c, d):
    return a + b + c + d


def test_bind_resolves_module_names():
    bar = bind("foo(1, _, 3, _)")
    assert bar(2, 4) == foo(1, 2, 3, 4)


def test_bind_resolves_local_names():
    offset = 100
    add = bind("foo(offset, _, 0, 0)")
    assert add(5) == 105


def test_signature_has_generated_names():
    bar = compile_bound("foo(1, _, 3, _)", {"foo": foo})
    assert list(inspect.signature(bar).parameters) == ["__0", "__1"]


def test_source_is_attached():
    bar = compile_bound("foo(1, _, 3, _)", {"foo": foo})
    assert bar.__placebind_source__ == "lambda __0, __1: foo(1, __0, 3, __1)"


def test_fixed_arguments_are_evaluated_per_call():
    calls = []

    def tick():
        calls.append(1)
        return len(calls)

    bound = compile_bound("foo(tick(), _, 0, 0)", {"foo": foo, "tick": tick})
    assert bound(10) == 11
    assert bound(10) == 12


def test_placeholders_inside_fixed_arguments_are_not_bound():
    _ = "fixed"
    pair = bind("tuple([_, 'x'])")
    assert pair() == ("fixed", "x")


def test_arity_mismatch_surfaces_at_call_time():
    bar = compile_bound("foo(1, _)", {"foo": foo})
    with pytest.raises(TypeError):
        bar(2)


def test_namespace_is_not_modified():
    namespace = {"foo": foo}
    compile_bound("foo(_, _, _, _)", namespace)
    assert namespace == {"foo": foo}


def test_python_syntax_is_forced():
    bar = compile_bound("foo(1, 2, 3, _)", {"foo": foo}, settings=BindSettings(syntax="closure"))
    assert bar(4) == 10


def test_malformed_input_raises_before_compiling():
    with pytest.raises(MalformedInputError):
        compile_bound("foo(1, 2", {"foo": foo})
