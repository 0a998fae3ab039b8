import logging

import pytest

from placebind import BindSettings, MalformedInputError, compile_bound, expand, transform


def foo(a, b, c, d):
    return a + b + c + d


NAMESPACE = {"foo": foo}


def test_fixed_in_odd_positions():
    assert expand("foo(1, _, 3, _)") == "lambda __0, __1: foo(1, __0, 3, __1)"
    bar = compile_bound("foo(1, _, 3, _)", NAMESPACE)
    assert bar(2, 4) == foo(1, 2, 3, 4)


def test_fixed_in_even_positions():
    assert expand("foo(_, 2, _, 4)") == "lambda __0, __1: foo(__0, 2, __1, 4)"
    baz = compile_bound("foo(_, 2, _, 4)", NAMESPACE)
    assert baz(1, 3) == foo(1, 2, 3, 4)


def test_no_placeholders():
    assert expand("foo(1, 2, 3, 4)") == "lambda: foo(1, 2, 3, 4)"
    assert compile_bound("foo(1, 2, 3, 4)", NAMESPACE)() == 10


def test_all_placeholders():
    bound = transform("foo(_, _, _, _)")
    assert bound.parameter_names == ("__0", "__1", "__2", "__3")
    assert bound.source == "lambda __0, __1, __2, __3: foo(__0, __1, __2, __3)"
    same = compile_bound("foo(_, _, _, _)", NAMESPACE)
    assert same(1, 2, 3, 4) == foo(1, 2, 3, 4)


def test_unbalanced_input():
    with pytest.raises(MalformedInputError) as excinfo:
        expand("foo(1, 2")
    err = excinfo.value
    assert err.span.line == 1
    assert err.span.column == len("foo(1, 2") + 1
    assert "end of input" in str(err)


def test_error_pinpoints_offending_token():
    with pytest.raises(MalformedInputError) as excinfo:
        expand("foo(1) + 2")
    err = excinfo.value
    assert err.span.column == 8
    assert err.diagnostic.span == err.span
    assert "foo(1) + 2\n       ^" in str(err)


def test_settings_flow_through():
    settings = BindSettings(placeholder="hole", prefix="p", syntax="closure")
    assert expand("foo(1, hole, _)", settings) == "|p0| { foo(1, p0, _) }"


def test_is_deterministic():
    assert transform("f(_, x, _)") == transform("f(_, x, _)")


def test_logs_each_stage(caplog):
    with caplog.at_level(logging.DEBUG, logger="placebind"):
        expand("foo(1, _)")
    messages = [r.getMessage() for r in caplog.records]
    assert "parsed call to foo with 2 argument(s)" in messages
    assert "bound 1 placeholder(s) in call to foo" in messages
    assert "emitted lambda __0: foo(1, __0)" in messages
