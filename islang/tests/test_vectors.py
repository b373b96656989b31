"""
Tests for vector literals, indexing and length in islang.
"""
import pytest

from islang.config import Config
from islang.exceptions import OperandError, ValueKindError
from islang.values import UNDEFINED, Kind, Result

from islang.tests.utils import output_lines, run_source


def test_write_then_read(capsys):
    interpreter = run_source(
        "var v = [];\n"
        "v[0] = 7;\n"
        "v[1] = 8;\n"
        "print(v[0], length(v));\n"
    )
    assert output_lines(capsys) == ['7 2']
    elements = interpreter.globals.vars['v'].payload
    assert elements == [Result(Kind.INT, 7), Result(Kind.INT, 8)]


def test_read_returns_stored_int():
    interpreter = run_source("var v = []; v[0] = 3; var x = v[0];")
    assert interpreter.globals.vars['x'] == Result(Kind.INT, 3)


def test_variable_index(capsys):
    run_source(
        "var v = [];\n"
        "var i = 0;\n"
        "while (i < 4) { v[i] = i * i; i = i + 1; }\n"
        "var k = 3;\n"
        "print(v[k], v.length());\n"
    )
    assert output_lines(capsys) == ['9 4']


def test_aliases_observe_mutation(capsys):
    """
    Test that element writes are visible through every binding of the same vector.
    """
    interpreter = run_source(
        "var v = [];\n"
        "var w = v;\n"
        "v[0] = 1;\n"
        "w[1] = 2;\n"
        "print(length(v), length(w));\n"
    )
    assert output_lines(capsys) == ['2 2']
    assert interpreter.globals.vars['v'].payload is interpreter.globals.vars['w'].payload


def test_assignment_rewraps_vector():
    interpreter = run_source("var v = []; var w = v; v[0] = 1;")
    v = interpreter.globals.vars['v']
    w = interpreter.globals.vars['w']
    assert v is not w
    assert v == w


def test_each_literal_is_a_new_vector():
    interpreter = run_source("var a = []; var b = []; a[0] = 1;")
    assert interpreter.globals.vars['b'].payload == []


def test_sparse_write_fills_gaps(capsys):
    interpreter = run_source("var v = []; v[2] = 5; print(length(v), v[0], v);")
    assert output_lines(capsys) == ['3 undefined [undefined, undefined, 5]']
    assert interpreter.globals.vars['v'].payload[1] is UNDEFINED


def test_write_far_past_the_end_is_rejected():
    """
    Test that a huge index raises instead of allocating the gap.
    """
    with pytest.raises(OperandError, match="past its end"):
        run_source("var v = []; v[100000000000] = 1;")


def test_vector_gap_limit_is_configurable(capsys):
    config = Config(max_vector_gap=2)
    run_source("var v = []; v[2] = 1; print(length(v));", config)
    assert output_lines(capsys) == ['3']
    with pytest.raises(OperandError, match="limit of 2"):
        run_source("var v = []; v[3] = 1;", config)


def test_vectors_passed_to_functions_are_shared(capsys):
    run_source(
        "function fill(int n): int {\n"
        "    var out = [];\n"
        "    var i = 0;\n"
        "    while (i < n) { out[i] = i; i = i + 1; }\n"
        "    return out;\n"
        "}\n"
        "var r = fill(3);\n"
        "print(r, r.length());\n"
    )
    assert output_lines(capsys) == ['[0, 1, 2] 3']


def test_indexing_non_vector():
    with pytest.raises(ValueKindError, match="is not a vector"):
        run_source("var x = 1; print(x[0]);")


def test_index_must_be_int():
    with pytest.raises(OperandError, match="must be an int"):
        run_source('var v = []; var i = "0"; v[i] = 1;')


def test_length_of_non_vector():
    with pytest.raises(ValueKindError, match="only be called on vectors"):
        run_source("var x = 1; print(length(x));")


def test_length_of_unbound_name():
    """
    Test that length on a declared but never bound name is a kind error.
    """
    with pytest.raises(ValueKindError, match="unbound name 'v'"):
        run_source("var v; print(length(v));")


def test_length_needs_a_variable():
    with pytest.raises(ValueKindError, match="must be called on a variable"):
        run_source("print(length(1));")
