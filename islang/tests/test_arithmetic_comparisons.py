"""
Tests for arithmetic and comparison operators in islang.
"""
import pytest

from islang.exceptions import OperandError
from islang.values import Kind, Result

from islang.tests.utils import output_lines, run_source


def test_precedence(capsys):
    run_source("print(2 + 3 * 4);")
    assert output_lines(capsys) == ['14']


def test_right_associative_subtraction(capsys):
    """
    Test that the shared additive level groups to the right.
    """
    run_source("print(8 - 2 - 1);")
    assert output_lines(capsys) == ['7']


@pytest.mark.parametrize("source, expected", [
    ("print(7 / 2);", "3"),
    ("print(6 * 7);", "42"),
    ("print(1 == 1);", "true"),
    ("print(1 == 2);", "false"),
    ("print(3 > 2);", "true"),
    ("print(3 < 2);", "false"),
    ('print("a" < "b");', "true"),
    ('print("a" == "a");', "true"),
    ('print("1" == 1);', "false"),
    ("print(true == true);", "true"),
])
def test_operators(capsys, source, expected):
    run_source(source)
    assert output_lines(capsys) == [expected]


def test_string_concatenation(capsys):
    interpreter = run_source('var s = "n=" + 4; var t = "ok " + true;')
    assert interpreter.globals.vars['s'] == Result(Kind.STRING, "n=4")
    assert interpreter.globals.vars['t'] == Result(Kind.STRING, "ok true")


def test_arithmetic_result_is_int():
    interpreter = run_source("var x = 2 * 3;")
    assert interpreter.globals.vars['x'] == Result(Kind.INT, 6)


def test_comparison_result_is_bool():
    interpreter = run_source("var b = 2 > 1;")
    assert interpreter.globals.vars['b'] == Result(Kind.BOOL, True)


@pytest.mark.parametrize("source", [
    'print("a" - 1);',
    'print("a" * "b");',
    "print(true + 1);",
    'print(1 > "a");',
    "print(true < false);",
])
def test_unsupported_operand_kinds(source):
    with pytest.raises(OperandError, match="Unsupported operand kinds"):
        run_source(source)


def test_division_by_zero():
    with pytest.raises(OperandError, match="Division by zero"):
        run_source("print(1 / 0);")


def test_undefined_operand(capsys):
    """
    Test that reading past the end of a vector gives an undefined operand.
    """
    with pytest.raises(OperandError, match="undefined"):
        run_source("var v = []; print(v[3] + 1);")
    assert output_lines(capsys) == []
