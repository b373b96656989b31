"""
Tests for parse-time scoping policies and registry isolation in islang.
"""
import pytest

from islang.config import Config, ScopePolicy
from islang.exceptions import (
    UndefinedFunctionError,
    UndefinedVariableError,
    UnresolvedIdentifierError,
)
from islang.interpreter import Interpreter
from islang.lexer import Scanner
from islang.parser import Parser
from islang.registry import Registry

from islang.tests.utils import output_lines, parse_source, run_source

LEAKING_SOURCE = (
    "function f(int p): int { var inner = p; return inner; }\n"
    "print(inner);\n"
)


def test_lexical_scope_drops_body_declarations():
    with pytest.raises(UnresolvedIdentifierError) as excinfo:
        parse_source(LEAKING_SOURCE, Config(scope_policy=ScopePolicy.LEXICAL))
    assert excinfo.value.name == 'inner'


def test_shared_scope_keeps_body_declarations():
    """
    Test that with shared scoping a body's declarations stay parseable.
    """
    nodes = parse_source(LEAKING_SOURCE, Config(scope_policy=ScopePolicy.SHARED))
    assert len(nodes) == 2


@pytest.mark.parametrize("policy", list(ScopePolicy))
def test_parameters_never_leak(policy):
    with pytest.raises(UnresolvedIdentifierError) as excinfo:
        parse_source(
            "function f(int p): int { return p; }\nprint(p);\n",
            Config(scope_policy=policy),
        )
    assert excinfo.value.name == 'p'


@pytest.mark.parametrize("policy", list(ScopePolicy))
def test_globals_visible_while_parsing_bodies(policy):
    nodes = parse_source(
        "var g = 1;\nfunction f(): int { return g; }\n",
        Config(scope_policy=policy),
    )
    assert len(nodes) == 2


def test_shared_names_still_unbound_at_runtime():
    """
    Test that parse-time visibility never grants runtime access.
    """
    with pytest.raises(UndefinedVariableError) as excinfo:
        run_source(LEAKING_SOURCE, Config(scope_policy=ScopePolicy.SHARED))
    assert excinfo.value.name == 'inner'


def test_separate_registries_do_not_share_declarations():
    first = Registry()
    Interpreter(Parser(Scanner("function f(): int { return 1; } var x = 1;"), first)).interpret()
    assert first.is_function_name('f')
    assert first.is_variable_name('x')

    second = Registry()
    with pytest.raises(UnresolvedIdentifierError):
        Parser(Scanner("print(x);"), second).parse_all()
    with pytest.raises(UndefinedFunctionError):
        Interpreter(Parser(Scanner("f();"), second)).interpret()


def test_discard_clears_everything():
    with Registry() as registry:
        Interpreter(Parser(Scanner("function f(): int { return 1; } var x = f();"), registry)).interpret()
        assert registry.lookup_function('f') is not None
    assert registry.lookup_function('f') is None
    assert not registry.is_function_name('f')
    assert not registry.is_variable_name('x')
    assert registry.is_function_name('print')


def test_shared_registry_carries_names_between_chunks(capsys):
    """
    Test that one registry and interpreter can run a program fed in pieces.
    """
    registry = Registry()
    interpreter = Interpreter(Parser(Scanner(""), registry))
    for chunk in ("var x = 2;", "function sq(int n): int { return n * n; }", "print(sq(x));"):
        interpreter.run(Parser(Scanner(chunk), registry).parse_all())
    assert output_lines(capsys) == ['4']


def test_restore_rolls_back_known_names():
    registry = Registry()
    Parser(Scanner("var a = 1;"), registry).parse_all()
    known = registry.snapshot()
    with pytest.raises(UnresolvedIdentifierError):
        Parser(Scanner("var b = 2; function g(): int { return 1; } b + c;"), registry).parse_all()
    assert registry.is_variable_name('b')
    assert registry.is_function_name('g')
    registry.restore(known)
    assert registry.is_variable_name('a')
    assert not registry.is_variable_name('b')
    assert not registry.is_function_name('g')
