"""Runtime values, statement completions and environments.

A :class:`Result` is a tagged value: its ``kind`` is one of the
:class:`Kind` members and its ``payload`` is the host value (``int``,
``str``, ``bool``, ``list`` of results, or ``None`` for undefined). Results
are immutable; only the list inside a vector result is mutated in place, so
every binding aliasing that list observes element writes.

Statement execution yields a :class:`Continue` or :class:`Return` completion,
which the interpreter passes up to the nearest enclosing function call.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from islang.exceptions import UndefinedVariableError


class Kind(str, Enum):
    """
    Runtime kinds of values.
    """
    INT = "int"
    STRING = "string"
    BOOL = "bool"
    VECTOR = "vector"
    UNDEFINED = "undefined"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Result:
    kind: Kind
    payload: Any = None

    @classmethod
    def of_int(cls, value: int) -> 'Result':
        return cls(Kind.INT, value)

    @classmethod
    def of_string(cls, value: str) -> 'Result':
        return cls(Kind.STRING, value)

    @classmethod
    def of_bool(cls, value: bool) -> 'Result':
        return cls(Kind.BOOL, value)

    @classmethod
    def of_vector(cls, elements: list) -> 'Result':
        return cls(Kind.VECTOR, elements)

    @property
    def is_undefined(self) -> bool:
        return self.kind is Kind.UNDEFINED

    @property
    def is_true(self) -> bool:
        """
        True only for the boolean ``true``; conditions never coerce.
        """
        return self.kind is Kind.BOOL and self.payload is True

    def display(self) -> str:
        """
        Render the value the way ``print`` writes it.
        """
        if self.kind is Kind.BOOL:
            return 'true' if self.payload else 'false'
        if self.kind is Kind.VECTOR:
            return '[' + ', '.join(element.display() for element in self.payload) + ']'
        if self.kind is Kind.UNDEFINED:
            return 'undefined'
        return str(self.payload)


UNDEFINED = Result(Kind.UNDEFINED)


@dataclass(frozen=True)
class Continue:
    """Normal completion; execution proceeds with the next statement."""
    result: Result


@dataclass(frozen=True)
class Return:
    """A ``return`` was executed; unwinds to the enclosing function call."""
    result: Result


Completion = Union[Continue, Return]


class Environment:
    """
    Variable bindings for the top level or for one function call.
    """
    def __init__(self, bindings=None):
        self.vars: dict[str, Result] = dict(bindings or {})

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def lookup(self, name: str, line=None) -> Result:
        """
        Raises:
            UndefinedVariableError: If ``name`` has no binding.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedVariableError(name, line) from None

    def bind(self, name: str, value: Result) -> None:
        self.vars[name] = value
