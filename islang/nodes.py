"""AST node definitions.

Every node is a dataclass. ``line`` records where the node started in the
source and is excluded from equality, so two parses of the same program
compare equal node for node.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from islang.operations import Op


@dataclass
class Parameter:
    """A declared function parameter."""
    name: str
    declared_type: str


@dataclass
class LiteralNumber:
    value: int
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class LiteralString:
    value: str
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class LiteralBoolean:
    value: bool
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class LiteralVector:
    """Constructs a new, empty vector each time it is evaluated."""
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class Variable:
    """
    A variable reference. ``index`` is set for vector element references and
    is either a number literal or another variable.
    """
    name: str
    index: Optional[Union[LiteralNumber, 'Variable']] = None
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class BinaryOp:
    left: 'Expr'
    operator: Op
    right: 'Expr'
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class Assignment:
    target: Variable
    value: 'Expr'
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class VariableDecl:
    name: str
    declared_type: str
    initializer: Optional['Expr'] = None
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class FunctionCall:
    """
    A call expression. ``receiver`` names the bound variable for receiver
    calls such as ``v.length()``.
    """
    callee: str
    arguments: list['Expr'] = field(default_factory=list)
    receiver: Optional[str] = None
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class ReturnExpr:
    value: 'Expr'
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class IfStatement:
    condition: 'Expr'
    body: list['Node'] = field(default_factory=list)
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class WhileStatement:
    condition: 'Expr'
    body: list['Node'] = field(default_factory=list)
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass
class FunctionDecl:
    name: str
    parameters: list[Parameter]
    return_type: str
    body: list['Node'] = field(default_factory=list)
    line: Optional[int] = field(default=None, compare=False, repr=False)


Expr = Union[
    LiteralNumber, LiteralString, LiteralBoolean, LiteralVector, Variable, BinaryOp,
    Assignment, VariableDecl, FunctionCall, ReturnExpr, IfStatement, WhileStatement,
]
Node = Union[Expr, FunctionDecl]

# Statements that end with a block and are not followed by ';'.
BLOCK_STATEMENTS = (IfStatement, WhileStatement)
