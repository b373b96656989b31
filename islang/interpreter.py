"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
arithmetic, comparisons, variables, vectors, function declarations and calls, conditionals,
loops and the two built-in functions ``print`` and ``length``.

1. Execution Model
The interpreter parses the whole program up front, then executes each top-level node in order.
Statements are executed via `execute()`, which returns a completion: `Continue(result)` for
normal flow or `Return(result)` after a ``return``. Expressions are evaluated via `evaluate()`,
which returns a tagged `Result`.

2. Environment
Top-level statements run against one long-lived global `Environment`. Every user function call
gets a brand-new environment holding only its parameters; the caller's bindings are not visible.
Function declarations live in the program's `Registry`, shared by all calls; a later declaration
of the same name replaces the earlier one.

3. Control Flow
`if` and `while` run their body only while the condition is exactly boolean ``true``. A
`Return` completion stops the enclosing body and unwinds to the nearest function call; at the
top level it simply ends that statement.

4. Error Handling
Runtime errors (undefined names, bad operands, wrong kinds, wrong arity, runaway recursion)
are raised as typed exceptions carrying the source line and end the run.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Optional

from islang.config import Config
from islang.exceptions import (
    ArityError,
    OperandError,
    RecursionLimitError,
    UndefinedFunctionError,
    ValueKindError,
)
from islang.nodes import (
    Assignment,
    BinaryOp,
    FunctionCall,
    FunctionDecl,
    IfStatement,
    LiteralBoolean,
    LiteralNumber,
    LiteralString,
    LiteralVector,
    ReturnExpr,
    Variable,
    VariableDecl,
    WhileStatement,
)
from islang.operations import Op
from islang.parser import Parser
from islang.registry import BUILTIN_FUNCTIONS, Registry
from islang.values import UNDEFINED, Completion, Continue, Environment, Kind, Result, Return

logger = logging.getLogger(__name__)

PRINT_MAX_ARGS = 5


class Interpreter:
    """
    Tree-walk interpreter for islang.
    """
    def __init__(self, parser: Parser, registry: Optional[Registry] = None, stdout=None,
                 config: Optional[Config] = None):
        """
        Initialize the interpreter.

        Parameters:
            parser (Parser): Source of the program's AST.
            registry (Registry): Function table; defaults to the parser's registry.
            stdout (TextIO): Stream ``print`` writes to; defaults to ``sys.stdout``.
            config (Config): Call depth limit; defaults to the parser's config.
        """
        self.parser = parser
        self.registry = registry if registry is not None else parser.registry
        self.config = config or parser.config
        self.stdout = stdout
        self.globals = Environment()
        self.depth = 0

    def interpret(self) -> None:
        """
        Parse the full program, then execute it.
        """
        self.run(self.parser.parse_all())

    def run(self, nodes: list) -> None:
        """
        Execute top-level nodes in order against the global environment.

        Raises:
            RecursionLimitError: If calls nest deeper than the host stack allows.
        """
        try:
            for node in nodes:
                self.execute(node, self.globals)
        except RecursionError as exc:
            raise RecursionLimitError(self.config.max_depth, "call") from exc

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, node, env: Environment) -> Completion:
        """
        Execute one statement and report how control leaves it.
        """
        match node:
            case ReturnExpr(value=value):
                return Return(self.evaluate(value, env))

            case IfStatement(condition=condition, body=body):
                if self.evaluate(condition, env).is_true:
                    return self.execute_body(body, env)
                return Continue(UNDEFINED)

            case WhileStatement(condition=condition, body=body):
                completion = Continue(UNDEFINED)
                while self.evaluate(condition, env).is_true:
                    completion = self.execute_body(body, env)
                    if isinstance(completion, Return):
                        break
                return completion

            case FunctionDecl():
                self.registry.register_function(node)
                return Continue(UNDEFINED)

            case _:
                return Continue(self.evaluate(node, env))

    def execute_body(self, statements: list, env: Environment) -> Completion:
        """
        Execute statements in order, stopping at the first ``Return``.

        Returns:
            The ``Return`` completion, or the last statement's completion, or
            ``Continue(undefined)`` for an empty body.
        """
        completion = Continue(UNDEFINED)
        for stmt in statements:
            completion = self.execute(stmt, env)
            if isinstance(completion, Return):
                break
        return completion

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate(self, node, env: Environment) -> Result:
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            UndefinedVariableError: If an unbound variable is read.
            RuntimeError: If the node is not an expression.
        """
        match node:
            case LiteralNumber(value=value):
                return Result.of_int(value)
            case LiteralString(value=value):
                return Result.of_string(value)
            case LiteralBoolean(value=value):
                return Result.of_bool(value)
            case LiteralVector():
                return Result.of_vector([])

            case Variable(index=None):
                return env.lookup(node.name, node.line)
            case Variable():
                return self._read_element(node, env)

            case BinaryOp():
                return self._binary(node, env)
            case Assignment():
                return self._assign(node, env)

            case VariableDecl(initializer=None):
                return UNDEFINED
            case VariableDecl(initializer=initializer):
                value = self.evaluate(initializer, env)
                env.bind(node.name, value)
                return value

            case FunctionCall():
                return self._call(node, env)

        raise RuntimeError(f"Invalid expression node: {node!r}")

    def _binary(self, node: BinaryOp, env: Environment) -> Result:
        lhs = self.evaluate(node.left, env)
        rhs = self.evaluate(node.right, env)
        op = node.operator
        if lhs.is_undefined or rhs.is_undefined:
            raise OperandError(
                f"One of the operands used in the '{op}' operation is undefined", node.line
            )

        match op:
            case Op.ADD:
                if lhs.kind is Kind.INT and rhs.kind is Kind.INT:
                    return Result.of_int(lhs.payload + rhs.payload)
                if Kind.STRING in (lhs.kind, rhs.kind):
                    return Result.of_string(lhs.display() + rhs.display())
            case Op.SUB | Op.MUL | Op.DIV if lhs.kind is Kind.INT and rhs.kind is Kind.INT:
                if op == Op.SUB:
                    return Result.of_int(lhs.payload - rhs.payload)
                if op == Op.MUL:
                    return Result.of_int(lhs.payload * rhs.payload)
                if rhs.payload == 0:
                    raise OperandError("Division by zero", node.line)
                return Result.of_int(lhs.payload // rhs.payload)
            case Op.EQ:
                return Result.of_bool(lhs.kind is rhs.kind and lhs.payload == rhs.payload)
            case Op.GT | Op.LT if lhs.kind is rhs.kind and lhs.kind in (Kind.INT, Kind.STRING):
                if op == Op.GT:
                    return Result.of_bool(lhs.payload > rhs.payload)
                return Result.of_bool(lhs.payload < rhs.payload)

        raise OperandError(
            f"Unsupported operand kinds for '{op}': {lhs.kind} and {rhs.kind}", node.line
        )

    # ------------------------------------------------------------------
    # Vectors
    # ------------------------------------------------------------------

    def _vector(self, target: Variable, env: Environment) -> Result:
        value = env.lookup(target.name, target.line)
        if value.kind is not Kind.VECTOR:
            raise ValueKindError(f"'{target.name}' is not a vector", target.line)
        return value

    def _position(self, target: Variable, env: Environment) -> int:
        """
        Resolve a literal or variable index to a non-negative position.
        """
        if isinstance(target.index, LiteralNumber):
            position = target.index.value
        else:
            value = self.evaluate(target.index, env)
            if value.kind is not Kind.INT:
                raise OperandError(
                    f"Index of '{target.name}' must be an int, got {value.kind}", target.line
                )
            position = value.payload
        if position < 0:
            raise OperandError(f"Negative index {position} for '{target.name}'", target.line)
        return position

    def _read_element(self, target: Variable, env: Environment) -> Result:
        elements = self._vector(target, env).payload
        position = self._position(target, env)
        if position >= len(elements):
            return UNDEFINED
        return elements[position]

    def _assign(self, node: Assignment, env: Environment) -> Result:
        value = self.evaluate(node.value, env)
        target = node.target
        if target.index is None:
            env.bind(target.name, value)
            return value

        elements = self._vector(target, env).payload
        position = self._position(target, env)
        gap = position - len(elements)
        if gap > self.config.max_vector_gap:
            raise OperandError(
                f"Index {position} of '{target.name}' is {gap} past its end, "
                f"more than the limit of {self.config.max_vector_gap}",
                target.line,
            )
        if gap >= 0:
            elements.extend([UNDEFINED] * (gap + 1))
        elements[position] = value
        env.bind(target.name, Result.of_vector(elements))
        return value

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def _call(self, node: FunctionCall, env: Environment) -> Result:
        if node.callee in BUILTIN_FUNCTIONS:
            return self._call_builtin(node, env)

        decl = self.registry.lookup_function(node.callee)
        if decl is None:
            raise UndefinedFunctionError(node.callee, node.line)
        if node.receiver is not None:
            raise ValueKindError(
                f"Function '{node.callee}' cannot be called on '{node.receiver}'", node.line
            )
        if len(node.arguments) != len(decl.parameters):
            raise ArityError(
                f"Function '{node.callee}' expects {len(decl.parameters)} argument(s), "
                f"got {len(node.arguments)}",
                node.line,
            )

        args = [self.evaluate(arg, env) for arg in node.arguments]
        call_env = Environment(zip((p.name for p in decl.parameters), args))

        self.depth += 1
        try:
            if self.depth > self.config.max_depth:
                raise RecursionLimitError(self.config.max_depth, "call", node.line)
            logger.debug("Calling '%s' at depth %d", node.callee, self.depth)
            completion = self.execute_body(decl.body, call_env)
        finally:
            self.depth -= 1
        return completion.result

    def _call_builtin(self, node: FunctionCall, env: Environment) -> Result:
        if node.callee == 'print':
            if node.receiver is not None:
                raise ValueKindError(f"'print' cannot be called on '{node.receiver}'", node.line)
            if len(node.arguments) > PRINT_MAX_ARGS:
                raise ArityError(
                    f"'print' takes at most {PRINT_MAX_ARGS} arguments, got {len(node.arguments)}",
                    node.line,
                )
            values = [self.evaluate(arg, env) for arg in node.arguments]
            print(*(value.display() for value in values), file=self.stdout)
            return UNDEFINED

        # length
        if node.receiver is None:
            raise ValueKindError("'length' must be called on a variable", node.line)
        if node.arguments:
            raise ArityError("'length' takes no arguments besides its receiver", node.line)
        if node.receiver not in env:
            raise ValueKindError(f"'length' called on unbound name '{node.receiver}'", node.line)
        value = env.lookup(node.receiver, node.line)
        if value.kind is not Kind.VECTOR:
            raise ValueKindError(
                f"'length' can only be called on vectors, '{node.receiver}' is {value.kind}",
                node.line,
            )
        return Result.of_int(len(value.payload))
