"""
Main parser entry point for islang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`islang.parser.expressions` and `islang.parser.statements`.

The parser pulls tokens from a :class:`~islang.lexer.Scanner` on demand.
Whether an identifier starts a call, an assignment or a variable reference
is decided from the names already declared in the :class:`Registry`, plus at
most a few tokens of lookahead.
"""

import logging
from contextlib import contextmanager
from typing import Optional

from islang.config import Config
from islang.exceptions import RecursionLimitError, UnexpectedTokenError
from islang.lexer import Scanner, Token, TokenKind
from islang.registry import Registry

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Parser:
    """islang parser."""

    def __init__(self, scanner: Scanner, registry: Optional[Registry] = None,
                 config: Optional[Config] = None):
        """
        Initialize the parser over a scanner.

        Parameters:
            scanner (Scanner): The token source.
            registry (Registry): Declaration state for this program run. A
                fresh one is created when omitted.
            config (Config): Scope policy and nesting limit.
        """
        self.scanner = scanner
        self.config = config or Config()
        self.registry = registry if registry is not None else Registry(self.config.scope_policy)
        self.depth = 0

    def peek(self, lookahead: int = 1) -> Token:
        return self.scanner.peek(lookahead)

    def eat(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        """
        Consume the next token if it matches the expected kind (and text).

        Raises:
            UnexpectedTokenError: If the token does not match.
        """
        token = self.scanner.scan()
        if token.kind != kind or (text is not None and token.text != text):
            expected = f"{kind} '{text}'" if text is not None else str(kind)
            raise UnexpectedTokenError(expected, token)
        return token

    @contextmanager
    def nested(self):
        """
        Track recursion depth across nested expressions.

        Raises:
            RecursionLimitError: If nesting exceeds ``config.max_depth``.
        """
        self.depth += 1
        try:
            if self.depth > self.config.max_depth:
                raise RecursionLimitError(self.config.max_depth, "expression nesting",
                                          self.peek().line)
            yield
        finally:
            self.depth -= 1


    # Expression wrappers
    def expr(self, statement: bool = False):
        """
        Parse any expression, dispatching on the leading token.
        """
        return _expr.parse_expr(self, statement)

    def binary(self):
        """
        Parse an additive or comparison expression.
        """
        return _expr.parse_binary(self)

    def term(self):
        """
        Parse a multiplication or division.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a variable, call or literal.
        """
        return _expr.parse_factor(self)

    def literal(self):
        return _expr.parse_literal(self)

    def variable(self):
        return _expr.parse_variable(self)

    def call(self):
        return _expr.parse_call(self)

    def receiver_call(self):
        return _expr.parse_receiver_call(self)


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> list:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_if(self):
        return _stmt.parse_if(self)

    def parse_while(self):
        return _stmt.parse_while(self)

    def parse_return(self):
        return _stmt.parse_return(self)

    def parse_var_decl(self):
        return _stmt.parse_var_decl(self)

    def parse_assignment(self):
        return _stmt.parse_assignment(self)

    def parse_func_def(self):
        """
        Parse a function declaration.
        """
        return _stmt.parse_func_def(self)


    def parse(self):
        """
        Parse exactly one top-level unit: a function declaration or a statement.
        """
        tok = self.peek()
        if tok.kind == TokenKind.KEYWORD and tok.text == 'function':
            return self.parse_func_def()
        return self.statement()

    def parse_all(self) -> list:
        """
        Parse top-level units until end of input.

        Raises:
            RecursionLimitError: If the input nests deeper than the host stack allows.
        """
        nodes = []
        try:
            while self.peek().kind != TokenKind.EOF:
                nodes.append(self.parse())
        except RecursionError as exc:
            raise RecursionLimitError(self.config.max_depth, "expression nesting") from exc
        logger.debug("Parsed %d top-level nodes", len(nodes))
        return nodes

    def reset(self) -> None:
        """
        Rewind the scanner to the start of input.
        """
        self.scanner.reset()
