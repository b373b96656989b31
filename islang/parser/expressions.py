"""
Expression parsing utilities for islang.

These functions operate on a `islang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions.

Precedence has two levels. ``*`` and ``/`` bind tighter and take exactly one
factor on each side. ``+``, ``-``, ``==``, ``>`` and ``<`` share the lower
level and associate to the right, so ``8 - 2 - 1`` parses as ``8 - (2 - 1)``.
"""

from typing import TYPE_CHECKING

from islang.exceptions import ParseError, UnexpectedTokenError, UnresolvedIdentifierError
from islang.lexer import TokenKind
from islang.nodes import (
    BinaryOp,
    FunctionCall,
    LiteralBoolean,
    LiteralNumber,
    LiteralString,
    LiteralVector,
    Variable,
)
from islang.operations import ADDITIVE, MULTIPLICATIVE

if TYPE_CHECKING:
    from islang.parser import Parser


def _is_assignment(parser: 'Parser') -> bool:
    """Look past ``name`` or ``name[index]`` for an ``=``."""
    nxt = parser.peek(2)
    if nxt.kind == TokenKind.ASSIGN:
        return True
    if nxt.kind == TokenKind.LBRACKET:
        return parser.peek(4).kind == TokenKind.RBRACKET and parser.peek(5).kind == TokenKind.ASSIGN
    return False


# ---- Entry point ----

def parse_expr(parser: 'Parser', statement: bool = False):
    """
    Parse an expression, dispatching on its leading token.

    ``return``, ``if`` and ``while`` are only accepted when ``statement`` is
    set, that is directly inside a block or at the top level.
    """
    with parser.nested():
        tok = parser.peek()
        registry = parser.registry

        if tok.kind == TokenKind.IDENTIFIER:
            if registry.is_variable_name(tok.text) and _is_assignment(parser):
                return parser.parse_assignment()
            if (
                registry.is_variable_name(tok.text)
                or registry.is_function_name(tok.text)
                or parser.peek(2).kind == TokenKind.LPAREN
            ):
                return parser.binary()
            raise UnresolvedIdentifierError(tok)

        if tok.kind == TokenKind.KEYWORD:
            match tok.text:
                case 'var':
                    return parser.parse_var_decl()
                case 'return' if statement:
                    return parser.parse_return()
                case 'if' if statement:
                    return parser.parse_if()
                case 'while' if statement:
                    return parser.parse_while()
                case 'true' | 'false':
                    return parser.binary()
                case 'function':
                    raise ParseError(
                        "Function declarations are only allowed at the top level", tok
                    )

        if tok.kind in (TokenKind.NUMBER, TokenKind.STRING, TokenKind.LBRACKET):
            return parser.binary()

        raise UnexpectedTokenError("expression", tok)


# ---- Operators ----

def parse_binary(parser: 'Parser'):
    """Parse ``term (op expr)?`` for the additive and comparison operators."""
    left = parser.term()
    tok = parser.peek()
    if tok.kind in ADDITIVE:
        parser.eat(tok.kind)
        right = parser.binary()
        return BinaryOp(left, ADDITIVE[tok.kind], right, tok.line)
    return left


def parse_term(parser: 'Parser'):
    """Parse ``factor (('*'|'/') factor)?``."""
    left = parser.factor()
    tok = parser.peek()
    if tok.kind in MULTIPLICATIVE:
        parser.eat(tok.kind)
        right = parser.factor()
        return BinaryOp(left, MULTIPLICATIVE[tok.kind], right, tok.line)
    return left


# ---- Highest precedence ----

def parse_factor(parser: 'Parser'):
    """Parse a variable reference, a call or a literal."""
    tok = parser.peek()
    if tok.kind != TokenKind.IDENTIFIER:
        return parser.literal()

    registry = parser.registry
    is_variable = registry.is_variable_name(tok.text)
    nxt = parser.peek(2)
    if nxt.kind == TokenKind.LPAREN or (registry.is_function_name(tok.text) and not is_variable):
        return parser.call()
    if is_variable:
        if nxt.kind == TokenKind.DOT:
            return parser.receiver_call()
        return parser.variable()
    raise UnresolvedIdentifierError(tok)


def parse_literal(parser: 'Parser'):
    """Parse a number, string, boolean or empty vector literal."""
    tok = parser.peek()
    if tok.kind == TokenKind.NUMBER:
        parser.eat(TokenKind.NUMBER)
        return LiteralNumber(int(tok.text), tok.line)
    if tok.kind == TokenKind.STRING:
        parser.eat(TokenKind.STRING)
        return LiteralString(tok.text, tok.line)
    if tok.kind == TokenKind.KEYWORD and tok.text in ('true', 'false'):
        parser.eat(TokenKind.KEYWORD)
        return LiteralBoolean(tok.text == 'true', tok.line)
    if tok.kind == TokenKind.LBRACKET:
        parser.eat(TokenKind.LBRACKET)
        parser.eat(TokenKind.RBRACKET)
        return LiteralVector(tok.line)
    raise ParseError(f"Malformed literal {tok.kind} (\"{tok.text}\")", tok)


def parse_variable(parser: 'Parser') -> Variable:
    """Parse ``name`` or ``name[index]`` where the index is a number or a variable."""
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    if parser.peek().kind != TokenKind.LBRACKET:
        return Variable(name_tok.text, None, name_tok.line)

    parser.eat(TokenKind.LBRACKET)
    idx_tok = parser.peek()
    if idx_tok.kind == TokenKind.NUMBER:
        parser.eat(TokenKind.NUMBER)
        index = LiteralNumber(int(idx_tok.text), idx_tok.line)
    elif idx_tok.kind == TokenKind.IDENTIFIER:
        if not parser.registry.is_variable_name(idx_tok.text):
            raise UnresolvedIdentifierError(idx_tok)
        parser.eat(TokenKind.IDENTIFIER)
        index = Variable(idx_tok.text, None, idx_tok.line)
    else:
        raise UnexpectedTokenError("number or identifier", idx_tok)
    parser.eat(TokenKind.RBRACKET)
    return Variable(name_tok.text, index, name_tok.line)


def _parse_arguments(parser: 'Parser') -> list:
    parser.eat(TokenKind.LPAREN)
    args = []
    if parser.peek().kind != TokenKind.RPAREN:
        args.append(parser.expr())
        while parser.peek().kind == TokenKind.COMMA:
            parser.eat(TokenKind.COMMA)
            args.append(parser.expr())
    parser.eat(TokenKind.RPAREN)
    return args


def parse_call(parser: 'Parser') -> FunctionCall:
    """
    Parse ``name(arg, ...)``.

    ``length(v)`` with a bare variable argument is stored in receiver form,
    the same as ``v.length()``.
    """
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    args = _parse_arguments(parser)
    if (
        name_tok.text == 'length'
        and len(args) == 1
        and isinstance(args[0], Variable)
        and args[0].index is None
    ):
        return FunctionCall('length', [], args[0].name, name_tok.line)
    return FunctionCall(name_tok.text, args, None, name_tok.line)


def parse_receiver_call(parser: 'Parser') -> FunctionCall:
    """Parse ``receiver.name(arg, ...)``."""
    receiver_tok = parser.eat(TokenKind.IDENTIFIER)
    parser.eat(TokenKind.DOT)
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    args = _parse_arguments(parser)
    return FunctionCall(name_tok.text, args, receiver_tok.text, name_tok.line)
