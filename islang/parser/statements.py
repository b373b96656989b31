"""Statement parsing utilities for islang.

These functions operate on a `islang.parser.parser.Parser` instance and
handle the statement forms of the language: blocks, conditionals, loops,
declarations, assignments and function definitions.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TYPE_CHECKING

from islang.exceptions import ParseError
from islang.lexer import TokenKind
from islang.nodes import (
    BLOCK_STATEMENTS,
    Assignment,
    FunctionDecl,
    IfStatement,
    Parameter,
    ReturnExpr,
    VariableDecl,
    WhileStatement,
)

if TYPE_CHECKING:
    from islang.parser import Parser

logger = logging.getLogger(__name__)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <if> | <while> | <return> ; | <expression> ;

    Args:
        parser: The parser instance.

    Returns:
        The AST node of the statement.
    """
    node = parser.expr(statement=True)
    if not isinstance(node, BLOCK_STATEMENTS):
        parser.eat(TokenKind.SEMICOLON)
    return node


def parse_block(parser: 'Parser') -> list:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        list: The statements of the block.
    """
    parser.eat(TokenKind.LBRACE)
    statements = []
    while parser.peek().kind != TokenKind.RBRACE:
        statements.append(parser.statement())
    parser.eat(TokenKind.RBRACE)
    return statements


def _parse_condition(parser: 'Parser'):
    parser.eat(TokenKind.LPAREN)
    condition = parser.expr()
    parser.eat(TokenKind.RPAREN)
    return condition


def parse_if(parser: 'Parser') -> IfStatement:
    """
    Parse an 'if' statement. There is no 'else'.

    Syntax:
        if ( <expression> ) { <statement>* }
    """
    tok = parser.eat(TokenKind.KEYWORD, 'if')
    condition = _parse_condition(parser)
    return IfStatement(condition, parser.block(), tok.line)


def parse_while(parser: 'Parser') -> WhileStatement:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <expression> ) { <statement>* }
    """
    tok = parser.eat(TokenKind.KEYWORD, 'while')
    condition = _parse_condition(parser)
    return WhileStatement(condition, parser.block(), tok.line)


def parse_return(parser: 'Parser') -> ReturnExpr:
    """
    Parse a 'return' expression.

    Syntax:
        return <expression>
    """
    tok = parser.eat(TokenKind.KEYWORD, 'return')
    return ReturnExpr(parser.expr(), tok.line)


def parse_var_decl(parser: 'Parser') -> VariableDecl:
    """
    Parse a variable declaration.

    The name only becomes a known variable once the whole declaration,
    initializer included, has been parsed.

    Syntax:
        var <identifier> [= <expression>]
    """
    tok = parser.eat(TokenKind.KEYWORD, 'var')
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    if parser.peek().kind == TokenKind.ASSIGN:
        parser.eat(TokenKind.ASSIGN)
        node = VariableDecl(name_tok.text, 'implied', parser.expr(), tok.line)
    else:
        node = VariableDecl(name_tok.text, 'undefined', None, tok.line)
    parser.registry.declare_variable_name(name_tok.text)
    return node


def parse_assignment(parser: 'Parser') -> Assignment:
    """
    Parse an assignment to a variable or a vector element.

    Syntax:
        <identifier> [ '[' <index> ']' ] = <expression>
    """
    target = parser.variable()
    parser.eat(TokenKind.ASSIGN)
    return Assignment(target, parser.expr(), target.line)


def _parse_parameter(parser: 'Parser') -> Parameter:
    type_tok = parser.eat(TokenKind.TYPE)
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    return Parameter(name_tok.text, type_tok.text)


def parse_func_def(parser: 'Parser') -> FunctionDecl:
    """
    Parse a function declaration.

    The function name is registered before the body is parsed so the body
    can call the function recursively. Parameter names are visible only
    inside the body.

    Syntax:
        function <identifier> ( [<type> <identifier> (, <type> <identifier>)*] ) : <type> { <statement>* }

    Raises:
        ParseError: If a parameter name is repeated.
    """
    tok = parser.eat(TokenKind.KEYWORD, 'function')
    name_tok = parser.eat(TokenKind.IDENTIFIER)
    parser.registry.declare_function_name(name_tok.text)

    parser.eat(TokenKind.LPAREN)
    params = []
    if parser.peek().kind != TokenKind.RPAREN:
        params.append(_parse_parameter(parser))
        while parser.peek().kind == TokenKind.COMMA:
            parser.eat(TokenKind.COMMA)
            params.append(_parse_parameter(parser))
    parser.eat(TokenKind.RPAREN)

    names = [p.name for p in params]
    for i, name in enumerate(names):
        if name in names[:i]:
            raise ParseError(
                f"Duplicate parameter '{name}' in function '{name_tok.text}'", name_tok
            )

    parser.eat(TokenKind.COLON)
    return_type = parser.eat(TokenKind.TYPE).text

    parser.registry.push_scope(names)
    try:
        body = parser.block()
    finally:
        parser.registry.pop_scope()

    logger.debug("Parsed function '%s' with %d parameter(s)", name_tok.text, len(params))
    return FunctionDecl(name_tok.text, params, return_type, body, tok.line)
