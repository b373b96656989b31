"""Scanner for islang.

The scanner is pull-based: :meth:`Scanner.scan` matches one token at the
current cursor using a combined regular expression of named groups and
advances past it. :meth:`Scanner.peek` looks ahead by scanning from a saved
cursor and restoring it afterwards, so lookahead keeps no memory of its own.
:meth:`Scanner.reset` rewinds to the start of input so the same source can be
replayed, e.g. once for a token dump and again for parsing.

Whitespace is skipped. Unknown characters are logged and skipped; an
unterminated string literal raises :class:`LexError`. Once the input is
exhausted every further call returns the same end-of-input token.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re
from enum import Enum

from islang.exceptions import LexError

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    """
    Closed set of token kinds.
    """
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    STRING = "string"
    TYPE = "type"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    DOT = "."
    COLON = ":"
    SEMICOLON = ";"
    ASSIGN = "="
    EQ = "=="
    PLUS = "+"
    MINUS = "-"
    MUL = "*"
    DIV = "/"
    GT = ">"
    LT = "<"

    EOF = "end of input"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


KEYWORDS = frozenset({'var', 'function', 'return', 'if', 'while', 'true', 'false'})
TYPE_NAMES = frozenset({'int', 'string', 'bool'})

_PUNCTUATION = {kind.value: kind for kind in TokenKind if len(kind.value) <= 2}

token_specification = [
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r\f\v]+'),
    ('NUMBER',       r'\d+'),
    ('NAME',         r'[A-Za-z_][A-Za-z0-9_]*'),
    ('STRING',       r'"[^"]*"'),
    ('UNTERMINATED', r'"'),
    ('EQ',           r'=='),
    ('PUNCT',        r'[(){}\[\],.:;=+\-*/<>]'),
    ('MISMATCH',     r'.'),
]

_token_regex = re.compile('|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification))


class Token:
    """
    Represents a lexical token with a kind and its raw text.
    """
    def __init__(self, kind: TokenKind, text: str, line: int = 1):
        """
        Initialize a new token.

        Parameters:
            kind (TokenKind): The token kind.
            text (str): The raw source text of the token.
            line (int): The 1-based source line the token starts on.
        """
        self.kind = kind
        self.text = text
        self.line = line

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.text, self.line) == (other.kind, other.text, other.line)

    def __hash__(self) -> int:
        return hash((self.kind, self.text, self.line))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.name}, {self.text!r}, line={self.line})"


class Scanner:
    """
    Lazy, restartable token stream over one source text.
    """
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self._reported: set[int] = set()

    def scan(self) -> Token:
        """
        Consume and return the next token.

        Raises:
            LexError: If a string literal is not closed before end of input.
        """
        source = self.source
        while self.pos < len(source):
            match_obj = _token_regex.match(source, self.pos)
            kind = match_obj.lastgroup
            value = match_obj.group()
            start_line = self.line

            if kind == 'NEWLINE':
                self.pos = match_obj.end()
                self.line += 1
                continue
            if kind == 'SKIP':
                self.pos = match_obj.end()
                continue
            if kind == 'MISMATCH':
                if self.pos not in self._reported:
                    self._reported.add(self.pos)
                    logger.warning("Skipping unexpected character %r on line %d", value, self.line)
                self.pos = match_obj.end()
                continue
            if kind == 'UNTERMINATED':
                raise LexError("Unterminated string literal", start_line)

            self.pos = match_obj.end()
            if kind == 'NUMBER':
                return Token(TokenKind.NUMBER, value, start_line)
            if kind == 'STRING':
                self.line += value.count('\n')
                return Token(TokenKind.STRING, value[1:-1], start_line)
            if kind == 'NAME':
                if value in TYPE_NAMES:
                    return Token(TokenKind.TYPE, value, start_line)
                if value in KEYWORDS:
                    return Token(TokenKind.KEYWORD, value, start_line)
                return Token(TokenKind.IDENTIFIER, value, start_line)
            return Token(_PUNCTUATION[value], value, start_line)

        return Token(TokenKind.EOF, "", self.line)

    def peek(self, lookahead: int = 1) -> Token:
        """
        Return the token ``lookahead`` positions ahead without consuming it.
        """
        saved = self.pos, self.line
        try:
            token = self.scan()
            for _ in range(lookahead - 1):
                token = self.scan()
        finally:
            self.pos, self.line = saved
        return token

    def scan_all(self) -> list[Token]:
        """
        Scan the rest of the input, including the final end-of-input token.
        """
        tokens = []
        while True:
            token = self.scan()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                return tokens

    def reset(self) -> None:
        """
        Rewind the cursor to the start of input.
        """
        self.pos = 0
        self.line = 1
