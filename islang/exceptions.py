"""Errors.

Every failure raised by the scanner, parser or interpreter derives from
:class:`IslangError`. All of them are fatal to the current run; the only
non-fatal condition (an unknown character during scanning) is logged by the
scanner and never raised.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class IslangError(Exception):
    """
    Base class for all islang errors.
    """
    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)


class LexError(IslangError):
    """
    Error for malformed input at the character level.
    """


class ParseError(IslangError):
    """
    Error for token sequences that do not match the grammar.
    """
    def __init__(self, message, token=None):
        self.token = token
        super().__init__(message, token.line if token is not None else None)


class UnexpectedTokenError(ParseError):
    """
    Error for a token of the wrong kind at a grammar dispatch point.
    """
    def __init__(self, expected, token):
        self.expected = expected
        super().__init__(
            f"Expected token of kind {expected} but got {token.kind} (\"{token.text}\")",
            token,
        )


class UnresolvedIdentifierError(ParseError):
    """
    Error for identifiers that are neither a known variable nor a known function.
    """
    def __init__(self, token):
        self.name = token.text
        super().__init__(f"Unresolved identifier '{token.text}'", token)


class UndefinedNameError(IslangError):
    """
    Error for runtime references to names that have no binding.
    """
    kind = "name"

    def __init__(self, name, line=None):
        self.name = name
        super().__init__(f"Undefined {self.kind} '{name}'", line)


class UndefinedFunctionError(UndefinedNameError):
    """
    Error for calls to functions that were never declared.
    """
    kind = "function"


class UndefinedVariableError(UndefinedNameError):
    """
    Error for undefined variables.
    """
    kind = "variable"


class OperandError(IslangError):
    """
    Error for operands a binary operation or index cannot work with.
    """


class ValueKindError(IslangError):
    """
    Error for values of the wrong runtime kind.
    """


class ArityError(IslangError):
    """
    Error for calls with the wrong number of arguments.
    """


class RecursionLimitError(IslangError):
    """
    Error for nesting deeper than the configured maximum depth.
    """
    def __init__(self, limit, where, line=None):
        self.limit = limit
        super().__init__(f"Maximum {where} depth of {limit} exceeded", line)
