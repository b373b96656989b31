"""Shared definitions for binary operators.

The parser labels :class:`~islang.nodes.BinaryOp` nodes with these members and
the interpreter dispatches on them, so the two components cannot drift apart.
"""

from enum import Enum

from islang.lexer import TokenKind


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    GT = ">"
    LT = "<"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Multiplicative operators bind tighter than everything else.
MULTIPLICATIVE = {
    TokenKind.MUL: Op.MUL,
    TokenKind.DIV: Op.DIV,
}

# Additive and comparison operators share one right-associative level.
ADDITIVE = {
    TokenKind.PLUS: Op.ADD,
    TokenKind.MINUS: Op.SUB,
    TokenKind.EQ: Op.EQ,
    TokenKind.GT: Op.GT,
    TokenKind.LT: Op.LT,
}

ARITHMETIC = frozenset({Op.ADD, Op.SUB, Op.MUL, Op.DIV})
COMPARISON = frozenset({Op.EQ, Op.GT, Op.LT})

__all__ = ["Op", "MULTIPLICATIVE", "ADDITIVE", "ARITHMETIC", "COMPARISON"]
