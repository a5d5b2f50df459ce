"""Shared definitions for binary operators.

The parser labels every ``BinaryExpression`` with one of these members and
the interpreter dispatches on them. Keeping them in one place stops the two
components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported binary operators.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator symbol for nicer debug output.
        """
        return self.value


# Token type -> operator
TOKEN_OPS = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MULTIPLY': Op.MUL,
    'DIVISION': Op.DIV,
}

# Binding strength; anything absent has precedence 0 and ends an expression
PRECEDENCE = {
    Op.ADD: 1,
    Op.SUB: 1,
    Op.MUL: 2,
    Op.DIV: 2,
}


def precedence_of(token_type: str) -> int:
    """
    Return the binary operator precedence for a token type, 0 if it is not an operator.
    """
    op = TOKEN_OPS.get(token_type)
    if op is None:
        return 0
    return PRECEDENCE[op]


__all__ = ["Op", "TOKEN_OPS", "PRECEDENCE", "precedence_of"]
