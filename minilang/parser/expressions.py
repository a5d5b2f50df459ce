"""
Expression parsing utilities for minilang.

These functions operate on a `minilang.parser.parser.Parser` instance and
implement precedence climbing for binary operators: each recursive call
carries a precedence floor, so higher-precedence operators bind tighter and
operators of equal precedence associate to the left.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from minilang.nodes import BinaryExpression, Literal, VariableReference
from minilang.operations import TOKEN_OPS, precedence_of

if TYPE_CHECKING:
    from minilang.parser import Parser


def parse_atom(parser: 'Parser'):
    """Parse a variable reference or a string/integer literal."""
    tok = parser.curr_token

    if tok.type == 'VARIABLE':
        parser.eat('VARIABLE')
        return VariableReference(tok.value)

    if tok.type in ('STRING', 'INTEGER'):
        parser.eat(tok.type)
        return Literal(tok.value)

    raise parser.error(f"expected an expression but got {parser.describe(tok)}")


def parse_expression(parser: 'Parser', min_precedence: int = 0):
    """
    Parse a binary expression.

    The left operand is a single atom. Each following operator whose
    precedence is strictly above ``min_precedence`` is consumed and its right
    operand parsed with the operator's own precedence as the new floor, then
    folded into the left operand.
    """
    left = parser.atom()
    while True:
        op_tok = parser.curr_token
        precedence = precedence_of(op_tok.type)
        if precedence <= min_precedence:
            break
        parser.eat(op_tok.type)
        right = parser.expr(precedence)
        left = BinaryExpression(left, TOKEN_OPS[op_tok.type], right)
    return left


def parse_expression_list(parser: 'Parser') -> tuple:
    """Parse one or more expressions separated by commas."""
    expressions = [parser.expr()]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        expressions.append(parser.expr())
    return tuple(expressions)
