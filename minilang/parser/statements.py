"""
Statement parsing utilities for minilang.

These functions operate on a `minilang.parser.parser.Parser` instance and
handle the statement forms of the language: assignments, PRINT and
unsupported directives.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from minilang.nodes import AssignmentStatement, PrintStatement, UnsupportedStatement

if TYPE_CHECKING:
    from minilang.parser import Parser


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.curr_token
    if tok.type == 'VARIABLE':
        return parser.parse_assignment()
    elif tok.type == 'PRINT':
        return parser.parse_print()
    elif tok.type == 'UNSUPPORTED':
        return parser.parse_unsupported()
    else:
        raise parser.error(f"unexpected token {parser.describe(tok)}")


def parse_assignment(parser: 'Parser') -> AssignmentStatement:
    """
    Parse a variable assignment.

    Args:
        parser: The parser instance.

    Returns:
        AssignmentStatement: ``$name = expression``.
    """
    name = parser.eat('VARIABLE').value
    parser.eat('EQUAL')
    return AssignmentStatement(name, parser.expr())


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse a PRINT statement and its comma-separated expressions.
    """
    parser.eat('PRINT')
    return PrintStatement(parser.expr_list())


def parse_unsupported(parser: 'Parser') -> UnsupportedStatement:
    """
    Parse an '@directive'. Rejecting it is left to the interpreter.
    """
    tok = parser.eat('UNSUPPORTED')
    return UnsupportedStatement(tok.value)
