"""AST nodes.

The syntax tree is a closed set of immutable node types. Statements are
``AssignmentStatement``, ``PrintStatement`` and ``UnsupportedStatement``;
expressions are ``VariableReference``, ``Literal`` and ``BinaryExpression``.
Parser and interpreter both dispatch over them with ``match``.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minilang.operations import Op


@dataclass(frozen=True)
class VariableReference:
    """Read of a variable, ``$name``."""

    name: str


@dataclass(frozen=True)
class Literal:
    """String or integer constant."""

    value: Union[str, int]


@dataclass(frozen=True)
class BinaryExpression:
    """``left operator right``."""

    left: Expression
    operator: Op
    right: Expression


@dataclass(frozen=True)
class AssignmentStatement:
    """``$name = value``."""

    name: str
    value: Expression


@dataclass(frozen=True)
class PrintStatement:
    """``PRINT expr, expr, ...``."""

    expressions: tuple[Expression, ...]


@dataclass(frozen=True)
class UnsupportedStatement:
    """An ``@directive`` carried through to the interpreter."""

    directive: str


Expression = Union[VariableReference, Literal, BinaryExpression]
Statement = Union[AssignmentStatement, PrintStatement, UnsupportedStatement]


def to_source(node) -> str:
    """
    Render a node back to source text.

    Binary expressions are fully parenthesised so the rendering shows how the
    parser grouped them, e.g. ``2 + 3 * 4`` renders as ``(2 + (3 * 4))``.
    """
    match node:
        case VariableReference(name=name):
            return f"${name}"
        case Literal(value=str() as value):
            escaped = value.replace('\\', '\\\\').replace('"', '\\"')
            return f'"{escaped}"'
        case Literal(value=value):
            return str(value)
        case BinaryExpression(left=left, operator=op, right=right):
            return f"({to_source(left)} {op.value} {to_source(right)})"
        case AssignmentStatement(name=name, value=value):
            return f"${name} = {to_source(value)}"
        case PrintStatement(expressions=expressions):
            return "PRINT " + ", ".join(to_source(expr) for expr in expressions)
        case UnsupportedStatement(directive=directive):
            return directive
        case _:
            raise TypeError(f"Not an AST node: {node!r}")
