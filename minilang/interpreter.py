"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser.

1. Execution Model
Statements are executed one at a time, in source order, via `execute()`;
expressions are evaluated recursively via `eval_expr()`. `interpret()` runs a
whole statement list and stops at the first error.

2. Environment
The interpreter owns a single dictionary `vars`, the variable store. It starts
empty when the interpreter is created and is only written by assignments.
Reassigning a variable replaces its value.

3. Expression Evaluation
Literals evaluate to themselves and variable references to their stored value.
Binary expressions evaluate the left operand before the right one and require
both to be numbers; `/` is real division.

4. Output
Each PRINT statement writes one line: its values, stringified and joined by a
single space. Integral numbers print without a fractional part.

5. Error Handling
Undefined variables, non-numeric operands, division by zero and unsupported
directives are surfaced as typed exceptions carrying the script name.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from minilang.exceptions import (
    DivisionByZeroException,
    NumericOverflowException,
    OperandTypeException,
    UndefinedVariableException,
    UnsupportedStatementException,
)
from minilang.nodes import (
    AssignmentStatement,
    BinaryExpression,
    Literal,
    PrintStatement,
    UnsupportedStatement,
    VariableReference,
    to_source,
)
from minilang.operations import Op


def format_value(value) -> str:
    """
    Stringify a runtime value for output.
    """
    # larger integral floats keep exponent notation, e.g. 1e+300
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Interpreter:
    """
    Tree-walk interpreter for minilang.
    """
    def __init__(self, file: str = "<stdin>"):
        """
        Initialize the interpreter with an empty variable store.
        """
        self.vars = {}
        self.file = file

    def get_variable(self, name: str):
        """
        Return the current value of a variable.

        Raises:
            UndefinedVariableException: If the variable was never assigned.
        """
        if name not in self.vars:
            raise UndefinedVariableException(name, self.file)
        return self.vars[name]

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node: A ``VariableReference``, ``Literal`` or ``BinaryExpression``.

        Returns:
            str | int | float: The evaluated result of the expression.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            OperandTypeException: If an arithmetic operand is not a number.
            DivisionByZeroException: If the right operand of '/' is zero.
        """
        match node:
            case Literal(value=value):
                return value

            case VariableReference(name=name):
                return self.get_variable(name)

            case BinaryExpression(left=left, operator=op, right=right):
                lhs = self.eval_expr(left)
                rhs = self.eval_expr(right)
                if not (is_number(lhs) and is_number(rhs)):
                    raise OperandTypeException(lhs, rhs, to_source(node), self.file)
                match op:
                    case Op.ADD:
                        return lhs + rhs
                    case Op.SUB:
                        return lhs - rhs
                    case Op.MUL:
                        return lhs * rhs
                    case Op.DIV:
                        if rhs == 0:
                            raise DivisionByZeroException(to_source(node), self.file)
                        try:
                            return lhs / rhs
                        except OverflowError:
                            raise NumericOverflowException(to_source(node), self.file) from None

        raise TypeError(f"Cannot evaluate {node!r}")

    def execute(self, statement) -> None:
        """
        Execute a single statement.

        Raises:
            UnsupportedStatementException: For '@directive' statements.
        """
        match statement:
            case AssignmentStatement(name=name, value=value):
                self.vars[name] = self.eval_expr(value)

            case PrintStatement(expressions=expressions):
                values = [self.eval_expr(expr) for expr in expressions]
                print(" ".join(format_value(v) for v in values))

            case UnsupportedStatement(directive=directive):
                raise UnsupportedStatementException(directive, self.file)

            case _:
                raise TypeError(f"Cannot execute {statement!r}")

    def interpret(self, statements) -> None:
        """
        Execute statements in order, stopping at the first error.
        """
        for statement in statements:
            self.execute(statement)
