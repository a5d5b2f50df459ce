"""Errors.

Every stage of the pipeline fails fast by raising one of the exceptions
below. Messages are prefixed with the name of the component that raised them
(``Lexer``, ``Parser`` or ``Interpreter``) so a failure can be traced without
a stack trace.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class MinilangException(Exception):
    """
    Base class for all minilang errors.
    """
    component = "minilang"

    def __init__(self, message):
        self.detail = message
        super().__init__(f"{self.component}: {message}")


class LexerException(MinilangException):
    """
    Error for characters no lexer rule accepts.
    """
    component = "Lexer"

    def __init__(self, message, position=None):
        self.position = position
        super().__init__(message)


class ParserException(MinilangException):
    """
    Error for unexpected or missing tokens.
    """
    component = "Parser"

    def __init__(self, message, position=None, at_end=False):
        self.position = position
        self.at_end = at_end
        super().__init__(message)


class InterpreterException(MinilangException):
    """
    Base class for runtime errors.
    """
    component = "Interpreter"

    def __init__(self, message, file=None):
        self.file = file
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UndefinedVariableException(InterpreterException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None):
        self.varname = varname
        super().__init__(f"variable '{varname}' is not defined", file)


class OperandTypeException(InterpreterException):
    """
    Error for arithmetic on non-numeric operands.
    """
    def __init__(self, lhs, rhs, expr, file=None):
        self.operand_types = (type(lhs).__name__, type(rhs).__name__)
        super().__init__(
            f"operands must be numbers, got {self.operand_types[0]} "
            f"and {self.operand_types[1]} in {expr}",
            file,
        )


class UnsupportedStatementException(InterpreterException):
    """
    Error for directives the language recognises but does not implement.
    """
    def __init__(self, directive, file=None):
        self.directive = directive
        super().__init__(f"unsupported statement '{directive}'", file)


class DivisionByZeroException(InterpreterException):
    """
    Error for division by zero.
    """
    def __init__(self, expr, file=None):
        super().__init__(f"division by zero in {expr}", file)


class NumericOverflowException(InterpreterException):
    """
    Error for results too large to represent as a float.
    """
    def __init__(self, expr, file=None):
        super().__init__(f"numeric overflow in {expr}", file)
