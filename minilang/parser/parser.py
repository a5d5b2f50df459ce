"""
Main parser entry point for minilang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`minilang.parser.expressions` and `minilang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from minilang.exceptions import ParserException
from minilang.lexer import Token

from . import expressions as _expr
from . import statements as _stmt


# Literal text of fixed tokens, used in error messages
TOKEN_LITERALS = {
    'EQUAL': '=',
    'COMMA': ',',
    'PLUS': '+',
    'MINUS': '-',
    'MULTIPLY': '*',
    'DIVISION': '/',
    'PRINT': 'PRINT',
}


class Parser:
    """minilang parser."""

    def __init__(self, tokens: list, file: str = "<stdin>"):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances, as produced by the lexer.
            file (str): The name of the script.
        """
        # The lexer never emits EOF; the sentinel saves a bounds check on every peek.
        self.tokens = list(tokens) + [Token('EOF', None, None)]
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file

    @staticmethod
    def describe(tok: Token) -> str:
        """
        Describe a token for an error message.
        """
        if tok.type == 'EOF':
            return "end of input"
        if tok.type == 'EOL':
            return f"end of statement at index {tok.position}"
        return f"'{tok.value}' ({tok.type}) at index {tok.position}"

    def error(self, message: str, tok: Token = None) -> ParserException:
        """
        Build a parser error located at ``tok`` (the current token by default).
        """
        tok = tok or self.curr_token
        return ParserException(message, tok.position, at_end=tok.type == 'EOF')

    def eat(self, token_type: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParserException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            expected = TOKEN_LITERALS.get(token_type, token_type)
            raise self.error(f"expected '{expected}' but got {self.describe(tok)}")
        self.position += 1
        self.curr_token = self.tokens[self.position]
        return tok


    # Expression wrappers
    def atom(self):
        """
        Parse an atom: a variable reference or a literal.
        """
        return _expr.parse_atom(self)

    def expr(self, min_precedence: int = 0):
        """
        Parse an expression whose operators bind tighter than ``min_precedence``.
        """
        return _expr.parse_expression(self, min_precedence)

    def expr_list(self) -> tuple:
        """
        Parse a comma-separated list of expressions.
        """
        return _expr.parse_expression_list(self)


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_assignment(self):
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment(self)

    def parse_print(self):
        """
        Parse a 'PRINT' statement.
        """
        return _stmt.parse_print(self)

    def parse_unsupported(self):
        """
        Parse an unsupported '@directive'.
        """
        return _stmt.parse_unsupported(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token.type != 'EOF':
            if self.curr_token.type == 'EOL':
                self.eat('EOL')
                continue
            statements.append(self.statement())
        return statements
