"""Lexer for minilang.

This is a rule-table lexer that performs single-pass tokenization of source
code into a flat list of tokens.

1. Rule Table
Lexical rules are data: an ordered list of ``LexerRule`` entries, each a token
type, an anchored regular expression and a few flags. The table is ordered
most-specific first and the first rule matching at the current position wins.

2. Decoding
Rules that need to post-process their match (stripping the ``$`` from a
variable, unescaping a string, parsing an integer) do so through the rule's
``group`` and ``action`` rather than inline branching.

3. Separators and Comments
Newlines and semicolons are interchangeable statement separators and both
produce an ``EOL`` token. Spaces and tabs are skipped. A ``%`` starts a
comment running to the end of the line; the newline that ends it is consumed
as well so a comment line leaves the separator count unchanged.

4. Errors
A position where no rule matches raises ``LexerException`` naming the
character and its zero-based offset. A decode action that rejects its match
(an integer literal past the interpreter's digit limit) raises it as well.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from minilang.exceptions import LexerException


class Token:
    """
    Represents a lexical token with a type and value.
    """
    __slots__ = ('type', 'value', 'position')

    def __init__(self, type_, value, position=None):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            position (int): Offset of the token's first character in the source.
        """
        self.type = type_
        self.value = value
        self.position = position

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value) == (other.type, other.value)

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, position={self.position})"


@dataclass(frozen=True)
class LexerRule:
    """
    A single lexical rule.

    Attributes:
        type (str): Token type emitted on a match.
        pattern (re.Pattern): Pattern matched at the current position.
        skip (bool): Match is consumed without emitting a token.
        skip_next (bool): Also consume the character following the match.
        group (int): Capture group used as the token value (0 = whole match).
        action (Callable): Optional decoder applied to the token value.
    """
    type: str
    pattern: re.Pattern
    skip: bool = False
    skip_next: bool = False
    group: int = 0
    action: Optional[Callable[[str], object]] = None


def _unescape(text: str) -> str:
    """Drop each escaping backslash, keeping the character after it."""
    return re.sub(r'\\(.)', r'\1', text, flags=re.DOTALL)


LEXER_RULES: list[LexerRule] = [
    # Separators and trivia
    LexerRule('EOL',         re.compile(r'[\n;]')),
    LexerRule('WHITESPACE',  re.compile(r'[ \t\r]+'), skip=True),
    LexerRule('COMMENT',     re.compile(r'%[^\n]*'), skip=True, skip_next=True),

    # Directives
    LexerRule('UNSUPPORTED', re.compile(r'@\w+')),

    # Punctuation and operators
    LexerRule('EQUAL',       re.compile(r'=')),
    LexerRule('COMMA',       re.compile(r',')),
    LexerRule('PLUS',        re.compile(r'\+')),
    LexerRule('MINUS',       re.compile(r'-')),
    LexerRule('MULTIPLY',    re.compile(r'\*')),
    LexerRule('DIVISION',    re.compile(r'/')),

    # Variables
    LexerRule('VARIABLE',    re.compile(r'\$([A-Za-z_]+)'), group=1),

    # Literals
    LexerRule('STRING',      re.compile(r'"((?:[^"\\]|\\.)*)"', re.DOTALL),
              group=1, action=_unescape),
    LexerRule('INTEGER',     re.compile(r'[0-9]+'), action=int),

    # Keywords
    LexerRule('PRINT',       re.compile(r'PRINT')),
]


def tokenize(code: str, rules: list[LexerRule] = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        rules (list[LexerRule]): Rule table to scan with, ``LEXER_RULES`` by default.

    Returns:
        list[Token]: A list of Token instances.

    Raises:
        LexerException: If no rule matches at some position, or a rule cannot decode its match.
    """
    if rules is None:
        rules = LEXER_RULES

    tokens = []
    position = 0

    while position < len(code):
        for rule in rules:
            match_obj = rule.pattern.match(code, position)
            if match_obj is None:
                continue

            if not rule.skip:
                value = match_obj.group(rule.group)
                if rule.action is not None:
                    try:
                        value = rule.action(value)
                    except ValueError as e:
                        # int() refuses literals past the str-conversion digit limit
                        raise LexerException(
                            f"cannot decode {rule.type} literal at index {position}: {e}",
                            position,
                        ) from None
                tokens.append(Token(rule.type, value, position))

            position = match_obj.end()
            if rule.skip_next:
                position += 1
            break
        else:
            char = code[position]
            if char == '"':
                raise LexerException(
                    f"unterminated string starting at index {position}", position
                )
            raise LexerException(
                f"unexpected symbol '{char}' at index {position}", position
            )

    return tokens
