"""
Tests for statement parsing and precedence climbing.
"""
import pytest

from minilang.exceptions import ParserException
from minilang.lexer import Token
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
from minilang.parser import Parser
from minilang.tests.utils import parse_source


@pytest.mark.parametrize("literal, value", [
    ('"Hello World!"', "Hello World!"),
    ('42', 42),
    ('0', 0),
    ('""', ""),
])
def test_assignment_of_literal(literal, value):
    assert parse_source(f"$name = {literal}") == [
        AssignmentStatement("name", Literal(value)),
    ]


def test_print_expression_list():
    ast = parse_source('PRINT $a, "b", 3')
    assert ast == [
        PrintStatement((VariableReference("a"), Literal("b"), Literal(3))),
    ]


def test_precedence_climbing():
    (stmt,) = parse_source("PRINT 2 + 3 * 4 - 1")
    (expr,) = stmt.expressions
    assert expr == BinaryExpression(
        BinaryExpression(
            Literal(2),
            Op.ADD,
            BinaryExpression(Literal(3), Op.MUL, Literal(4)),
        ),
        Op.SUB,
        Literal(1),
    )
    assert to_source(expr) == "((2 + (3 * 4)) - 1)"


@pytest.mark.parametrize("source, expected", [
    ("2 + 3 - 1", "((2 + 3) - 1)"),
    ("8 / 4 / 2", "((8 / 4) / 2)"),
    ("2 * 3 + 4", "((2 * 3) + 4)"),
    ("2 + 3 * 4 / 6 - 1", "((2 + ((3 * 4) / 6)) - 1)"),
    ("$a - $b * $c", "($a - ($b * $c))"),
])
def test_grouping(source, expected):
    (stmt,) = parse_source(f"$x = {source}")
    assert to_source(stmt.value) == expected


def test_separators_are_collapsible():
    ast = parse_source("\n\n;;$a = 1;;\n\nPRINT $a;\n")
    assert ast == [
        AssignmentStatement("a", Literal(1)),
        PrintStatement((VariableReference("a"),)),
    ]


def test_statements_without_separator():
    ast = parse_source("$a = 1 % set a\n$b = 2")
    assert [stmt.name for stmt in ast] == ["a", "b"]


def test_unsupported_directive_is_kept():
    ast = parse_source("$a = 1\n@include\nPRINT $a")
    assert ast[1] == UnsupportedStatement("@include")
    assert len(ast) == 3


def test_empty_program():
    assert parse_source("") == []
    assert parse_source("\n;\n% only a comment\n") == []


def test_missing_equal():
    with pytest.raises(ParserException) as excinfo:
        parse_source("$a 1")
    assert str(excinfo.value).startswith("Parser: expected '=' but got '1'")
    assert excinfo.value.position == 3
    assert not excinfo.value.at_end


def test_statement_cannot_start_with_expression():
    with pytest.raises(ParserException, match="unexpected token '1'"):
        parse_source("1 + 2")


def test_expression_cannot_start_with_operator():
    with pytest.raises(ParserException, match="expected an expression"):
        parse_source("PRINT * 2")


def test_print_requires_an_expression():
    with pytest.raises(ParserException, match="end of statement"):
        parse_source("PRINT\n$a = 1")


def test_trailing_comma():
    with pytest.raises(ParserException):
        parse_source("PRINT 1,")


def test_error_at_end_of_input_is_flagged():
    with pytest.raises(ParserException) as excinfo:
        parse_source("$a = 1 +")
    assert excinfo.value.at_end
    assert excinfo.value.position is None
    assert "end of input" in str(excinfo.value)


def test_parser_accepts_hand_built_tokens():
    tokens = [
        Token('VARIABLE', 'a'),
        Token('EQUAL', '='),
        Token('INTEGER', 5),
    ]
    assert Parser(tokens).parse() == [AssignmentStatement("a", Literal(5))]


def test_nodes_are_immutable():
    (stmt,) = parse_source("$a = 1")
    with pytest.raises(AttributeError):
        stmt.name = "b"
