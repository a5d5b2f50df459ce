"""
Tests for the language server's indexing and diagnostics.
"""
import pytest
from lsprotocol.types import DiagnosticSeverity, Position

from minilang.server import MiniLanguageServer, offset_to_position

URI = "file:///tmp/test.mini"


@pytest.fixture
def server():
    return MiniLanguageServer()


def test_clean_document_has_no_diagnostics(server):
    source = "$a = 1 + 2\nPRINT $a\n$b = \"x\"; $a = $a * 3\n"
    assert server.update_index(URI, source) == []

    symbols = server.symbols_by_uri[URI]
    assert [(s.name, s.line, s.character) for s in symbols] == [
        ("a", 0, 0),
        ("b", 2, 0),
        ("a", 2, 10),
    ]
    assert symbols[0].detail == "$a = (1 + 2)"
    assert symbols[1].detail == '$b = "x"'


def test_lookup_returns_assignments_in_order(server):
    server.update_index(URI, "$a = 1\n$a = 2\n$b = 3\n")
    matches = server.lookup(URI, "$a")
    assert [m.detail for m in matches] == ["$a = 1", "$a = 2"]
    assert server.lookup(URI, "b")[0].line == 2
    assert server.lookup(URI, "missing") == []
    assert server.lookup("file:///other.mini", "a") == []


def test_symbol_range_covers_sigil(server):
    server.update_index(URI, "  $total = 1")
    (sym,) = server.symbols_by_uri[URI]
    assert sym.range.start == Position(0, 2)
    assert sym.range.end == Position(0, 8)


def test_parser_error_diagnostic(server):
    (diag,) = server.update_index(URI, "$a = 1\n$b 2\n")
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.source == "minilang"
    assert diag.message.startswith("expected '=' but got '2'")
    assert diag.range.start == Position(1, 3)


def test_lexer_error_diagnostic(server):
    (diag,) = server.update_index(URI, "PRINT 1\n  PRINT #\n")
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.message == "unexpected symbol '#' at index 16"
    assert diag.range.start == Position(1, 8)


def test_error_at_end_of_document(server):
    source = "$a = 1 +"
    (diag,) = server.update_index(URI, source)
    assert diag.range.start == Position(0, len(source))


def test_broken_document_keeps_previous_symbols(server):
    server.update_index(URI, "$a = 1\n")
    server.update_index(URI, "$a = \n")
    assert [s.name for s in server.symbols_by_uri[URI]] == ["a"]
    assert len(server.diagnostics_by_uri[URI]) == 1


def test_unsupported_directive_warning(server):
    (diag,) = server.update_index(URI, "$a = 1\n@include\n")
    assert diag.severity == DiagnosticSeverity.Warning
    assert "@include" in diag.message
    assert diag.range.start == Position(1, 0)
    assert diag.range.end == Position(1, 8)


@pytest.mark.parametrize("text, offset, expected", [
    ("abc", 0, (0, 0)),
    ("abc", 2, (0, 2)),
    ("ab\ncd", 3, (1, 0)),
    ("ab\ncd\nef", 7, (2, 1)),
    ("ab\ncd", None, (1, 2)),
    ("ab\n", None, (1, 0)),
])
def test_offset_to_position(text, offset, expected):
    pos = offset_to_position(text, offset)
    assert (pos.line, pos.character) == expected


def test_oversized_integer_literal_diagnostic(server):
    (diag,) = server.update_index(URI, "$a = " + "1" * 5000)
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.message.startswith("cannot decode INTEGER literal at index 5")
    assert diag.range.start == Position(0, 5)
