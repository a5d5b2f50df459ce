"""
minilang language server.

This server provides basic language features for minilang source files using
`pygls`. It reuses the minilang lexer and parser to report diagnostics and to
build a per-document index of variable assignments supporting definition
lookup, hover information and document symbols. Programs are never executed.


File: server.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from minilang.exceptions import LexerException, ParserException
from minilang.lexer import tokenize
from minilang.nodes import AssignmentStatement, to_source
from minilang.parser import Parser

DIAGNOSTIC_SOURCE = "minilang"


@dataclass
class MiniSymbol:
    """Represents a variable assignment in a minilang file."""

    name: str
    uri: str
    line: int
    character: int
    detail: str

    @property
    def range(self) -> Range:
        # covers the '$' sigil as well as the name
        start = Position(self.line, self.character)
        end = Position(self.line, self.character + len(self.name) + 1)
        return Range(start, end)


def offset_to_position(text: str, offset: Optional[int]) -> Position:
    """Convert a character offset into an LSP position; ``None`` is the end of ``text``."""
    if offset is None or offset > len(text):
        offset = len(text)
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start)


class MiniLanguageServer(LanguageServer):
    """Language server for minilang source files."""

    def __init__(self) -> None:
        super().__init__("minilang-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[MiniSymbol]] = {}
        self.diagnostics_by_uri: Dict[str, List[Diagnostic]] = {}

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Lex and parse ``text``, refresh the index for ``uri`` and return its diagnostics.

        A document that fails to lex or parse keeps the symbols of its last
        good version.
        """
        diagnostics: List[Diagnostic] = []
        try:
            tokens = tokenize(text)
            ast = Parser(tokens, uri).parse()
        except (LexerException, ParserException) as e:
            position = offset_to_position(text, e.position)
            diagnostics.append(
                Diagnostic(
                    range=Range(position, position),
                    message=e.detail,
                    severity=DiagnosticSeverity.Error,
                    source=DIAGNOSTIC_SOURCE,
                )
            )
        else:
            self.symbols_by_uri[uri] = self._collect_symbols(uri, text, tokens, ast)
            for tok in tokens:
                if tok.type != "UNSUPPORTED":
                    continue
                start = offset_to_position(text, tok.position)
                end = offset_to_position(text, tok.position + len(tok.value))
                diagnostics.append(
                    Diagnostic(
                        range=Range(start, end),
                        message=f"unsupported directive '{tok.value}' will fail at runtime",
                        severity=DiagnosticSeverity.Warning,
                        source=DIAGNOSTIC_SOURCE,
                    )
                )
        self.diagnostics_by_uri[uri] = diagnostics
        return diagnostics

    @staticmethod
    def _collect_symbols(uri: str, text: str, tokens: list, ast: list) -> List[MiniSymbol]:
        """Pair each assignment in ``ast`` with its target token."""
        # In a well-formed program only assignment targets are followed by '='
        targets = [
            tok for tok, nxt in zip(tokens, tokens[1:])
            if tok.type == "VARIABLE" and nxt.type == "EQUAL"
        ]
        assignments = [node for node in ast if isinstance(node, AssignmentStatement)]
        symbols: List[MiniSymbol] = []
        for tok, node in zip(targets, assignments):
            pos = offset_to_position(text, tok.position)
            symbols.append(
                MiniSymbol(node.name, uri, pos.line, pos.character, to_source(node))
            )
        return symbols

    def lookup(self, uri: str, name: str) -> List[MiniSymbol]:
        """Return the assignments of ``name`` in ``uri``, in source order."""
        name = name.lstrip("$")
        return [sym for sym in self.symbols_by_uri.get(uri, []) if sym.name == name]


lang_server = MiniLanguageServer()


def _refresh(ls: MiniLanguageServer, uri: str, text: str) -> None:
    diagnostics = ls.update_index(uri, text)
    ls.publish_diagnostics(uri, diagnostics)


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MiniLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    _refresh(ls, params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MiniLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    _refresh(ls, doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: MiniLanguageServer, params: DefinitionParams):
    """Return the first assignment of the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    matches = ls.lookup(doc.uri, word)
    if not matches:
        return None
    sym = matches[0]
    return Location(uri=sym.uri, range=sym.range)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MiniLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Show the most recent assignment of the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    matches = ls.lookup(doc.uri, word)
    if not matches:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=matches[-1].detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MiniLanguageServer, params: DocumentSymbolParams):
    """Return the assignments of the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    return [
        DocumentSymbol(
            name=sym.name,
            kind=SymbolKind.Variable,
            range=sym.range,
            selection_range=sym.range,
            detail=sym.detail,
        )
        for sym in symbols
    ]


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
