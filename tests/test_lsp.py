"""Tests for the LSP server — diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from skiff.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///test.skf") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="skiff", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Lex errors
# ---------------------------------------------------------------------------


class TestLexErrors:
    def test_unrecognized_character(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = @")
        _validate(ls, "file:///test.skf")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "@" in d.message
        assert d.source == "skiff"
        # '@' is at column 9 (1-based) -> character 8 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 8
        assert d.range.end.character == 9

    def test_unterminated_string(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('"open')
        _validate(ls, "file:///test.skf")

        d = published[0].diagnostics[0]
        assert "unterminated" in d.message


# ---------------------------------------------------------------------------
# Parse errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("func f() {\n  1")
        _validate(ls, "file:///test.skf")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert "end of input" in d.message
        assert d.source == "skiff"

    def test_unexpected_token_range(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = ==")
        _validate(ls, "file:///test.skf")

        d = published[0].diagnostics[0]
        assert d.range.start.character == 8
        assert d.range.end.character == 10

    def test_numeric_overflow(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var big = 99999999999")
        _validate(ls, "file:///test.skf")

        d = published[0].diagnostics[0]
        assert "32 bits" in d.message
        assert d.range.start.character == 10


# ---------------------------------------------------------------------------
# Clean document -> empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var x = 1\nfunc add(a, b) { a + b }\n")
        _validate(ls, "file:///test.skf")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# Position conversion (1-based -> 0-based)
# ---------------------------------------------------------------------------


class TestPositionConversion:
    def test_error_on_second_line(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("var ok = 1\n@ oops")
        _validate(ls, "file:///test.skf")

        d = published[0].diagnostics[0]
        assert d.range.start.line == 1
        assert d.range.start.character == 0
