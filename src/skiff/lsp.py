"""Minimal LSP server for Skiff — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from skiff import __version__
from skiff.errors import LexError, ParseError
from skiff.parser import parse

server = LanguageServer(
    "skiff-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(range_: Range, message: str) -> Diagnostic:
    return Diagnostic(
        range=range_,
        message=message,
        severity=DiagnosticSeverity.Error,
        source="skiff",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse the document and publish diagnostics for the first failure."""
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri
    diagnostics: list[Diagnostic] = []

    try:
        parse(doc.source, filename)
    except LexError as exc:
        line = exc.position.line - 1
        col = exc.position.column - 1
        diagnostics.append(
            _diagnostic(
                Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                exc.message,
            )
        )
    except ParseError as exc:
        diagnostics.append(
            _diagnostic(
                Range(
                    start=Position(
                        line=exc.span.start.line - 1, character=exc.span.start.column - 1
                    ),
                    end=Position(line=exc.span.end.line - 1, character=exc.span.end.column - 1),
                ),
                exc.message,
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
