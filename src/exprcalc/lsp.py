"""Minimal LSP server for exprcalc: diagnostics only."""

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
from pygls.workspace import TextDocument

from exprcalc import __version__
from exprcalc.errors import CalcError, EvalError
from exprcalc.parser import parse

server = LanguageServer(
    "exprcalc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _diagnostic(exc: CalcError, doc: TextDocument) -> Diagnostic:
    """Convert an evaluation error into a one-character diagnostic."""
    line = exc.line - 1
    col = exc.column - 1
    # Columns are code points; the client counts in its negotiated encoding
    client_range = doc.position_codec.range_to_client_units(
        doc.lines,
        Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + 1),
        ),
    )
    # Division by zero is a warning; lexical and syntax errors are errors
    if isinstance(exc, EvalError):
        severity = DiagnosticSeverity.Warning
    else:
        severity = DiagnosticSeverity.Error
    return Diagnostic(
        range=client_range,
        message=exc.message,
        severity=severity,
        source="exprcalc",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Evaluate the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        parse(doc.source)
    except CalcError as exc:
        diagnostics.append(_diagnostic(exc, doc))

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
