"""Diagnostics."""

from cwdata.diagnostics.codes import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_CLOSING_BRACE,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_CONTENT,
    DiagnosticSpec,
    Severity,
)
from cwdata.diagnostics.diagnostic import Diagnostic
from cwdata.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "LEXER_INVALID_ESCAPE",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_CLOSING_BRACE",
    "PARSER_EXPECTED_VALUE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_CONTENT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
