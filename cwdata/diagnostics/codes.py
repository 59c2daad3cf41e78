"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence in string literal.",
    hint="Valid escapes are \\' \\\" \\\\ \\/ \\b \\f \\n \\r \\t; use lenient mode to pass other characters through.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    hint="A value is a bare word, a quoted string or a `{ ... }` group.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_CLOSING_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CLOSING_BRACE",
    message="Expected `}` to close group",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CONTENT",
    message="Unexpected content after the last entry",
    hint="Remove stray `}` or `=` characters, or quote the value.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Groups are nested too deeply",
    hint="Raise ParserOptions.max_depth or pass max_depth=None.",
    severity="error",
    category="parser",
)
