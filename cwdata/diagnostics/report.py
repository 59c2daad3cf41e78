"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from cwdata.diagnostics.diagnostic import Diagnostic
from cwdata.text import LineIndex


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(source: str, diagnostic: Diagnostic, *, line_index: LineIndex | None = None) -> str:
    """Render `line:column: CODE message`, followed by the hint when there is one."""
    index = line_index or LineIndex.of(source)
    line, column = index.line_col(diagnostic.range.start)
    rendered = f"{line}:{column}: {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        rendered += f"\n  hint: {diagnostic.hint}"
    return rendered
