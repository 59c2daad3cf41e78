"""Parse carrier for callers that branch on failure instead of catching it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from cwdata.diagnostics import Diagnostic, format_diagnostic, has_errors
from cwdata.model import CwTable
from cwdata.parser.errors import ParseFailure
from cwdata.parser.options import ParserOptions


@dataclass(slots=True)
class CwParseResult:
    """Outcome of one parse: either a table or exactly one failure."""

    source_text: str
    options: ParserOptions
    table: CwTable | None = None
    failure: ParseFailure | None = None

    def __post_init__(self):
        if (self.table is None) == (self.failure is None):
            raise ValueError("CwParseResult needs exactly one of table or failure")

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.failure is None:
            return []
        return [self.failure.diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> CwTable:
        if self.failure is not None:
            raise self.failure
        return cast(CwTable, self.table)

    def render_diagnostics(self) -> list[str]:
        return [format_diagnostic(self.source_text, diagnostic) for diagnostic in self.diagnostics]
