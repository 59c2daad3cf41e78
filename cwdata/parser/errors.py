"""The terminal parse error."""

from cwdata.diagnostics import Diagnostic


class ParseFailure(ValueError):
    """Input did not match the grammar. No partial tree is produced."""

    def __init__(self, diagnostic: Diagnostic, *, line: int, column: int) -> None:
        super().__init__(f"{line}:{column}: {diagnostic.message}")
        self.diagnostic = diagnostic
        self.line = line
        self.column = column

    @property
    def code(self) -> str:
        return self.diagnostic.code
