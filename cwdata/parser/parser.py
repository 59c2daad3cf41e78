"""Recursive-descent parser state."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from cwdata.diagnostics import PARSER_NESTING_TOO_DEEP, Diagnostic, DiagnosticSpec
from cwdata.lexer import Scanner, ScannerCheckpoint
from cwdata.parser.errors import ParseFailure
from cwdata.parser.options import ParserOptions
from cwdata.text import LineIndex, TextRange, TextSize


class Parser:
    """Owns the scanner, the active options and the current nesting depth."""

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._options = options or ParserOptions()
        self._scanner = Scanner(source, strict_escapes=self._options.strict_escapes)
        self._depth = 0

    @property
    def scanner(self) -> Scanner:
        return self._scanner

    @property
    def position(self) -> TextSize:
        return self._scanner.position

    def checkpoint(self) -> ScannerCheckpoint:
        return self._scanner.checkpoint

    def rewind(self, checkpoint: ScannerCheckpoint) -> None:
        self._scanner.rewind(checkpoint)

    @contextmanager
    def nested(self) -> Iterator[None]:
        self._depth += 1
        try:
            max_depth = self._options.max_depth
            if max_depth is not None and self._depth > max_depth:
                self.error(PARSER_NESTING_TOO_DEEP)
            yield
        finally:
            self._depth -= 1

    def error(self, spec: DiagnosticSpec, *, message: str | None = None) -> NoReturn:
        """Fail at the current position."""
        self.fail(Diagnostic.from_spec(spec, TextRange.empty(self.position), message))

    def check_scanner(self) -> None:
        """Raise the first failure the scanner recorded, if any."""
        if self._scanner.diagnostics:
            self.fail(self._scanner.diagnostics[0])

    def fail(self, diagnostic: Diagnostic) -> NoReturn:
        line, column = LineIndex.of(self._scanner.source).line_col(diagnostic.range.start)
        raise ParseFailure(diagnostic, line=line, column=column)
