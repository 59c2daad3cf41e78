"""Character-level scanner for the lexical rules of the format."""

from dataclasses import dataclass
from typing import Final

import regex

from cwdata.diagnostics import (
    LEXER_INVALID_ESCAPE,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    DiagnosticSpec,
)
from cwdata.text import TextRange, TextSize

ESCAPES: Final[dict[str, str]] = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Letters are the Unicode Alphabetic property, which includes the vowel signs
# of Indic and Thai scripts. Whitespace is White_Space, which excludes the
# C0 separators U+001C..U+001F.
_WORD_RE: Final = regex.compile(r"[\p{Alphabetic}\p{N}_.\-]+")
_SEPARATORS_RE: Final = regex.compile(r"(?:\p{White_Space}|#[^\n]*)*")
_STRING_RUN_RE: Final = regex.compile(r'[^"\\]+')


def is_word(text: str) -> bool:
    """True when `text` would scan back as a single bare word."""
    return _WORD_RE.fullmatch(text) is not None


@dataclass(frozen=True, slots=True)
class ScannerCheckpoint:
    position: int
    diagnostics_position: int


class Scanner:
    """Cursor over the source text.

    Words and quoted strings are scanned on demand by the grammar, so the
    scanner never tokenizes ahead of the parser. Failures inside a quoted
    string are recorded as diagnostics and reported by the parser.
    """

    def __init__(self, source: str, *, strict_escapes: bool = False) -> None:
        self._source = source
        self._position = 0
        self._strict_escapes = strict_escapes
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> TextSize:
        return TextSize.from_int(self._position)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def checkpoint(self) -> ScannerCheckpoint:
        return ScannerCheckpoint(
            position=self._position,
            diagnostics_position=len(self._diagnostics),
        )

    def rewind(self, checkpoint: ScannerCheckpoint) -> None:
        self._position = checkpoint.position
        del self._diagnostics[checkpoint.diagnostics_position :]

    def current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def at(self, ch: str) -> bool:
        return not self.is_eof and self._source[self._position] == ch

    def eat(self, ch: str) -> bool:
        if self.at(ch):
            self._position += 1
            return True
        return False

    def skip_separators(self) -> None:
        """Skip any run of whitespace, newlines and `#` comments."""
        match = _SEPARATORS_RE.match(self._source, self._position)
        if match is not None:
            self._position = match.end()

    def lex_word(self) -> str | None:
        match = _WORD_RE.match(self._source, self._position)
        if match is None:
            return None
        self._position = match.end()
        return match.group()

    def lex_string_literal(self) -> str | None:
        """Scan a `"`-delimited string and return its unescaped content.

        Returns None without consuming anything when not positioned at a quote.
        Returns None and records a diagnostic when the literal is malformed.
        """
        if not self.at('"'):
            return None

        start = self._position
        self._position += 1
        chunks: list[str] = []

        while not self.is_eof:
            run = _STRING_RUN_RE.match(self._source, self._position)
            if run is not None:
                chunks.append(run.group())
                self._position = run.end()
                continue

            ch = self._source[self._position]
            if ch == '"':
                self._position += 1
                return "".join(chunks)

            # Backslash: exactly one further character is consumed.
            self._position += 1
            if self.is_eof:
                break
            escaped = self._source[self._position]
            self._position += 1
            if escaped in ESCAPES:
                chunks.append(ESCAPES[escaped])
            elif self._strict_escapes:
                self._report(LEXER_INVALID_ESCAPE, self._position - 2)
                return None
            else:
                chunks.append(escaped)

        self._report(LEXER_UNTERMINATED_STRING, start)
        return None

    def _report(self, spec: DiagnosticSpec, start: int) -> None:
        self._diagnostics.append(
            Diagnostic.from_spec(
                spec,
                TextRange.new(TextSize.from_int(start), TextSize.from_int(self._position)),
            )
        )
