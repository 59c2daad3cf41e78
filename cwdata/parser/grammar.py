"""Grammar routines for the table/value language.

Alternatives are tried in a fixed order at every choice point and the first
one that matches wins:

- value: word, then quoted string, then `{ table }`
- entry: `word = value`, then a keyless value
"""

from cwdata.diagnostics import (
    PARSER_EXPECTED_CLOSING_BRACE,
    PARSER_EXPECTED_VALUE,
    PARSER_UNEXPECTED_CONTENT,
)
from cwdata.model import CwArray, CwEntry, CwString, CwTable, CwValue
from cwdata.parser.parser import Parser


def parse_source_file(parser: Parser) -> CwTable:
    """Apply the table rule to the whole input. Leftover content is a failure."""
    entries = parse_table(parser)
    if not parser.scanner.is_eof:
        parser.error(
            PARSER_UNEXPECTED_CONTENT,
            message=f"Unexpected {parser.scanner.current_char()!r} after the last entry",
        )
    return CwTable(entries)


def parse_table(parser: Parser) -> list[CwEntry]:
    parser.scanner.skip_separators()

    entries: list[CwEntry] = []
    while True:
        entry = parse_entry(parser)
        if entry is None:
            return entries
        entries.append(entry)


def parse_entry(parser: Parser) -> CwEntry | None:
    entry = parse_key_value(parser)
    if entry is None:
        entry = parse_keyless_value(parser)
    if entry is not None:
        parser.scanner.skip_separators()
    return entry


def parse_key_value(parser: Parser) -> CwEntry | None:
    scanner = parser.scanner
    checkpoint = parser.checkpoint()

    key = scanner.lex_word()
    if key is None:
        return None

    scanner.skip_separators()
    if not scanner.eat("="):
        parser.rewind(checkpoint)
        return None

    scanner.skip_separators()
    value = parse_value(parser)
    if value is None:
        # Backtracking to a keyless value would strand the `=`, so this is final.
        parser.error(PARSER_EXPECTED_VALUE)
    return CwEntry(key, value)


def parse_keyless_value(parser: Parser) -> CwEntry | None:
    value = parse_value(parser)
    if value is None:
        return None
    return CwEntry("", value)


def parse_value(parser: Parser) -> CwValue | None:
    scanner = parser.scanner

    word = scanner.lex_word()
    if word is not None:
        return CwString(word)

    text = scanner.lex_string_literal()
    if text is not None:
        return CwString(text)
    parser.check_scanner()

    if scanner.at("{"):
        return parse_group(parser)

    return None


def parse_group(parser: Parser) -> CwValue:
    scanner = parser.scanner
    scanner.eat("{")

    with parser.nested():
        entries = parse_table(parser)

    if not scanner.eat("}"):
        parser.error(PARSER_EXPECTED_CLOSING_BRACE)

    return devolve(entries)


def devolve(entries: list[CwEntry]) -> CwValue:
    """Classify a closed group: all keyless (including none at all) -> array, else table."""
    if all(entry.key == "" for entry in entries):
        return CwArray([entry.value for entry in entries])
    return CwTable(entries)
