"""Parser for the table/value language (recursive descent over the scanner)."""

from cwdata.parser.clausewitz import parse, parse_result
from cwdata.parser.errors import ParseFailure
from cwdata.parser.grammar import (
    devolve,
    parse_entry,
    parse_group,
    parse_key_value,
    parse_keyless_value,
    parse_source_file,
    parse_table,
    parse_value,
)
from cwdata.parser.options import ParseMode, ParserOptions
from cwdata.parser.parser import Parser

__all__ = [
    "ParseFailure",
    "ParseMode",
    "Parser",
    "ParserOptions",
    "devolve",
    "parse",
    "parse_entry",
    "parse_group",
    "parse_key_value",
    "parse_keyless_value",
    "parse_result",
    "parse_source_file",
    "parse_table",
    "parse_value",
]
