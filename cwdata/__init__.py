"""Parser and serializer for Clausewitz-style nested key/value data files."""

from cwdata.format import QuoteStyle, SerializeOptions, serialize
from cwdata.io import load_table, read_text, save_table, write_text
from cwdata.model import (
    CwArray,
    CwEntry,
    CwString,
    CwTable,
    CwValue,
    as_array,
    as_string,
    as_table,
)
from cwdata.parser import ParseFailure, ParseMode, ParserOptions, parse, parse_result

__all__ = [
    "CwArray",
    "CwEntry",
    "CwString",
    "CwTable",
    "CwValue",
    "ParseFailure",
    "ParseMode",
    "ParserOptions",
    "QuoteStyle",
    "SerializeOptions",
    "as_array",
    "as_string",
    "as_table",
    "load_table",
    "parse",
    "parse_result",
    "read_text",
    "save_table",
    "serialize",
    "write_text",
]
