"""Serializer."""

from cwdata.format.options import QuoteStyle, SerializeOptions
from cwdata.format.quoting import escape_if_needed, escape_str, needs_quotes
from cwdata.format.serializer import serialize

__all__ = [
    "QuoteStyle",
    "SerializeOptions",
    "escape_if_needed",
    "escape_str",
    "needs_quotes",
    "serialize",
]
