"""Serializer configuration."""

from dataclasses import dataclass
from enum import StrEnum


class QuoteStyle(StrEnum):
    """When scalar text gets wrapped in quotes on output.

    MINIMAL quotes only empty text or text containing a space or a backslash,
    and escapes only backslashes. Text holding `{`, `}`, `=` or `"` is emitted
    bare and will not re-parse to the same value.

    SAFE quotes anything that is not a bare word and escapes `"` as well.
    """

    MINIMAL = "minimal"
    SAFE = "safe"


@dataclass(frozen=True, slots=True)
class SerializeOptions:
    quote_style: QuoteStyle = QuoteStyle.MINIMAL
