"""Text offsets and ranges."""

from cwdata.text.text import LineIndex, TextRange, TextSize

__all__ = [
    "LineIndex",
    "TextRange",
    "TextSize",
]
