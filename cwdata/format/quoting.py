"""Scalar quoting rules."""

from cwdata.format.options import QuoteStyle
from cwdata.lexer import is_word


def escape_str(text: str, *, escape_quotes: bool = False) -> str:
    escaped = text.replace("\\", "\\\\")
    if escape_quotes:
        escaped = escaped.replace('"', '\\"')
    return f'"{escaped}"'


def needs_quotes(text: str, style: QuoteStyle = QuoteStyle.MINIMAL) -> bool:
    if style == QuoteStyle.SAFE:
        return not is_word(text)
    return text == "" or "\\" in text or " " in text


def escape_if_needed(text: str, style: QuoteStyle = QuoteStyle.MINIMAL) -> str:
    if not needs_quotes(text, style):
        return text
    return escape_str(text, escape_quotes=style == QuoteStyle.SAFE)
