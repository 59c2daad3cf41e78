"""Lexer."""

from cwdata.lexer.scanner import ESCAPES, Scanner, ScannerCheckpoint, is_word

__all__ = [
    "ESCAPES",
    "Scanner",
    "ScannerCheckpoint",
    "is_word",
]
