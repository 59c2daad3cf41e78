"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling escape handling and nesting limits."""

    mode: ParseMode = ParseMode.LENIENT
    strict_escapes: bool = False
    max_depth: int | None = 128

    def __post_init__(self):
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, strict_escapes=True)

        return ParserOptions(mode=mode, strict_escapes=False)
