"""Document model: the String | Table | Array tree produced by parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cwdata.format.options import SerializeOptions
    from cwdata.parser.options import ParserOptions


@dataclass(frozen=True, slots=True)
class CwString:
    """Scalar leaf. Bare words and quoted strings both land here, unescaped."""

    text: str


@dataclass(slots=True)
class CwArray:
    """Devolved brace group: ordered values with no residual key information."""

    items: list[CwValue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CwValue]:
        return iter(self.items)


@dataclass(slots=True)
class CwEntry:
    """`key = value` pair; an empty key marks a keyless entry."""

    key: str
    value: CwValue

    @property
    def is_keyless(self) -> bool:
        return self.key == ""


@dataclass(slots=True)
class CwTable:
    """Ordered entry sequence. Duplicate keys are allowed and lookups are first-match."""

    entries: list[CwEntry] = field(default_factory=list)

    @staticmethod
    def parse(text: str, options: ParserOptions | None = None) -> CwTable:
        from cwdata.parser import parse

        return parse(text, options)

    def serialize(self, options: SerializeOptions | None = None) -> str:
        from cwdata.format import serialize

        return serialize(self, options)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CwEntry]:
        return iter(self.entries)

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def get(self, key: str) -> CwValue | None:
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return None

    def get_all(self, key: str) -> list[CwValue]:
        return [entry.value for entry in self.entries if entry.key == key]

    def get_string(self, key: str) -> str | None:
        return as_string(self.get(key))

    def get_table(self, key: str) -> CwTable | None:
        return as_table(self.get(key))

    def set(self, key: str, value: CwValue | str) -> None:
        """Overwrite the first entry with `key`, or append one if there is none."""
        resolved = to_value(value)
        for entry in self.entries:
            if entry.key == key:
                entry.value = resolved
                return
        self.entries.append(CwEntry(key, resolved))

    def add(self, key: str, value: CwValue | str) -> None:
        """Append an entry even when `key` is already present."""
        self.entries.append(CwEntry(key, to_value(value)))


type CwValue = CwString | CwTable | CwArray


def to_value(value: CwValue | str) -> CwValue:
    if isinstance(value, str):
        return CwString(value)
    if isinstance(value, (CwString, CwTable, CwArray)):
        return value
    raise TypeError(f"Cannot convert {type(value).__name__} to a document value")


def as_string(value: CwValue | None) -> str | None:
    if isinstance(value, CwString):
        return value.text
    return None


def as_table(value: CwValue | None) -> CwTable | None:
    if isinstance(value, CwTable):
        return value
    return None


def as_array(value: CwValue | None) -> list[CwValue] | None:
    if isinstance(value, CwArray):
        return value.items
    return None


def from_strings(values: Iterable[str]) -> CwArray:
    return CwArray([CwString(value) for value in values])


def from_color(r: int, g: int, b: int) -> CwArray:
    """Build the `{ r g b }` array used by color fields."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"Color component out of range 0..255: {component}")
    return from_strings(str(component) for component in (r, g, b))


__all__ = [
    "CwArray",
    "CwEntry",
    "CwString",
    "CwTable",
    "CwValue",
    "as_array",
    "as_string",
    "as_table",
    "from_color",
    "from_strings",
    "to_value",
]
