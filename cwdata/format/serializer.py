"""Canonical text output for document trees."""

from __future__ import annotations

from cwdata.format.options import SerializeOptions
from cwdata.format.quoting import escape_if_needed
from cwdata.model import CwArray, CwEntry, CwString, CwTable, CwValue


def serialize(table: CwTable, options: SerializeOptions | None = None) -> str:
    """Render `table` as text that parses back to the same entries.

    One value per line, no indentation, `key = value` for keyed entries and the
    bare value for keyless ones. Comments and original layout are not kept.

    Nesting is walked with an explicit stack, so trees built through
    `set`/`add` serialize at any depth.
    """
    style = (options or SerializeOptions()).quote_style
    out: list[str] = []
    # Pending work, popped from the end: literal text, entries or values.
    stack: list[str | CwEntry | CwValue] = list(reversed(table.entries))

    while stack:
        item = stack.pop()
        match item:
            case str():
                out.append(item)
            case CwEntry(key=key, value=value):
                if key != "":
                    out.append(escape_if_needed(key, style))
                    out.append(" = ")
                stack.append(value)
            case CwString(text=text):
                out.append(escape_if_needed(text, style))
                out.append("\n")
            case CwTable(entries=entries):
                out.append("{\n")
                stack.append("}\n")
                stack.extend(reversed(entries))
            case CwArray(items=items):
                out.append("{\n")
                stack.append("}\n")
                stack.extend(reversed(items))

    return "".join(out)
