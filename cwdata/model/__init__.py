"""Mutable document tree for parsed data files."""

from cwdata.model.model import (
    CwArray,
    CwEntry,
    CwString,
    CwTable,
    CwValue,
    as_array,
    as_string,
    as_table,
    from_color,
    from_strings,
    to_value,
)

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
