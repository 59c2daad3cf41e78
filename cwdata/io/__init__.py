"""File layer."""

from cwdata.io.files import BOM, load_table, read_text, save_table, write_text

__all__ = [
    "BOM",
    "load_table",
    "read_text",
    "save_table",
    "write_text",
]
