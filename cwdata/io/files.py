"""Whole-file reads and writes for data files."""

from __future__ import annotations

import logging
from pathlib import Path

from cwdata.format import SerializeOptions, serialize
from cwdata.model import CwTable
from cwdata.parser import ParseFailure, ParserOptions, parse

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def read_text(path: str | Path) -> str:
    """Read a UTF-8 file, dropping one leading byte-order mark if present."""
    decoded = Path(path).read_bytes().decode("utf-8")
    had_bom = decoded.startswith(BOM)
    text = decoded[1:] if had_bom else decoded
    logger.debug("Read %s (%d chars, bom=%s)", path, len(text), had_bom)
    return text


def write_text(path: str | Path, text: str, add_bom: bool = False) -> None:
    """Create or truncate `path` and write `text` verbatim, optionally after a BOM."""
    with Path(path).open("w", encoding="utf-8", newline="") as handle:
        if add_bom:
            handle.write(BOM)
        handle.write(text)
    logger.debug("Wrote %s (%d chars, bom=%s)", path, len(text), add_bom)


def load_table(path: str | Path, options: ParserOptions | None = None) -> CwTable:
    text = read_text(path)
    try:
        return parse(text, options)
    except ParseFailure as failure:
        logger.warning("Failed to parse %s at %s", path, failure)
        raise


def save_table(
    path: str | Path,
    table: CwTable,
    *,
    add_bom: bool = False,
    options: SerializeOptions | None = None,
) -> str:
    """Serialize `table` to `path`. Returns the text written."""
    text = serialize(table, options)
    write_text(path, text, add_bom)
    return text
