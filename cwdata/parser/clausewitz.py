"""High-level parse entrypoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cwdata.model import CwTable
from cwdata.parser.errors import ParseFailure
from cwdata.parser.grammar import parse_source_file
from cwdata.parser.options import ParseMode, ParserOptions
from cwdata.parser.parser import Parser

if TYPE_CHECKING:
    from cwdata.pipeline import CwParseResult

logger = logging.getLogger(__name__)


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> CwTable:
    """Parse a whole document into its top-level table.

    Raises ParseFailure on the first position where the grammar cannot continue.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    table = parse_source_file(Parser(text, resolved_options))
    logger.debug("Parsed %d top-level entries from %d characters", len(table), len(text))
    return table


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> CwParseResult:
    from cwdata.pipeline import CwParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    try:
        table = parse(text, resolved_options)
    except ParseFailure as failure:
        return CwParseResult(source_text=text, options=resolved_options, failure=failure)
    return CwParseResult(source_text=text, options=resolved_options, table=table)
