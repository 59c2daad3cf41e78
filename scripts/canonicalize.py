#!/usr/bin/env python3
"""Parse a data file and print (or write back) its canonical form."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from cwdata.format import QuoteStyle, SerializeOptions
from cwdata.io import load_table, save_table
from cwdata.parser import ParseFailure, ParseMode, ParserOptions


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rewrite a data file in canonical form.")
    parser.add_argument("path", type=Path, help="Data file to read")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the result here instead of printing it (may equal the input path).",
    )
    parser.add_argument("--strict", action="store_true", help="Reject unknown backslash escapes")
    parser.add_argument(
        "--quote-style",
        choices=[style.value for style in QuoteStyle],
        default=QuoteStyle.MINIMAL.value,
        help="Scalar quoting rule (default: minimal)",
    )
    parser.add_argument("--bom", action="store_true", help="Emit a byte-order mark when writing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    mode = ParseMode.STRICT if args.strict else ParseMode.LENIENT
    try:
        table = load_table(args.path, ParserOptions.for_mode(mode))
    except ParseFailure as failure:
        print(f"{args.path}:{failure}")
        return 1

    options = SerializeOptions(quote_style=QuoteStyle(args.quote_style))
    if args.out is None:
        print(table.serialize(options), end="")
        return 0

    save_table(args.out, table, add_bom=args.bom, options=options)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
