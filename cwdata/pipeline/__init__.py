"""Shared parse carriers."""

from cwdata.pipeline.result import CwParseResult

__all__ = ["CwParseResult"]
