"""Text-level parse pipeline."""

from sexpy.pipeline.entrypoints import parse_source, parse_text
from sexpy.pipeline.result import SexpParseResult

__all__ = [
    "SexpParseResult",
    "parse_source",
    "parse_text",
]
