"""Source text coordinates."""

from sexpy.text.text import (
    EMPTY_RANGE,
    ZERO,
    LineIndex,
    TextRange,
    TextSize,
)

__all__ = [
    "EMPTY_RANGE",
    "ZERO",
    "LineIndex",
    "TextRange",
    "TextSize",
]
