"""Source printer."""

from sexpy.format.printer import format_tree

__all__ = ["format_tree"]
