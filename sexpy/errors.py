"""Exception classes for sexpy.

The lexer and parser never raise for bad input; they record diagnostics.
The raising entrypoints (`tokenize`, `parse`, `SexpParseResult.raise_for_errors`)
wrap error diagnostics in these exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable

from sexpy.diagnostics import Diagnostic, errors_only
from sexpy.text import LineIndex


class SexpyError(Exception):
    """Base exception for all sexpy errors.

    Carries every diagnostic of the failed run; the message describes the
    first error.
    """

    def __init__(self, diagnostics: Iterable[Diagnostic], source_text: str | None = None) -> None:
        self.diagnostics = list(diagnostics)
        self.source_text = source_text

        errors = errors_only(self.diagnostics)
        if not errors:
            super().__init__("unknown error")
            return

        line_index = LineIndex(source_text) if source_text is not None else None
        message = errors[0].render(line_index)
        if len(errors) > 1:
            message += f" (+{len(errors) - 1} more)"
        super().__init__(message)

    @property
    def errors(self) -> list[Diagnostic]:
        return errors_only(self.diagnostics)


class LexError(SexpyError):
    """Source text could not be tokenized."""


class ParseError(SexpyError):
    """Tokens could not be grouped or classified into an AST."""
