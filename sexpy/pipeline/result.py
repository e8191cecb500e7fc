"""Parse result carrier for text-level parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sexpy.diagnostics import errors_only, has_errors
from sexpy.errors import LexError, ParseError
from sexpy.options import ParserOptions
from sexpy.text import LineIndex

if TYPE_CHECKING:
    from sexpy.ast import TreeElement
    from sexpy.diagnostics import Diagnostic
    from sexpy.lexer import Token
    from sexpy.parser import BracketTree


@dataclass(slots=True)
class SexpParseResult:
    """Everything produced by one parse of `source_text`."""

    source_text: str
    tokens: list[Token]
    tree: BracketTree | None
    root: TreeElement | None
    lexer_diagnostics: list[Diagnostic]
    parser_diagnostics: list[Diagnostic]
    options: ParserOptions
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)
    _formatted: str | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [*self.lexer_diagnostics, *self.parser_diagnostics]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            self._line_index = LineIndex(self.source_text)
        return self._line_index

    def formatted(self) -> str | None:
        """Canonical text of `root`, or `None` without a root."""
        if self.root is None:
            return None
        if self._formatted is None:
            from sexpy.format import format_tree

            self._formatted = format_tree(self.root, max_integer=self.options.max_integer)
        return self._formatted

    def rendered_diagnostics(self) -> list[str]:
        index = self.line_index()
        return [diagnostic.render(index) for diagnostic in self.diagnostics]

    def raise_for_errors(self) -> None:
        """Raise `LexError` or `ParseError` if any error was reported."""
        if errors_only(self.lexer_diagnostics):
            raise LexError(self.diagnostics, source_text=self.source_text)
        if errors_only(self.parser_diagnostics):
            raise ParseError(self.diagnostics, source_text=self.source_text)
