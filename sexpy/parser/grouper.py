"""Group a flat token list into a bracket tree following parenthesis nesting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sexpy.diagnostics import (
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_TRAILING_TOKENS,
    PARSER_UNMATCHED_OPEN_PARENTHESIS,
    Diagnostic,
)
from sexpy.lexer.tokens import Token
from sexpy.options import ParserOptions
from sexpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single non-delimiting token."""

    token: Token

    @property
    def range(self) -> TextRange:
        return self.token.range


@dataclass(frozen=True, slots=True)
class Group:
    """Children found between a `(` and its `)`; the delimiters are not stored."""

    children: tuple[BracketTree, ...]
    range: TextRange
    closed: bool = True


BracketTree = Leaf | Group


class Grouper:
    """Recursive-descent grouping with one token of lookahead."""

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = tokens
        self._options = options if options is not None else ParserOptions()
        self._position = 0
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._tokens)

    def root(self) -> BracketTree | None:
        """Group the first top-level tree and report anything after it."""
        tree = self.group()
        if not self.is_eof:
            first = self._tokens[self._position]
            last = self._tokens[-1]
            self._diagnostics.append(
                Diagnostic.from_spec(
                    PARSER_TRAILING_TOKENS,
                    first.range.cover(last.range),
                    severity="error" if self._options.reject_trailing_tokens else "warning",
                    message=f"Unexpected input after the top-level expression: {len(self._tokens) - self._position} token(s).",
                )
            )
        return tree

    def group(self) -> BracketTree | None:
        return self._group(depth=0)

    def _group(self, depth: int) -> BracketTree | None:
        token = self._peek()
        if token is None:
            return None

        if not token.is_opening_parenthesis:
            self._bump()
            return Leaf(token)

        if depth >= self._options.max_depth:
            self._skip_group()
            return None

        self._bump()
        children: list[BracketTree] = []
        while True:
            current = self._peek()
            if current is None:
                end = children[-1].range if children else token.range
                self._diagnostics.append(
                    Diagnostic.from_spec(
                        PARSER_UNMATCHED_OPEN_PARENTHESIS,
                        token.range,
                        severity="error" if self._options.reject_unmatched_parentheses else "warning",
                    )
                )
                return Group(tuple(children), token.range.cover(end), closed=False)

            if current.is_closing_parenthesis:
                self._bump()
                return Group(tuple(children), token.range.cover(current.range))

            child = self._group(depth + 1)
            if child is not None:
                children.append(child)

    def _skip_group(self) -> None:
        """Consume one balanced group without building it."""
        opening = self._bump()
        last = opening
        open_count = 1
        while open_count and not self.is_eof:
            last = self._bump()
            if last.is_opening_parenthesis:
                open_count += 1
            elif last.is_closing_parenthesis:
                open_count -= 1

        self._diagnostics.append(
            Diagnostic.from_spec(
                PARSER_MAX_DEPTH_EXCEEDED,
                opening.range.cover(last.range),
                message=f"Expression is nested deeper than {self._options.max_depth} levels.",
            )
        )

    def _peek(self) -> Token | None:
        if self.is_eof:
            return None
        return self._tokens[self._position]

    def _bump(self) -> Token:
        token = self._tokens[self._position]
        self._position += 1
        return token


def group(tokens: Sequence[Token], options: ParserOptions | None = None) -> BracketTree | None:
    """Group the leading tree of `tokens`; `None` for an empty sequence."""
    return Grouper(tokens, options).group()
