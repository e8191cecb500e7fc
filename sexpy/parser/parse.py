"""Token-level parse entrypoints: group, then classify."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sexpy.ast import TreeElement
from sexpy.diagnostics import Diagnostic, collect_diagnostics, has_errors
from sexpy.errors import ParseError
from sexpy.lexer.tokens import Token
from sexpy.options import ParseMode, ParserOptions, resolve_options
from sexpy.parser.classify import TreeClassifier
from sexpy.parser.grouper import BracketTree, Grouper


@dataclass(frozen=True, slots=True)
class ParsedTree:
    tree: BracketTree | None
    root: TreeElement | None
    diagnostics: list[Diagnostic]


def parse_tokens(tokens: Sequence[Token], options: ParserOptions | None = None) -> ParsedTree:
    """Group and classify `tokens` without raising."""
    resolved_options = options if options is not None else ParserOptions()

    grouper = Grouper(tokens, resolved_options)
    tree = grouper.root()

    classifier = TreeClassifier(resolved_options)
    root = classifier.classify(tree) if tree is not None else None

    return ParsedTree(
        tree=tree,
        root=root,
        diagnostics=collect_diagnostics(grouper.diagnostics, classifier.diagnostics),
    )


def parse(
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> TreeElement | None:
    """Parse tokens into an AST root.

    Returns `None` for an empty token list, and in permissive mode for input
    that degrades to no node. Raises `ParseError` when an error was reported.
    """
    parsed = parse_tokens(tokens, resolve_options(options, mode))
    if has_errors(parsed.diagnostics):
        raise ParseError(parsed.diagnostics)
    return parsed.root
