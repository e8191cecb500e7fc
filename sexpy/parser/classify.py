"""Classify a bracket tree into typed AST nodes."""

from __future__ import annotations

from sexpy.ast import CallExpression, Identifier, NumericLiteral, StringLiteral, TreeElement
from sexpy.diagnostics import (
    PARSER_MALFORMED_CALL,
    PARSER_UNEXPECTED_PARENTHESIS,
    Diagnostic,
)
from sexpy.lexer.tokens import Token, TokenKind
from sexpy.options import ParserOptions
from sexpy.parser.grouper import BracketTree, Group, Leaf
from sexpy.text import TextRange


class TreeClassifier:
    """Walks a bracket tree into TreeElement nodes.

    Subtrees that cannot be classified yield `None` and a diagnostic; inside a
    call they are dropped from the argument list.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self._options = options if options is not None else ParserOptions()
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    def classify(self, tree: BracketTree) -> TreeElement | None:
        if isinstance(tree, Leaf):
            return self._classify_token(tree.token)
        return self._classify_group(tree)

    def _classify_token(self, token: Token) -> TreeElement | None:
        match token.kind:
            case TokenKind.NUMBER:
                return NumericLiteral(int(token.value), range=token.range)
            case TokenKind.NAME:
                return Identifier(str(token.value), range=token.range)
            case TokenKind.STRING:
                return StringLiteral(str(token.value), range=token.range)
            case _:
                self._diagnostics.append(
                    Diagnostic.from_spec(
                        PARSER_UNEXPECTED_PARENTHESIS,
                        token.range,
                        severity="error" if self._options.reject_unmatched_parentheses else "warning",
                    )
                )
                return None

    def _classify_group(self, group: Group) -> CallExpression | None:
        if not group.children:
            self._malformed(group.range, "Empty call expression `()`.")
            return None

        head = group.children[0]
        if not (isinstance(head, Leaf) and head.token.kind == TokenKind.NAME):
            self._malformed(head.range, f"Call expression must start with a name, found {_describe(head)}.")
            return None

        arguments: list[TreeElement] = []
        for child in group.children[1:]:
            element = self.classify(child)
            if element is not None:
                arguments.append(element)

        return CallExpression(str(head.token.value), tuple(arguments), range=group.range)

    def _malformed(self, range: TextRange, message: str) -> None:
        self._diagnostics.append(
            Diagnostic.from_spec(
                PARSER_MALFORMED_CALL,
                range,
                severity="error" if self._options.reject_malformed_calls else "warning",
                message=message,
            )
        )


def _describe(tree: BracketTree) -> str:
    if isinstance(tree, Group):
        return "a nested group"
    match tree.token.kind:
        case TokenKind.NUMBER:
            return f"number {tree.token.value}"
        case TokenKind.STRING:
            return f"string {tree.token.value!r}"
        case _:
            return repr(tree.token.value)


def classify(tree: BracketTree | None, options: ParserOptions | None = None) -> TreeElement | None:
    """Classify `tree`; `None` when absent or not classifiable."""
    if tree is None:
        return None
    return TreeClassifier(options).classify(tree)
