"""Traversal helpers over TreeElement nodes."""

from __future__ import annotations

from collections.abc import Iterator

from sexpy.ast.model import CallExpression, TreeElement


def walk(element: TreeElement) -> Iterator[TreeElement]:
    """Yield `element` and all of its descendants in pre-order."""
    stack: list[TreeElement] = [element]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, CallExpression):
            stack.extend(reversed(current.arguments))


def depth(element: TreeElement) -> int:
    """Call nesting depth: 0 for leaves, 1 + deepest argument for calls."""
    if not isinstance(element, CallExpression):
        return 0
    deepest = 0
    for argument in element.arguments:
        deepest = max(deepest, depth(argument))
    return 1 + deepest


def call_names(element: TreeElement) -> list[str]:
    """Names of every call expression in pre-order."""
    return [node.name for node in walk(element) if isinstance(node, CallExpression)]
