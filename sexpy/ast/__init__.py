"""Typed AST produced by the parser."""

from sexpy.ast.model import (
    CallExpression,
    Empty,
    Identifier,
    NumericLiteral,
    StringLiteral,
    TreeElement,
)
from sexpy.ast.walk import call_names, depth, walk

__all__ = [
    "CallExpression",
    "Empty",
    "Identifier",
    "NumericLiteral",
    "StringLiteral",
    "TreeElement",
    "call_names",
    "depth",
    "walk",
]
