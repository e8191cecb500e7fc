"""Parser (grouper + AST classification)."""

from sexpy.parser.classify import TreeClassifier, classify
from sexpy.parser.grouper import BracketTree, Group, Grouper, Leaf, group
from sexpy.parser.parse import ParsedTree, parse, parse_tokens

__all__ = [
    "BracketTree",
    "Group",
    "Grouper",
    "Leaf",
    "ParsedTree",
    "TreeClassifier",
    "classify",
    "group",
    "parse",
    "parse_tokens",
]
