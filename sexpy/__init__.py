"""Lexer and recursive-descent parser for a minimal S-expression syntax."""

from sexpy.ast import (
    CallExpression,
    Empty,
    Identifier,
    NumericLiteral,
    StringLiteral,
    TreeElement,
)
from sexpy.diagnostics import Diagnostic
from sexpy.errors import LexError, ParseError, SexpyError
from sexpy.format import format_tree
from sexpy.lexer import Lexer, Token, TokenKind, tokenize
from sexpy.options import ParseMode, ParserOptions
from sexpy.parser import parse
from sexpy.pipeline import SexpParseResult, parse_source, parse_text

__all__ = [
    "CallExpression",
    "Diagnostic",
    "Empty",
    "Identifier",
    "LexError",
    "Lexer",
    "NumericLiteral",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "SexpParseResult",
    "SexpyError",
    "StringLiteral",
    "Token",
    "TokenKind",
    "TreeElement",
    "format_tree",
    "parse",
    "parse_source",
    "parse_text",
    "tokenize",
]
