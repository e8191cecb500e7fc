"""Lexer."""

from sexpy.lexer.chars import (
    is_closing_parenthesis,
    is_digit,
    is_letter,
    is_opening_parenthesis,
    is_parenthesis,
    is_quote,
    is_whitespace,
)
from sexpy.lexer.lexer import Lexer, lex, tokenize
from sexpy.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "is_closing_parenthesis",
    "is_digit",
    "is_letter",
    "is_opening_parenthesis",
    "is_parenthesis",
    "is_quote",
    "is_whitespace",
    "lex",
    "tokenize",
]
