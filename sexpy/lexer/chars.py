"""Character classes recognized by the lexer."""

import re
from typing import Final

_LETTER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]")
_DIGIT: Final[re.Pattern[str]] = re.compile(r"[0-9]")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")

OPENING_PARENTHESIS: Final[str] = "("
CLOSING_PARENTHESIS: Final[str] = ")"
QUOTE: Final[str] = '"'


def is_letter(ch: str) -> bool:
    return _LETTER.fullmatch(ch) is not None


def is_digit(ch: str) -> bool:
    return _DIGIT.fullmatch(ch) is not None


def is_whitespace(ch: str) -> bool:
    return _WHITESPACE.fullmatch(ch) is not None


def is_opening_parenthesis(ch: str) -> bool:
    return ch == OPENING_PARENTHESIS


def is_closing_parenthesis(ch: str) -> bool:
    return ch == CLOSING_PARENTHESIS


def is_parenthesis(ch: str) -> bool:
    return is_opening_parenthesis(ch) or is_closing_parenthesis(ch)


def is_quote(ch: str) -> bool:
    return ch == QUOTE


def is_recognized(ch: str) -> bool:
    """Whether `ch` starts or belongs to any token class (or is whitespace)."""
    return is_parenthesis(ch) or is_whitespace(ch) or is_digit(ch) or is_quote(ch) or is_letter(ch)
