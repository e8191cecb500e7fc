"""Lexer tokens."""

from dataclasses import dataclass, field
from enum import IntEnum

from sexpy.lexer.chars import CLOSING_PARENTHESIS, OPENING_PARENTHESIS
from sexpy.text import EMPTY_RANGE, TextRange


class TokenKind(IntEnum):
    PARENTHESIS = 1  # ( or )
    NAME = 2
    NUMBER = 3
    STRING = 4  # quoted, no escapes


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` is the parenthesis character, the name, the integer value or the
    unquoted string content depending on `kind`. The source range does not
    take part in equality.
    """

    kind: TokenKind
    value: str | int
    range: TextRange = field(default=EMPTY_RANGE, compare=False)

    @staticmethod
    def parenthesis(ch: str, range: TextRange = EMPTY_RANGE) -> "Token":
        if ch not in (OPENING_PARENTHESIS, CLOSING_PARENTHESIS):
            raise ValueError(f"Not a parenthesis: {ch!r}")
        return Token(TokenKind.PARENTHESIS, ch, range)

    @staticmethod
    def name(text: str, range: TextRange = EMPTY_RANGE) -> "Token":
        return Token(TokenKind.NAME, text, range)

    @staticmethod
    def number(value: int, range: TextRange = EMPTY_RANGE) -> "Token":
        if value < 0:
            raise ValueError("Number tokens are unsigned")
        return Token(TokenKind.NUMBER, value, range)

    @staticmethod
    def string(text: str, range: TextRange = EMPTY_RANGE) -> "Token":
        return Token(TokenKind.STRING, text, range)

    @property
    def is_opening_parenthesis(self) -> bool:
        return self.kind == TokenKind.PARENTHESIS and self.value == OPENING_PARENTHESIS

    @property
    def is_closing_parenthesis(self) -> bool:
        return self.kind == TokenKind.PARENTHESIS and self.value == CLOSING_PARENTHESIS

    def __repr__(self) -> str:
        return f"{self.kind.name.title()}({self.value!r})"
