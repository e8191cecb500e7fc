"""Lexer."""

from collections.abc import Callable

from sexpy.diagnostics import (
    LEXER_NUMERIC_OVERFLOW,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    Severity,
    has_errors,
)
from sexpy.errors import LexError
from sexpy.lexer.chars import (
    is_digit,
    is_letter,
    is_parenthesis,
    is_quote,
    is_recognized,
    is_whitespace,
)
from sexpy.lexer.tokens import Token
from sexpy.options import ParseMode, ParserOptions, decimal_digit_bound, resolve_options
from sexpy.text import TextRange


class Lexer:
    """Single-pass scanner with one character of lookahead.

    Whitespace produces no tokens. Problems are recorded in `diagnostics`
    rather than raised.
    """

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options if options is not None else ParserOptions()
        self._position = 0
        self._diagnostics: list[Diagnostic] = []
        self._max_digits = decimal_digit_bound(self._options.max_integer)

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while not self.is_eof:
            start = self._position
            ch = self._current_char()

            if is_parenthesis(ch):
                self._advance(1)
                tokens.append(Token.parenthesis(ch, self._range_from(start)))
                continue

            if is_whitespace(ch):
                self._advance(1)
                continue

            if is_digit(ch):
                number = self._lex_number()
                if number is not None:
                    tokens.append(number)
                continue

            if is_quote(ch):
                string = self._lex_string()
                if string is None:
                    # Unterminated: the rest of the input was swallowed.
                    break
                tokens.append(string)
                continue

            if is_letter(ch):
                tokens.append(self._lex_name())
                continue

            self._skip_unrecognized()

        return tokens

    def _lex_number(self) -> Token | None:
        start = self._position
        self._consume_while(is_digit)
        digits = self._source[start : self._position]
        range = self._range_from(start)

        max_integer = self._options.max_integer
        # Compare lengths first so huge runs never reach int().
        stripped = digits.lstrip("0") or "0"
        if len(stripped) > self._max_digits or int(stripped) > max_integer:
            self._report(
                Diagnostic.from_spec(
                    LEXER_NUMERIC_OVERFLOW,
                    range,
                    message=f"Integer literal {_shorten(digits)} exceeds the maximum of {max_integer}.",
                )
            )
            return None

        return Token.number(int(stripped), range)

    def _lex_string(self) -> Token | None:
        start = self._position
        # Consume opening quote
        self._advance(1)
        content_start = self._position

        while not self.is_eof:
            if is_quote(self._current_char()):
                content = self._source[content_start : self._position]
                self._advance(1)
                return Token.string(content, self._range_from(start))
            self._advance(1)

        self._report(
            Diagnostic.from_spec(
                LEXER_UNTERMINATED_STRING,
                self._range_from(start),
                severity=self._severity(self._options.reject_unterminated_strings),
            )
        )
        return None

    def _lex_name(self) -> Token:
        start = self._position
        self._consume_while(is_letter)
        return Token.name(self._source[start : self._position], self._range_from(start))

    def _skip_unrecognized(self) -> None:
        start = self._position
        self._consume_while(lambda ch: not is_recognized(ch))
        skipped = self._source[start : self._position]
        self._report(
            Diagnostic.from_spec(
                LEXER_UNRECOGNIZED_CHARACTER,
                self._range_from(start),
                severity=self._severity(self._options.reject_unrecognized_characters),
                message=f"Unrecognized character{'s' if len(skipped) > 1 else ''} {skipped!r}.",
            )
        )

    def _consume_while(self, predicate: Callable[[str], bool]) -> None:
        while not self.is_eof and predicate(self._current_char()):
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps

    def _range_from(self, start: int) -> TextRange:
        return TextRange(start, self._position)

    def _severity(self, reject: bool) -> Severity:
        return "error" if reject else "warning"

    def _report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)


def _shorten(digits: str, limit: int = 24) -> str:
    if len(digits) <= limit:
        return digits
    return f"{digits[:limit]}... ({len(digits)} digits)"


def lex(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> tuple[list[Token], list[Diagnostic]]:
    """Tokenize without raising; returns tokens and diagnostics."""
    lexer = Lexer(text, resolve_options(options, mode))
    tokens = lexer.lex()
    return tokens, lexer.diagnostics


def tokenize(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[Token]:
    """Tokenize `text`, raising `LexError` if any error was reported."""
    tokens, diagnostics = lex(text, options, mode=mode)
    if has_errors(diagnostics):
        raise LexError(diagnostics, source_text=text)
    return tokens
