import pytest

from sexpy.diagnostics import (
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    collect_diagnostics,
    errors_only,
    has_errors,
)
from sexpy.lexer import (
    is_closing_parenthesis,
    is_digit,
    is_letter,
    is_opening_parenthesis,
    is_parenthesis,
    is_quote,
    is_whitespace,
)
from sexpy.text import LineIndex, TextRange, TextSize


@pytest.mark.parametrize("ch", ["a", "z", "A", "Z"])
def test_ascii_letters(ch: str) -> None:
    assert is_letter(ch)
    assert not is_digit(ch)
    assert not is_whitespace(ch)


@pytest.mark.parametrize("ch", ["é", "_", "1", "", "ab", "ß"])
def test_not_letters(ch: str) -> None:
    assert not is_letter(ch)


def test_digits_are_ascii_only() -> None:
    assert all(is_digit(ch) for ch in "0123456789")
    assert not is_digit("٣")  # ARABIC-INDIC DIGIT THREE
    assert not is_digit("12")


def test_whitespace() -> None:
    assert all(is_whitespace(ch) for ch in " \t\n\r\f\v  ")
    assert not is_whitespace("x")
    assert not is_whitespace("")


def test_parentheses_and_quote() -> None:
    assert is_opening_parenthesis("(") and not is_opening_parenthesis(")")
    assert is_closing_parenthesis(")") and not is_closing_parenthesis("(")
    assert is_parenthesis("(") and is_parenthesis(")")
    assert not is_parenthesis("[")
    assert is_quote('"') and not is_quote("'")


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 2)
    with pytest.raises(ValueError):
        TextSize(-1)

    assert TextRange(1, 4).start == TextSize(1)
    assert TextRange(1, 4).end == TextSize(4)
    assert TextRange(0, 2).cover(TextRange(5, 7)).as_tuple() == (0, 7)
    assert TextRange.empty(TextSize(4)).as_tuple() == (4, 4)


def test_line_index() -> None:
    index = LineIndex("ab\ncd\n\nx")

    assert index.line_count == 4
    assert index.line_col(0) == (1, 1)
    assert index.line_col(2) == (1, 3)
    assert index.line_col(3) == (2, 1)
    assert index.line_col(TextSize(7)) == (4, 1)
    assert index.line_col(8) == (4, 2)
    with pytest.raises(ValueError):
        index.line_col(-1)


def test_diagnostic_from_spec_and_render() -> None:
    diagnostic = Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, TextRange(3, 5), severity="warning")

    assert diagnostic.code == "LEXER_UNTERMINATED_STRING"
    assert diagnostic.category == "lexer"
    assert diagnostic.hint == LEXER_UNTERMINATED_STRING.hint
    assert diagnostic.render() == "offset 3: warning LEXER_UNTERMINATED_STRING: Unterminated string literal."
    assert diagnostic.render(LineIndex("a\nbcd")).startswith("2:2:")


def test_diagnostic_helpers() -> None:
    warning = Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, TextRange(0, 1), severity="warning")
    error = Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, TextRange(0, 1))

    combined = collect_diagnostics([warning], [error])
    assert combined == [warning, error]
    assert has_errors(combined)
    assert not has_errors([warning])
    assert errors_only(combined) == [error]
