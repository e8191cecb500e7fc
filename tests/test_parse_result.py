import logging

import pytest

from sexpy import parse_source, parse_text
from sexpy.ast import CallExpression, NumericLiteral, StringLiteral
from sexpy.errors import LexError, ParseError, SexpyError
from sexpy.options import ParseMode, ParserOptions
from sexpy.parser import Group
from tests._debug import debug_dump_ast, debug_dump_diagnostics


def test_parse_result_exposes_tokens_tree_root_and_diagnostics() -> None:
    result = parse_source("(add 2 3)")

    assert len(result.tokens) == 5
    assert isinstance(result.tree, Group)
    assert result.root == CallExpression("add", (NumericLiteral(2), NumericLiteral(3)))
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.is_empty is False
    assert result.options == ParserOptions()


def test_parse_result_for_empty_source() -> None:
    result = parse_source("  \n ")

    assert result.is_empty
    assert result.tree is None
    assert result.root is None
    assert result.diagnostics == []
    assert result.formatted() is None
    result.raise_for_errors()


def test_parse_result_caches_line_index_and_formatting() -> None:
    result = parse_source("(add   2\n 3)")

    assert result.line_index() is result.line_index()
    assert result.formatted() == "(add 2 3)"
    assert result.formatted() is result.formatted()


def test_parse_source_never_raises_on_bad_input() -> None:
    result = parse_source('(add 1 (2 3) "open')
    debug_dump_diagnostics("bad_input", result.diagnostics)
    debug_dump_ast("bad_input", result.root)

    assert result.has_errors
    assert [d.code for d in result.lexer_diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert [d.code for d in result.parser_diagnostics] == [
        "PARSER_UNMATCHED_OPEN_PARENTHESIS",
        "PARSER_MALFORMED_CALL",
    ]
    assert result.root == CallExpression("add", (NumericLiteral(1),))


def test_raise_for_errors_prefers_lexer_errors() -> None:
    result = parse_source("(add 99999999999)")

    with pytest.raises(LexError) as excinfo:
        result.raise_for_errors()

    assert excinfo.value.source_text == "(add 99999999999)"
    assert excinfo.value.diagnostics == result.diagnostics


def test_raise_for_errors_reports_line_and_column() -> None:
    result = parse_source("(add 1\n  (2 3))")

    with pytest.raises(ParseError) as excinfo:
        result.raise_for_errors()

    assert str(excinfo.value) == (
        "2:4: error PARSER_MALFORMED_CALL: Call expression must start with a name, found number 2."
    )


def test_error_message_counts_additional_errors() -> None:
    with pytest.raises(SexpyError) as excinfo:
        parse_text("(1) (2)")

    assert str(excinfo.value).endswith("(+1 more)")


def test_rendered_diagnostics() -> None:
    result = parse_source("(a\n)  )", mode=ParseMode.PERMISSIVE)

    assert result.rendered_diagnostics() == [
        "2:4: warning PARSER_TRAILING_TOKENS: Unexpected input after the top-level expression: 1 token(s).",
    ]


def test_permissive_mode_only_warns() -> None:
    result = parse_source('(log "a" % (1) "b', mode=ParseMode.PERMISSIVE)

    assert not result.has_errors
    assert {d.severity for d in result.diagnostics} == {"warning"}
    assert result.root == CallExpression("log", (StringLiteral("a"),))
    result.raise_for_errors()


def test_parse_text_returns_root() -> None:
    assert parse_text("(f 1)") == CallExpression("f", (NumericLiteral(1),))
    assert parse_text("") is None


def test_parse_text_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_text("(f 1")


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        parse_source("", ParserOptions(), mode=ParseMode.PERMISSIVE)


def test_parse_source_logs_a_debug_summary(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="sexpy")

    parse_source("(add 2 3)")

    assert "into 5 tokens (strict mode)" in caplog.text
