"""Diagnostics."""

from sexpy.diagnostics.codes import (
    LEXER_NUMERIC_OVERFLOW,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_MALFORMED_CALL,
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_TRAILING_TOKENS,
    PARSER_UNEXPECTED_PARENTHESIS,
    PARSER_UNMATCHED_OPEN_PARENTHESIS,
    DiagnosticSpec,
    Severity,
)
from sexpy.diagnostics.diagnostic import Diagnostic
from sexpy.diagnostics.report import collect_diagnostics, errors_only, has_errors

__all__ = [
    "LEXER_NUMERIC_OVERFLOW",
    "LEXER_UNRECOGNIZED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_MALFORMED_CALL",
    "PARSER_MAX_DEPTH_EXCEEDED",
    "PARSER_TRAILING_TOKENS",
    "PARSER_UNEXPECTED_PARENTHESIS",
    "PARSER_UNMATCHED_OPEN_PARENTHESIS",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "errors_only",
    "has_errors",
]
