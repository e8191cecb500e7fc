"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_NUMERIC_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NUMERIC_OVERFLOW",
    message="Integer literal is out of range.",
    hint="Numeric literals are unsigned and bounded by `ParserOptions.max_integer`.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

LEXER_UNRECOGNIZED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_CHARACTER",
    message="Unrecognized character.",
    hint="Only letters, digits, whitespace, parentheses and double quotes are allowed.",
    severity="error",
    category="lexer",
)

PARSER_UNMATCHED_OPEN_PARENTHESIS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_OPEN_PARENTHESIS",
    message="Unmatched opening parenthesis.",
    hint="Add a closing `)`.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_PARENTHESIS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_PARENTHESIS",
    message="Unexpected closing parenthesis.",
    severity="error",
    category="parser",
)

PARSER_MALFORMED_CALL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MALFORMED_CALL",
    message="Call expression must start with a name.",
    hint="Write calls as `(name arg ...)`.",
    severity="error",
    category="parser",
)

PARSER_TRAILING_TOKENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_TOKENS",
    message="Unexpected input after the top-level expression.",
    severity="error",
    category="parser",
)

PARSER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MAX_DEPTH_EXCEEDED",
    message="Expression is nested too deeply.",
    severity="error",
    category="parser",
)
