"""Text-level entrypoints that run lexer and parser over one source."""

from __future__ import annotations

from sexpy.ast import TreeElement
from sexpy.lexer import Lexer
from sexpy.options import ParseMode, ParserOptions, resolve_options
from sexpy.parser import parse_tokens
from sexpy.pipeline.result import SexpParseResult
from sexpy.utils.logger import get_logger

logger = get_logger(__name__)


def parse_source(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SexpParseResult:
    """Lex and parse `text`; problems are reported as diagnostics, never raised."""
    resolved_options = resolve_options(options, mode)

    lexer = Lexer(text, resolved_options)
    tokens = lexer.lex()
    parsed = parse_tokens(tokens, resolved_options)

    logger.debug(
        "parsed %d chars into %d tokens (%s mode): %d lexer / %d parser diagnostics",
        len(text),
        len(tokens),
        resolved_options.mode,
        len(lexer.diagnostics),
        len(parsed.diagnostics),
    )

    return SexpParseResult(
        source_text=text,
        tokens=tokens,
        tree=parsed.tree,
        root=parsed.root,
        lexer_diagnostics=lexer.diagnostics,
        parser_diagnostics=parsed.diagnostics,
        options=resolved_options,
    )


def parse_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> TreeElement | None:
    """Lex and parse `text`, raising `LexError`/`ParseError` on errors."""
    result = parse_source(text, options, mode=mode)
    result.raise_for_errors()
    return result.root
