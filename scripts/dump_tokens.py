#!/usr/bin/env python
import argparse
import logging
import sys
from pathlib import Path

from sexpy.lexer import Token
from sexpy.options import ParseMode
from sexpy.pipeline import parse_source


def format_token(idx: int, token: Token) -> str:
    return f"[{idx:03d}] {token.kind.name:<12} range={token.range.as_tuple()} value={token.value!r}"


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump tokens, AST and diagnostics of an S-expression file.")
    parser.add_argument("path", type=Path)
    parser.add_argument("--mode", choices=[mode.value for mode in ParseMode], default=ParseMode.STRICT.value)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.path.read_text(encoding="utf-8")
    result = parse_source(text, mode=ParseMode(args.mode))

    for idx, token in enumerate(result.tokens):
        print(format_token(idx, token))

    print("\nAST:")
    print(result.root)

    print("\nDiagnostics:")
    if not result.diagnostics:
        print("(none)")
    for line in result.rendered_diagnostics():
        print(f"- {line}")

    return 1 if result.has_errors else 0


if __name__ == "__main__":
    sys.exit(main())
