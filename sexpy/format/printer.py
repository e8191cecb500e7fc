"""Render TreeElement nodes back to canonical S-expression text."""

from __future__ import annotations

from sexpy.ast import CallExpression, Empty, Identifier, NumericLiteral, StringLiteral, TreeElement
from sexpy.lexer.chars import QUOTE, is_letter
from sexpy.options import U32_MAX


def format_tree(element: TreeElement, *, max_integer: int = U32_MAX) -> str:
    """Single-line canonical rendering: `(name arg ...)` separated by one space.

    Raises `ValueError` for nodes the parser could not have produced: names
    with non-letter characters, strings containing a quote, numbers outside
    `0..max_integer`, and `Empty`, which has no source syntax.
    """
    parts: list[str] = []
    _write(element, parts, max_integer)
    return "".join(parts)


def _write(element: TreeElement, out: list[str], max_integer: int) -> None:
    match element:
        case NumericLiteral(value=value):
            if value < 0:
                raise ValueError(f"Numeric literals are unsigned, got {value}")
            if value > max_integer:
                raise ValueError(f"Numeric literal exceeds the maximum of {max_integer}")
            out.append(str(value))
        case StringLiteral(value=value):
            if QUOTE in value:
                raise ValueError(f"String literal cannot contain a quote: {value!r}")
            out.append(f"{QUOTE}{value}{QUOTE}")
        case Identifier(name=name):
            out.append(_checked_name(name))
        case CallExpression(name=name, arguments=arguments):
            out.append("(")
            out.append(_checked_name(name))
            for argument in arguments:
                out.append(" ")
                _write(argument, out, max_integer)
            out.append(")")
        case Empty():
            # `()` reads back as a malformed call, never as Empty.
            raise ValueError("Empty has no source representation")
        case _:
            raise TypeError(f"Not a tree element: {element!r}")


def _checked_name(name: str) -> str:
    if not name or not all(is_letter(ch) for ch in name):
        raise ValueError(f"Names must be non-empty runs of ASCII letters: {name!r}")
    return name
