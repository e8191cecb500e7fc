"""AST data model for S-expression source."""

from __future__ import annotations

from dataclasses import dataclass, field

from sexpy.text import TextRange


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    value: int
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class StringLiteral:
    value: str
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str
    range: TextRange | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class CallExpression:
    """`(name arg ...)`; the name is always taken from a leading Name token."""

    name: str
    arguments: tuple[TreeElement, ...] = ()
    range: TextRange | None = field(default=None, compare=False, repr=False)

    @property
    def arity(self) -> int:
        return len(self.arguments)


@dataclass(frozen=True, slots=True)
class Empty:
    """Explicit "no value" node, distinct from a missing result (`None`)."""

    range: TextRange | None = field(default=None, compare=False, repr=False)


TreeElement = NumericLiteral | StringLiteral | Identifier | CallExpression | Empty
