"""Parser modes and configuration options."""

import sys
from dataclasses import dataclass
from enum import StrEnum

U32_MAX = 0xFFFF_FFFF


def decimal_digit_bound(value: int) -> int:
    """Upper bound on the decimal digits of a non-negative int, without str()."""
    # 0.30103 > log10(2), so this never undercounts.
    return value.bit_length() * 30103 // 100000 + 1


class ParseMode(StrEnum):
    """Top-level lexer/parser behavior profile.

    STRICT reports every tolerated degradation as an error.
    PERMISSIVE keeps the tolerant behavior (skip, truncate, partial groups)
    and reports it as warnings.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags shared by the lexer and parser."""

    mode: ParseMode = ParseMode.STRICT
    reject_unrecognized_characters: bool = True
    reject_unterminated_strings: bool = True
    reject_unmatched_parentheses: bool = True
    reject_malformed_calls: bool = True
    reject_trailing_tokens: bool = True
    max_depth: int = 256
    max_integer: int = U32_MAX

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if self.max_integer < 0:
            raise ValueError("max_integer cannot be negative")
        # Number literals up to the bound go through int(), which has a digit limit.
        digit_limit = sys.get_int_max_str_digits()
        if digit_limit and decimal_digit_bound(self.max_integer) > digit_limit:
            raise ValueError(f"max_integer cannot exceed {digit_limit} decimal digits")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                reject_unrecognized_characters=False,
                reject_unterminated_strings=False,
                reject_unmatched_parentheses=False,
                reject_malformed_calls=False,
                reject_trailing_tokens=False,
            )

        return ParserOptions(mode=mode)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()
