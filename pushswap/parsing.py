"""Reading the numbers given on the command line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from pushswap.stacks import Stacks, has_duplicates

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Read a leading integer the way ``atoi`` does.

    Leading whitespace and one sign are skipped, then decimal digits are
    read until the first other character. A result outside the 32-bit
    signed range, or text without digits, gives 0.
    """
    match = _NUMBER.match(text)
    assert match is not None  # the pattern matches any string
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    if value > INT_MAX or value < INT_MIN:
        return 0
    return value


def split_arguments(args: Sequence[str]) -> list[str]:
    """The tokens to parse: a single argument is split on spaces."""
    if len(args) == 1:
        return [token for token in args[0].split(" ") if token]
    return list(args)


def parse_values(args: Iterable[str]) -> list[int]:
    """Parse every token into an integer.

    A token that reads as 0 is only accepted when it starts with ``0``;
    repeated numbers are refused as well. Both raise :class:`InputError`.
    """
    values = []
    for text in args:
        value = parse_int(text)
        if value == 0 and not text.startswith("0"):
            raise InputError(f"not a valid integer: {text!r}")
        values.append(value)
    if has_duplicates(values):
        raise InputError("duplicate numbers")
    return values


def assign_order(stacks: Stacks) -> int:
    """Rank the items of ``a`` from 0 upwards by number; return the largest number."""
    ranked = sorted(stacks.a, key=lambda item: item.nb)
    if not ranked:
        raise ValueError("stack a is empty")
    for rank, item in enumerate(ranked):
        item.order = rank
        item.seen = True
    return ranked[-1].nb