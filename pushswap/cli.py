"""Command line: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import assign_order, parse_values, split_arguments
from pushswap.sorting import sort
from pushswap.stacks import Stacks, is_sorted


def push_swap(args: Sequence[str]) -> list[str]:
    """The operations that sort the numbers in ``args``.

    Raises :class:`pushswap.parsing.InputError` for invalid input.
    """
    if not args:
        return []
    tokens = split_arguments(args)
    if len(args) == 1 and len(tokens) == 1:
        return []
    values = parse_values(tokens)
    if is_sorted(values):
        return []
    stacks = Stacks(values)
    max_value = assign_order(stacks)
    sort(stacks, max_value)
    return stacks.operations


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        operations = push_swap(argv)
    except ValueError:
        print("Error", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{name}\n" for name in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())