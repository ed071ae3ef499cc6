"""Sorting stack ``a`` with the push_swap operations."""

from __future__ import annotations

from pushswap.stacks import Stacks, find_min


def sort(stacks: Stacks, max_value: int) -> None:
    """Sort ``a``, picking a strategy by its size."""
    size = len(stacks.a)
    if size == 2:
        stacks.rotate_a()
    elif size == 3:
        sort_three(stacks, max_value)
    elif 3 < size <= 5:
        sort_five(stacks, max_value)
    else:
        sort_radix(stacks, max_value)


def sort_three(stacks: Stacks, max_value: int) -> None:
    """Sort two or three items, ``max_value`` being the largest of them."""
    a = stacks.a
    if a[0].nb == max_value:
        stacks.rotate_a()
    elif a[1].nb == max_value:
        stacks.reverse_rotate_a()
    if a[0].nb > a[1].nb:
        stacks.swap_a()


def sort_five(stacks: Stacks, max_value: int) -> None:
    """Sort four or five items by moving the two smallest to ``b``."""
    if reverse_five(stacks):
        return
    for _ in range(2):
        smallest = find_min(stacks.a)
        while stacks.a[0].nb != smallest:
            stacks.rotate_a()
        stacks.push_b()
    sort_three(stacks, max_value)
    while stacks.b:
        stacks.push_a()


def reverse_five(stacks: Stacks) -> bool:
    """Sort ``a`` with a fixed sequence if its first five items strictly decrease."""
    a = stacks.a
    if len(a) < 5:
        return False
    first = [a[index].nb for index in range(5)]
    if not all(left > right for left, right in zip(first, first[1:])):
        return False
    stacks.push_b()
    stacks.push_b()
    stacks.rotate_a()
    stacks.swap_a()
    stacks.swap_b()
    stacks.push_a()
    stacks.push_a()
    stacks.rotate_a()
    stacks.rotate_a()
    return True


def _bit(order: int, index: int) -> int:
    return (order >> index) & 1


def sort_radix(stacks: Stacks, max_value: int) -> None:
    """Binary radix sort on the items' ranks, over as many bits as ``max_value`` has."""
    if max_value < 0:
        raise ValueError("radix sort needs a non-negative largest value")
    nb_bits = max_value.bit_length()
    for index in range(nb_bits):
        for _ in range(len(stacks.a)):
            if _bit(stacks.a[0].order, index) == 0:
                stacks.push_b()
            else:
                stacks.rotate_a()
        if index + 1 < nb_bits:
            for _ in range(len(stacks.b)):
                if _bit(stacks.b[0].order, index + 1) == 0:
                    stacks.rotate_b()
                else:
                    stacks.push_a()
        else:
            while stacks.b:
                stacks.push_a()