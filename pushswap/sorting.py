"""Sorting strategies that produce the list of moves."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Stacks


def index_values(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of values smaller than it."""
    order = sorted(values)
    rank = {value: position for position, value in reversed(list(enumerate(order)))}
    return [rank[value] for value in values]


def max_bits(size: int) -> int:
    """Number of bits needed for the largest index of a stack of ``size``."""
    return max(size - 1, 0).bit_length()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by binary radix on the indices, using ``b`` as the zero bucket."""
    size = len(stacks.a)
    for bit in range(max_bits(size)):
        for _ in range(size):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a``."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second < third and first < third:
        stacks.sa()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif first > second < third and first > third:
        stacks.ra()
    elif first < second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second > third and first > third:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort four or five elements by parking indices 0 and 1 on ``b``."""
    while len(stacks.a) > 3:
        if stacks.a[0] in (0, 1):
            stacks.pb()
        else:
            stacks.ra()
    sort_three(stacks)
    if len(stacks.b) >= 2 and stacks.b[0] < stacks.b[1]:
        stacks.sb()
    stacks.pa()
    stacks.pa()


def sort_small_stack(stacks: Stacks) -> None:
    """Sort a stack of at most five elements."""
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif 4 <= size <= 5:
        sort_five(stacks)


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a``, choosing the strategy by its size."""
    if len(stacks.a) <= 5:
        sort_small_stack(stacks)
    else:
        radix_sort(stacks)


def solve(values: Sequence[int]) -> list[str]:
    """Return the moves that sort ``values``."""
    stacks = Stacks(index_values(values))
    sort_stack(stacks)
    return stacks.ops