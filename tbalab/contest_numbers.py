"""Contest exercises on ranges, prefix sums, squares and divisors."""

from __future__ import annotations

import math
from itertools import accumulate
from typing import List, Sequence


def number_range(a: int, b: int, c: int, d: int) -> List[int]:
    """Return the run of integers chosen by comparing b with c and d.

    a is read with the others but plays no part in the choice.
    """
    if b <= c:
        return list(range(b, c + 1))
    if b <= d:
        return list(range(c, b + 1))
    return list(range(c, d + 1))


def _is_positive_odd(value: int) -> bool:
    return value > 0 and value % 2 == 1


def prefix_maxima(first: Sequence[int], second: Sequence[int]) -> List[int]:
    """For each prefix, return the larger of the even sum of first and the odd sum of second.

    Only positive odd numbers count towards the odd sum.
    """
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    even_sums = accumulate(value if value % 2 == 0 else 0 for value in first)
    odd_sums = accumulate(value if _is_positive_odd(value) else 0 for value in second)
    return [max(even, odd) for even, odd in zip(even_sums, odd_sums)]


def _square_at_most(a: int) -> int:
    return math.isqrt(a) ** 2 if a >= 4 else 1


def _square_at_least(b: int) -> int:
    if b <= 1:
        return 1
    return (math.isqrt(b - 1) + 1) ** 2


def nearest_square(a: int, b: int) -> int:
    """Return 1 if b is nearer its square above, 2 if a is nearer its square below, 0 on a tie."""
    below = a - _square_at_most(a)
    above = _square_at_least(b) - b
    if below > above:
        return 1
    if above > below:
        return 2
    return 0


def special_index(values: Sequence[int]) -> int:
    """Return the index of the largest interior value that strictly divides both neighbours.

    A value qualifies when it divides both neighbours and neither neighbour divides it;
    among qualifying values the first with the largest value wins. Returns -1 if none.
    """
    result = -1
    best = -1
    triples = zip(values, values[1:], values[2:])
    for index, (left, mid, right) in enumerate(triples, start=1):
        mid_divisible = mid % left == 0 or mid % right == 0
        divides_neighbours = left % mid == 0 and right % mid == 0
        if not mid_divisible and divides_neighbours and mid > best:
            result = index
            best = mid
    return result