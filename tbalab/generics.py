"""Small generic helpers over numbers and sequences."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Vector2:
    """A pair of coordinates."""

    x: float = 0.0
    y: float = 0.0


def magnitude(point: Vector2) -> float:
    """Return the distance of point from the origin."""
    return math.sqrt(point.x * point.x + point.y * point.y)


def maximum(a: T, b: T) -> T:
    """Return the larger of a and b, preferring a on ties."""
    return b if a < b else a  # type: ignore[operator]


def count_unique(a: object, b: object, c: object) -> int:
    """Return how many distinct values are among a, b and c."""
    count = 1
    if a != b and b != c:
        count += 1
    if a != c:
        count += 1
    return count


def total(values: Iterable[float]) -> float:
    """Return the sum of values, starting from zero."""
    return sum(values, 0)


def count_equal(values: Iterable[T], k: T) -> int:
    """Return how many values equal k."""
    return sum(1 for value in values if value == k)


def count_not_minmax(values: Sequence[float]) -> int:
    """Return how many values are neither the minimum nor the maximum."""
    if not values:
        return 0
    low, high = min(values), max(values)
    return sum(1 for value in values if value != low and value != high)


def merged_sorted(first: Iterable[float], second: Iterable[float]) -> List[float]:
    """Return both sequences merged into one ascending list of floats."""
    return sorted(float(value) for value in (*first, *second))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a demonstration of the helpers."""
    out = []
    out.append(f"magn of (3, 4) is {_format_number(magnitude(Vector2(3, 4)))}\n")
    x, y, z = 2.5, 4.5, 2.5
    out.append(f"max of {x:g} and {y:g} is {maximum(x, y):g}\n")
    out.append(f"unique({x:g}, {y:g}, {z:g}).size() is {count_unique(x, y, z)}\n")
    out.append("\n")

    first = [float(i) for i in range(10)]
    out += [f"arr1[{i}] = {i}\n" for i in range(len(first))]
    out.append(f"sum from 0 to 9 is {_format_number(total(first))}\n")
    k = 1.0
    out.append(f"count equal to {k:g} is {count_equal(first, k)}\n")
    out.append(f"count not minmax is {count_not_minmax(first)}\n")
    out.append("\n")

    size = 5
    second = [float(3 * i + 7 % size) for i in range(size)]
    out += [f"arr2[{i}] = {value:g}\n" for i, value in enumerate(second)]

    out.append("\n")
    out.append("".join(f"{value:g} " for value in merged_sorted(second, first)))
    out.append("\n")
    sys.stdout.write("".join(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())