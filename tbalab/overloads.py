"""Boxes and coloured points with operator-style helpers."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Box:
    """A box with a weight, dimensions and a colour."""

    weight: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    color: str = ""

    def volume(self) -> float:
        """Return length times width times height."""
        return self.length * self.width * self.height

    def hardness(self) -> str:
        """Return "Hard" for boxes heavier than 100, otherwise "Not hard"."""
        return "Hard" if self.weight > 100 else "Not hard"

    def is_harder_than(self, other: Box) -> bool:
        """Return True if this box is strictly heavier than other."""
        return self.weight > other.weight

    def __add__(self, other: Box) -> float:
        """Return the combined weight of both boxes."""
        return self.weight + other.weight

    def paint(self, other: Box) -> None:
        """Give other this box's colour."""
        other.color = self.color

    def increment(self) -> Box:
        """Increase the weight by one and return this box."""
        self.weight += 1
        return self

    def __and__(self, other: Box) -> bool:
        """Return True if both boxes weigh more than 100."""
        return self.weight > 100 and other.weight > 100


@dataclass
class Point:
    """A point in the plane with a colour name."""

    x: float = 0.0
    y: float = 0.0
    color: str = ""

    def __add__(self, other: Point) -> Point:
        """Return the coordinate-wise sum, keeping this point's colour."""
        return Point(self.x + other.x, self.y + other.y, self.color)

    def scale(self, factor: int) -> None:
        """Multiply both coordinates by factor in place."""
        self.x *= factor
        self.y *= factor

    def distance(self, other: Point) -> float:
        """Return the Euclidean distance to other."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def same_quarter(self, other: Point) -> bool:
        """Return True if both coordinates' signs agree (zero matches anything)."""
        return self.x * other.x >= 0 and self.y * other.y >= 0

    def __str__(self) -> str:
        return f"({_format_number(self.x)}, {_format_number(self.y)}) {self.color}"


def _box_showcase() -> str:
    one = Box(10, 2, 3, 5, "blue")
    two = Box(200, 10, 20, 30, "black")
    out = [
        f"Box one weight: {_format_number(one.weight)}\n",
        f"Box two weight: {_format_number(two.weight)}\n\n",
        f"Box one is hard? {one.hardness()}\n",
        f"Box two is hard? {two.hardness()}\n\n",
        f"Box one is harder than Box two – {one.is_harder_than(two):d}\n",
        f"Box two is harder than Box one – {two.is_harder_than(one):d}\n\n",
        f"(Box one + Box two).weight: {_format_number(one + two)}\n\n",
        f"Box one color: {one.color}\n",
        f"Box two color: {two.color}\n",
        "painting...\n",
    ]
    one.paint(two)
    out += [
        f"Box one color: {one.color}\n",
        f"Box two color: {two.color}\n\n",
        f"Box one weight: {_format_number(one.weight)}\n",
        "increasing weight...\n",
    ]
    one.increment()
    out += [
        f"Box one weight: {_format_number(one.weight)}\n\n",
        f"Are Box one and Box two both weigh more than 100? {one & two:d}\n\n",
        "\n",
    ]
    return "".join(out)


def _point_showcase() -> str:
    blue = Point(1, 2, "blue")
    red = Point(10, 16, "red")
    black = Point(-1, 10)
    yellow = Point(-1, -6, "yellow")
    named = {"blue": blue, "red": red, "black": black, "yellow": yellow}

    out = ["Points:\n"]
    out += [f"{point}\n" for point in named.values()]
    out.append("\n")
    out.append(f"Sum of Points blue and red: {blue + red}\n\n")
    out.append("Scaling Point black by 10\n")
    black.scale(10)
    out.append(f"{black}\n\n")
    out.append(
        f"Distance between blue and red Points: {_format_number(blue.distance(red))}\n\n"
    )
    names = list(named)
    for position, first in enumerate(names):
        for second in names[position + 1:]:
            same = named[first].same_quarter(named[second])
            out.append(f"Are {first} and {second} in the same quarter?: {same:d}\n")
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the box and point showcases."""
    sys.stdout.write(_box_showcase())
    sys.stdout.write(_point_showcase())
    return 0


if __name__ == "__main__":
    sys.exit(main())