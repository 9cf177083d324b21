"""Plane shapes that know their length and area."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence


def _format_number(value: float) -> str:
    return f"{value:g}"


class Shape(ABC):
    """A figure with a length (perimeter) and an area."""

    @abstractmethod
    def length(self) -> float:
        """Return the figure's length."""

    @abstractmethod
    def area(self) -> float:
        """Return the figure's area."""


@dataclass
class Point(Shape):
    """A point; its length and area are zero."""

    x: float = 0.0
    y: float = 0.0

    def length(self) -> float:
        return 0.0

    def area(self) -> float:
        return 0.0

    def __str__(self) -> str:
        return f"({_format_number(self.x)}, {_format_number(self.y)})"


@dataclass
class Line(Shape):
    """A segment between two points."""

    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        self.start = replace(self.start)
        self.end = replace(self.end)

    def length(self) -> float:
        return math.sqrt((self.end.x - self.start.x) ** 2 + (self.end.y - self.start.y) ** 2)

    def area(self) -> float:
        return 0.0

    def __str__(self) -> str:
        return f"{self.start} – {self.end}"


@dataclass
class Circle(Shape):
    """A circle given by its centre and radius."""

    center: Point = field(default_factory=Point)
    radius: float = 0.0

    def __post_init__(self) -> None:
        self.center = replace(self.center)

    def length(self) -> float:
        return 2 * math.pi * self.radius

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def __str__(self) -> str:
        return f"center {self.center}, radius {_format_number(self.radius)}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print sample shapes with their lengths and areas."""
    defaults = (Point(), Line(), Circle())
    first, second = Point(1, 2), Point(2, 4)
    samples = (first, second, Line(first, second), Circle(first, 1))

    blocks = []
    for shapes in (defaults, samples):
        blocks.append([str(shape) for shape in shapes])
        blocks.append([_format_number(shape.length()) for shape in shapes])
        blocks.append([_format_number(shape.area()) for shape in shapes])

    sys.stdout.write("".join("\n".join(block) + "\n\n" for block in blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())