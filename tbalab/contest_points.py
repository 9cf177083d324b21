"""Contest exercise: integer grid points with operator helpers.

Ordering and equality compare the points' Manhattan norms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(eq=False)
class GridPoint:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0

    @classmethod
    def parse(cls, text: str) -> GridPoint:
        """Build a point from two whitespace-separated integers."""
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(f"expected two coordinates, got {len(tokens)}")
        x, y = (int(token) for token in tokens)
        return cls(x, y)

    def _norm(self) -> int:
        return abs(self.x) + abs(self.y)

    def __add__(self, other: GridPoint) -> GridPoint:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return GridPoint(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Union[int, GridPoint]) -> GridPoint:
        """Scale by an integer, or multiply coordinate-wise by another point."""
        if isinstance(other, GridPoint):
            return GridPoint(self.x * other.x, self.y * other.y)
        if isinstance(other, int):
            return GridPoint(self.x * other, self.y * other)
        return NotImplemented

    def clear(self) -> GridPoint:
        """Move this point to the origin and return it."""
        self.x = 0
        self.y = 0
        return self

    def flip_x(self) -> GridPoint:
        """Return a copy with the x coordinate negated."""
        return GridPoint(-self.x, self.y)

    def flip_y(self) -> GridPoint:
        """Return a copy with the y coordinate negated."""
        return GridPoint(self.x, -self.y)

    def __lt__(self, other: GridPoint) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return self._norm() < other._norm()

    def __le__(self, other: GridPoint) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return not other < self

    def __gt__(self, other: GridPoint) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return other < self

    def __ge__(self, other: GridPoint) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return not self < other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return not (self < other or other < self)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return self < other or other < self

    __hash__ = None  # type: ignore[assignment]

    def touches_axis(self, other: GridPoint) -> bool:
        """Return True if any coordinate of either point is zero."""
        return 0 in (self.x, self.y, other.x, other.y)

    def shares_axis(self, other: GridPoint) -> bool:
        """Return True if both points lie on the same coordinate axis."""
        return (self.x == 0 and other.x == 0) or (self.y == 0 and other.y == 0)

    def same_quadrant(self, other: GridPoint) -> bool:
        """Return True if both points lie strictly inside the same quadrant."""
        if self.touches_axis(other):
            return False
        return (self.x > 0) == (other.x > 0) and (self.y > 0) == (other.y > 0)

    def triangle_area(self, other: GridPoint) -> float:
        """Return the area of the triangle spanned by the origin and both points."""
        if self.x == other.x and self.y == other.y:
            return 0.0
        return abs(self.x * other.y - other.x * self.y) / 2.0

    def __str__(self) -> str:
        return f"{self.x} {self.y}"