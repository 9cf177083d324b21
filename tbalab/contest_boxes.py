"""Contest exercise: storage boxes with a load capacity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_FIELD_COUNT = 6


@dataclass
class StorageBox:
    """A box with dimensions, a maximum load, a current load and a material."""

    length: int
    width: int
    height: int
    max_cap: int
    cur_cap: int
    material: str

    @classmethod
    def parse(cls, text: str) -> StorageBox:
        """Build a box from 'length width height max_cap cur_cap material'."""
        tokens = text.split()
        if len(tokens) != _FIELD_COUNT:
            raise ValueError(
                f"expected {_FIELD_COUNT} whitespace-separated fields, got {len(tokens)}"
            )
        *numbers, material = tokens
        try:
            length, width, height, max_cap, cur_cap = (int(token) for token in numbers)
        except ValueError as error:
            raise ValueError(f"box dimensions and loads must be integers: {text!r}") from error
        return cls(length, width, height, max_cap, cur_cap, material)

    def free(self) -> None:
        """Empty the box."""
        self.cur_cap = 0

    def put_weight(self, load: Union[int, StorageBox]) -> None:
        """Add a weight, or another box's load, if it still fits."""
        weight = load.cur_cap if isinstance(load, StorageBox) else load
        if self.cur_cap + weight <= self.max_cap:
            self.cur_cap += weight

    def multiply_weight(self, n: int) -> None:
        """Multiply the load by n, capping it at the maximum load."""
        if self.cur_cap * n > self.max_cap:
            self.cur_cap = self.max_cap
        else:
            self.cur_cap *= n

    def can_hold(self, other: StorageBox) -> bool:
        """Return True if other fits inside and its load fits on top of this one's."""
        return (
            other.length <= self.length
            and other.width <= self.width
            and other.height <= self.height
            and other.cur_cap + self.cur_cap <= self.max_cap
        )

    def is_cube(self) -> bool:
        """Return True if all three dimensions are equal."""
        return self.length == self.width == self.height

    def __str__(self) -> str:
        return (
            f"{self.length} {self.width} {self.height} "
            f"{self.max_cap} {self.cur_cap} {self.material}"
        )