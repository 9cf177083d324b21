"""Theater records and the text renderings used by the theater console."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

FIELD_NAMES = ("id", "name", "director", "address", "rating")


def _format_number(value: float) -> str:
    """Render a number the way a default-configured output stream does."""
    return f"{value:g}"


@dataclass
class Theater:
    """A theater with its director, address and rating."""

    id: int = 0
    name: str = ""
    director: str = ""
    address: str = ""
    rating: float = 0.0

    def _lines(self) -> list[str]:
        return [
            f"id: {self.id}",
            f"name: {self.name}",
            f"director: {self.director}",
            f"address: {self.address}",
            f"rating: {_format_number(self.rating)}",
        ]

    def describe(self) -> str:
        """Return one 'field: value' line per field, each ending in a newline."""
        return "".join(f"{line}\n" for line in self._lines())

    def describe_shifted(self) -> str:
        """Return the same lines as describe(), each indented by a tab."""
        return "".join(f"\t{line}\n" for line in self._lines())

    def __str__(self) -> str:
        return self.describe_shifted()


def field_names() -> tuple[str, ...]:
    """Return the names of a theater's fields, in display order."""
    return FIELD_NAMES


def friend_line(theater: Theater) -> str:
    """Return the showcase line naming the given theater, with two newlines."""
    return f"This is friend example, I'm printing last theater's name: {theater.name}\n\n"


def format_theaters(theaters: Iterable[Theater]) -> str:
    """Return the shifted description of every theater, one after another."""
    return "".join(theater.describe_shifted() for theater in theaters)


def format_names(theaters: Iterable[Theater]) -> str:
    """Return each theater's name on a tab-indented line, then a blank line."""
    return "".join(f"\t{theater.name}\n" for theater in theaters) + "\n"