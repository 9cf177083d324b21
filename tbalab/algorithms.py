"""Searching, editing, rating and sorting collections of theaters."""

from __future__ import annotations

import re
from typing import Iterable, MutableSequence, Sequence

from .theater import Theater

_DOUBLE_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_EDITABLE_TEXT_FIELDS = ("name", "director", "address")
_SORT_FIELDS = ("id", "name", "director", "rating")


def _parse_double(text: str) -> float:
    """Parse the leading number of text, ignoring anything after it."""
    match = _DOUBLE_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def find_theater(theaters: Iterable[Theater], theater_name: str) -> Theater:
    """Return the first theater whose name contains theater_name."""
    for theater in theaters:
        if theater_name in theater.name:
            return theater
    raise ValueError("no such theater name")


def edit(
    theaters: Iterable[Theater],
    theater_name: str,
    field_name: str,
    replacement: str,
) -> Theater:
    """Replace one field of the first matching theater and return that theater."""
    theater = find_theater(theaters, theater_name)
    if field_name in _EDITABLE_TEXT_FIELDS:
        setattr(theater, field_name, replacement)
    elif field_name == "rating":
        theater.rating = _parse_double(replacement)
    else:
        raise ValueError("no such field name")
    return theater


def most_rated(theaters: Iterable[Theater]) -> Theater:
    """Return the first theater with the highest rating above zero.

    An empty theater is returned when no rating is above zero.
    """
    best = Theater()
    for theater in theaters:
        if best.rating < theater.rating:
            best = theater
    return best


def greater_than(theaters: Iterable[Theater], threshold: float) -> list[Theater]:
    """Return the theaters rated strictly above threshold, in order."""
    return [theater for theater in theaters if theater.rating > threshold]


def greater_than_theater(theaters: Sequence[Theater], theater_name: str) -> list[Theater]:
    """Return the theaters rated strictly above the first theater matching the name."""
    reference = find_theater(theaters, theater_name)
    return greater_than(theaters, reference.rating)


def sort_by(
    theaters: MutableSequence[Theater],
    field: str,
    ascending: bool = True,
) -> None:
    """Sort theaters in place by id, name, director or rating."""
    if field not in _SORT_FIELDS:
        raise ValueError(f"cannot sort by {field!r}")
    ordered = sorted(
        theaters, key=lambda theater: getattr(theater, field), reverse=not ascending
    )
    theaters[:] = ordered