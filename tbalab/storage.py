"""Loading theaters from JSON files and saving them back."""

from __future__ import annotations

import json
from os import PathLike
from typing import Any, Iterable, Union

from .theater import Theater

PathType = Union[str, "PathLike[str]"]


def _require(record: dict, key: str, kind: type | tuple[type, ...]) -> Any:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"field {key!r} has the wrong type: {value!r}")
    return value


def load_theaters(path: PathType) -> list[Theater]:
    """Read the theaters listed under the "theaters" key of a JSON file."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict) or "theaters" not in data:
        raise KeyError("theaters")
    return [
        Theater(
            id=_require(record, "id", int),
            name=_require(record, "name", str),
            director=_require(record, "director", str),
            address=_require(record, "address", str),
            rating=float(_require(record, "rating", (int, float))),
        )
        for record in data["theaters"]
    ]


def save_theaters(path: PathType, theaters: Iterable[Theater]) -> None:
    """Write theaters as JSON under a "theaters" key, indented by four spaces.

    With no theaters at all the file holds just null.
    """
    records = [
        {
            "id": theater.id,
            "name": theater.name,
            "director": theater.director,
            "address": theater.address,
            "rating": float(theater.rating),
        }
        for theater in theaters
    ]
    document = {"theaters": records} if records else None
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(json.dumps(document, indent=4, sort_keys=True, ensure_ascii=False))
        handle.write("\n")