"""Interactive console for browsing and editing a theater database."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO

from .algorithms import _parse_double, edit, greater_than, most_rated, sort_by
from .storage import load_theaters, save_theaters
from .theater import (
    Theater,
    field_names,
    format_names,
    format_theaters,
    friend_line,
)

_HELP_SECTIONS = (
    (
        ("--friend", "to showcase friend example"),
    ),
    (
        ("--list", "to print theaters"),
        ("--greater-than X", "to print theaters with rating greater than number X"),
        ("--greater-than theater_name", "to print theaters with rating greater than number X"),
        ("--most-rated", "to print most rated theater"),
    ),
    (
        ("--edit", "to edit theater's info"),
    ),
)

_SORT_SECTION = (
    ("--sort-by-id", "to sort theaters by id"),
    ("--sort-by-rating", "to sort theaters by rating"),
    ("--sort-by-name", "to sort theaters by name"),
    ("--sort-by-director", "to sort theaters by director"),
)

_FILE_SECTION = (
    ("--save", "to save changes"),
    ("--save filename", "to save changes into specific file"),
    ("--exit", "to exit"),
    ("--help", "to list available commands"),
)


def _help_lines(entries: Sequence[tuple[str, str]]) -> str:
    return "".join(f"\t{command:<35}{description}\n" for command, description in entries)


def help_text() -> str:
    """Return the list of console commands."""
    friend, listing, editing = _HELP_SECTIONS
    return (
        _help_lines(friend)
        + _help_lines(listing)
        + "\n"
        + _help_lines(editing)
        + "\n"
        + "\tsorting ascending by default. to change add flag -desc\n\n"
        + _help_lines(_SORT_SECTION)
        + "\n"
        + _help_lines(_FILE_SECTION)
        + "\n"
    )


def split(text: str, delim: str) -> List[str]:
    """Split text at every delim; a trailing empty piece is dropped."""
    parts = text.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


class TheaterShell:
    """Reads commands line by line and applies them to a list of theaters."""

    def __init__(
        self,
        theaters: List[Theater],
        input_path: str | Path,
        data_dir: str | Path,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.theaters = theaters
        self.input_path = Path(input_path)
        self.data_dir = Path(data_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._commands: dict[str, Callable[[List[str]], None]] = {
            "--help": self._help,
            "--friend": self._friend,
            "--list": self._list,
            "--greater-than": self._greater_than,
            "--most-rated": self._most_rated,
            "--edit": self._edit,
            "--sort-by-id": partial(self._sort, "id"),
            "--sort-by-rating": partial(self._sort, "rating"),
            "--sort-by-name": partial(self._sort, "name"),
            "--sort-by-director": partial(self._sort, "director"),
            "--save": self._save,
        }

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        return line[:-1] if line.endswith("\n") else line

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the console should stop.

        Raises ValueError for an empty, unknown or malformed command.
        """
        words = split(line, " ")
        if not words:
            raise ValueError("empty command")
        command, args = words[0], words[1:]
        if command == "--exit":
            return False
        handler = self._commands.get(command)
        if handler is None:
            raise ValueError("unknown command")
        handler(args)
        return True

    def run(self) -> None:
        """Process commands from stdin until --exit or end of input."""
        while True:
            raw = self.stdin.readline()
            if raw == "":
                return
            line = raw[:-1] if raw.endswith("\n") else raw
            try:
                if not self.execute(line):
                    return
            except ValueError as error:
                print(f"Error: {error}. Type --help for commands.", file=sys.stderr)

    def _help(self, args: List[str]) -> None:
        self._write(help_text())

    def _friend(self, args: List[str]) -> None:
        if not self.theaters:
            raise ValueError("no theaters")
        self._write(friend_line(self.theaters[-1]))

    def _list(self, args: List[str]) -> None:
        self._write(format_theaters(self.theaters))

    def _greater_than(self, args: List[str]) -> None:
        if not args:
            raise ValueError("wrong syntax")
        threshold = _parse_double(args[0])
        self._write(format_theaters(greater_than(self.theaters, threshold)))

    def _most_rated(self, args: List[str]) -> None:
        self._write(most_rated(self.theaters).describe_shifted() + "\n")

    def _edit(self, args: List[str]) -> None:
        if args:
            raise ValueError("wrong syntax")
        self._write("Select theater to edit:\n")
        self._write(format_names(self.theaters))
        theater_name = self._read_line()
        self._write("Select field to edit:\n")
        self._write("".join(f"\t{name}\n" for name in field_names()))
        field_name = self._read_line()
        self._write("Enter replacement:\n")
        replacement = self._read_line()
        edited = edit(self.theaters, theater_name, field_name, replacement)
        self._write(edited.describe_shifted())

    def _sort(self, field: str, args: List[str]) -> None:
        if not args:
            ascending = True
        elif args[0] != "-desc" or len(args) > 1:
            raise ValueError("unknown command")
        else:
            ascending = False
        sort_by(self.theaters, field, ascending)

    def _save(self, args: List[str]) -> None:
        if not args:
            save_theaters(self.input_path, self.theaters)
        elif len(args) == 1:
            save_theaters(self.data_dir / f"{args[0]}.json", self.theaters)
        else:
            raise ValueError("unknown command")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a theater file and start the interactive console."""
    parser = argparse.ArgumentParser(description="Browse and edit a theater database.")
    parser.add_argument("name", nargs="?", default="theater", help="data file name without .json")
    parser.add_argument("--data-dir", default="../data", help="directory holding the data files")
    options = parser.parse_args(argv)

    data_dir = Path(options.data_dir)
    input_path = data_dir / f"{options.name}.json"
    try:
        theaters = load_theaters(input_path)
    except (OSError, ValueError, KeyError, TypeError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    TheaterShell(theaters, input_path, data_dir).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())