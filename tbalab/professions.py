"""Professions that report their salary."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Profession(ABC):
    """A named worker with a salary."""

    name: str = ""
    salary: float = 0.0

    @abstractmethod
    def salary_line(self) -> str:
        """Return the salary report, followed by a blank line."""

    def _report(self, title: str) -> str:
        return f"{title} {self.name}'s salary is {self.salary:g}\n\n"


@dataclass
class Courier(Profession):
    """A courier."""

    def salary_line(self) -> str:
        return self._report("Courier")


@dataclass
class SoftwareEngineer(Profession):
    """A software engineer."""

    def salary_line(self) -> str:
        return self._report("Software Engineer")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the salaries of two sample workers."""
    workers = (SoftwareEngineer("Bob", 250.0), Courier("Alice", 300.0))
    sys.stdout.write("".join(worker.salary_line() for worker in workers))
    return 0


if __name__ == "__main__":
    sys.exit(main())