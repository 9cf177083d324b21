"""Object-oriented exercises: a theater database shell, vehicles, shapes, operator helpers and contest tasks."""

__version__ = "0.1.0"