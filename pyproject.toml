[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tbalab"
version = "0.1.0"
description = "Small object-oriented exercises: a theater database shell, vehicles, shapes, operator helpers and contest tasks"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "object-oriented", "theater", "geometry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tbalab-theater = "tbalab.cli:main"
tbalab-vehicles = "tbalab.vehicles:main"
tbalab-geometry = "tbalab.geometry:main"
tbalab-overloads = "tbalab.overloads:main"
tbalab-professions = "tbalab.professions:main"
tbalab-generics = "tbalab.generics:main"

[tool.hatch.build.targets.wheel]
packages = ["tbalab"]

[tool.pytest.ini_options]
addopts = "-ra"
