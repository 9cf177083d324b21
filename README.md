# tbalab

A collection of small object-oriented exercises in one package:

- **Theater database shell**: `tbalab.cli`, `tbalab.theater`, `tbalab.algorithms`
  and `tbalab.storage`. It loads theaters from a JSON file. From an interactive
  prompt you can list, filter, sort, edit and save them.
- **Vehicles** (`tbalab.vehicles`): `Vehicle`, `Car` and `Truck`, with
  `driving_range()` and `transportation_cost()`.
- **Geometry** (`tbalab.geometry`): an abstract `Shape` and the shapes `Point`,
  `Line` and `Circle`, each with `length()` and `area()`.
- **Operator helpers** (`tbalab.overloads`): a `Box` and a coloured `Point`.
- **Professions** (`tbalab.professions`): `Courier` and `SoftwareEngineer`,
  both built on an abstract `Profession`.
- **Generic helpers** (`tbalab.generics`): `magnitude`, `maximum`,
  `count_unique`, `total`, `count_equal`, `count_not_minmax` and
  `merged_sorted`.
- **Contest tasks**:
  - `tbalab.contest_numbers`: `number_range`, `prefix_maxima`,
    `nearest_square` and `special_index`.
  - `tbalab.contest_boxes`: `StorageBox`.
  - `tbalab.contest_points`: `GridPoint`.
  - `tbalab.contest_stores`: `Product` and `Store`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The theater shell

```
tbalab-theater [name] [--data-dir DIR]
```

The shell loads `DIR/<name>.json`. The default name is `theater` and the default
directory is `../data`. The file holds an object with a `theaters` list, and each
entry has `id`, `name`, `director`, `address` and `rating`.

After loading, the shell reads commands line by line until `--exit` or the end of
input. A command that is empty, unknown or malformed prints an error to stderr,
and the shell carries on.

| Command | Effect |
| --- | --- |
| `--list` | print all theaters |
| `--greater-than X` | print the theaters rated above the number `X` |
| `--most-rated` | print the highest-rated theater |
| `--edit` | ask for part of a theater's name, a field and a new value |
| `--sort-by-id`, `--sort-by-rating`, `--sort-by-name`, `--sort-by-director` | sort in ascending order; add `-desc` for descending order |
| `--save` | write the theaters back to the file they were loaded from |
| `--save name` | write the theaters to `DIR/name.json` |
| `--friend` | print the name of the last theater |
| `--help` | list the commands |
| `--exit` | quit |

`--edit` changes the first theater whose name contains the text you enter.

`--save` with no theaters at all writes `null` to the file.

The same pieces can be used as a library:

```python
from tbalab.theater import Theater
from tbalab.algorithms import greater_than, greater_than_theater, sort_by, most_rated

theaters = [
    Theater(1, "Bolshoi", "A", "Moscow", 9.5),
    Theater(2, "Mariinsky", "B", "St Petersburg", 9.0),
]
sort_by(theaters, "rating", True)
print([t.name for t in greater_than(theaters, 9.2)])
print([t.name for t in greater_than_theater(theaters, "Mariinsky")])
print(most_rated(theaters).describe_shifted())
```

`tbalab.storage.load_theaters(path)` reads a theater file.
`tbalab.storage.save_theaters(path, theaters)` writes one with four-space
indentation.

## Demonstrations

Each of these commands prints a short walkthrough of its module:

```
tbalab-vehicles
tbalab-geometry
tbalab-overloads
tbalab-professions
tbalab-generics
```

## What is not included

The contest modules are library code only. They have no commands and do not read
their input from stdin. You build the objects yourself, for example with
`StorageBox.parse` or `GridPoint.parse`, and call their methods.

The theater shell's `--greater-than` accepts only a number. To compare against a
theater by name, call `greater_than_theater` from Python.