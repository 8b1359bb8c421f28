# advent-solver

Solutions to a set of daily programming puzzles, plus a small runner that
solves the days you ask for and reports how long each one took.

Puzzle days are numbered 1 to 25. Days 1 to 4 have solutions.

## Installation

```
pip install .
```

## Running from the command line

Put each day's puzzle input in a file named `dayNN-input.txt` (for example
`day01-input.txt`), then pass one or more day numbers:

```
advent-solver 1 2 3 4
advent-solver --input-dir inputs 1 2
```

Options:

- `days`: the day numbers to solve. Each must be a whole number from 0 to
  255; numbers outside 1 to 25 are then discarded. If none are left, the
  runner says so and exits with status 0.
- `--input-dir`: the directory holding the `dayNN-input.txt` files
  (default: the current directory).

For every remaining day the runner prints both answers and the time the
solver took in milliseconds, and at the end the total runtime across all
days. If a day has no solution yet, or its input file cannot be read, the
runner prints an error to standard error and exits with status 1.

## Using the solutions as a library

Each solved day has a module with a `solve(text)` function. It takes the
puzzle input as a string and returns the answers to both parts as a tuple of
integers:

```python
from advent_solver import day01

part1, part2 = day01.solve("L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n")
print(part1, part2)  # 3 6
```

Malformed input raises `ValueError`.

The days in brief:

- `advent_solver.day01`: a dial lock numbered 0 to 99, starting at 50. Part 1
  counts how often a turn ends on 0, part 2 how often the dial passes 0 at all.
  See `Lock` (with `is_at_zero()` and `apply_operation(operation)`),
  `LockOperation`, `Direction` and `parse_input`.
- `advent_solver.day02`: sums the IDs in ranges that consist of a repeated
  digit sequence: repeated exactly twice (`check_id_part1`) or at least twice
  (`check_id_part2`). Ranges are read with `parse_ranges` into iterable
  `IdRange` values.
- `advent_solver.day03`: picks the largest number that can be built from a
  bank of digits without reordering them, with 2 digits (`solve_part1`) or 12
  digits (`solve_part2`). Banks are read with `parse_banks`.
- `advent_solver.day04`: a grid of paper rolls (`@`). Part 1 counts the rolls
  with fewer than four neighbours; part 2 keeps removing such rolls until none
  can be removed. See `RollPosition` (with `neighbours()`), `parse_rolls`,
  `count_neighbours` and `remove_accessible`.

The runner lives in `advent_solver.runner`:

- `get_day_solver(day)` returns the `solve` function for a day. It raises
  `ValueError` for a day outside 1 to 25 and `LookupError` for a day that has
  no solution yet.
- `read_input(day, input_dir=".")` reads `dayNN-input.txt` from `input_dir`.
- `main(argv=None)` is what the `advent-solver` command calls; it returns the
  exit status.

## What it does not do

Only days 1 to 4 are solved. Asking for any of days 5 to 25 stops the runner
with an error. Puzzle inputs are not included or fetched; you supply the
input files yourself.

## Tests

```
pip install ".[test]"
pytest
```