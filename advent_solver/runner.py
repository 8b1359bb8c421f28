"""Command line entry point that runs the daily puzzle solvers."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Sequence

from advent_solver import day01, day02, day03, day04

Solver = Callable[[str], tuple[int, int]]

FIRST_DAY = 1
LAST_DAY = 25
SEPARATOR = "==================================="
THIN_SEPARATOR = "-----------------------------------"

_SOLVERS: dict[int, Solver] = {
    1: day01.solve,
    2: day02.solve,
    3: day03.solve,
    4: day04.solve,
}


def get_day_solver(day: int) -> Solver:
    """Return the solver for a day between 1 and 25.

    Raises ValueError for a day outside that range and LookupError for a
    day in range that has no solution yet.
    """
    if not FIRST_DAY <= day <= LAST_DAY:
        raise ValueError(f"Day {day} was not even considered to be implemented")
    try:
        return _SOLVERS[day]
    except KeyError:
        raise LookupError(f"day {day} has no solution yet") from None


def read_input(day: int, input_dir: str | Path = ".") -> str:
    """Read the puzzle input for a day, stored as ``dayNN-input.txt``."""
    path = Path(input_dir) / f"day{day:02d}-input.txt"
    return path.read_text(encoding="utf-8")


def _day_arg(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day: {value!r}") from None
    if not 0 <= day <= 255:
        raise argparse.ArgumentTypeError(f"day out of range: {value!r}")
    return day


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent-solver",
        description="Solve the daily puzzles and report their runtimes.",
    )
    parser.add_argument(
        "days",
        nargs="*",
        type=_day_arg,
        help="An array of days, ranging from 1 to 25, that should be solved",
    )
    parser.add_argument(
        "--input-dir",
        default=".",
        help="Directory holding the dayNN-input.txt files",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the requested days, printing both parts and the time taken."""
    args = _build_parser().parse_args(argv)

    days = [day for day in args.days if FIRST_DAY <= day <= LAST_DAY]
    if not days:
        print(
            "Did you forget to specify a day?\n"
            "We threw away the invalid ones that were not between 1 and 25 :D"
        )
        return 0

    total_ns = 0
    for day in days:
        print()
        print(f"Solving day {day}...")
        try:
            solver = get_day_solver(day)
            text = read_input(day, args.input_dir)
        except (LookupError, OSError) as err:
            print(f"error: {err}", file=sys.stderr)
            return 1

        start = time.perf_counter_ns()
        part1, part2 = solver(text)
        elapsed = time.perf_counter_ns() - start
        total_ns += elapsed

        print(SEPARATOR)
        print(f"Part 1: {part1}")
        print(f"Part 2: {part2}")
        print(THIN_SEPARATOR)
        print(f"Took {elapsed / 1_000_000:.4f} ms")
        print(SEPARATOR)
        print()

    print(SEPARATOR)
    print(f"Total runtime: {total_ns / 1_000_000:.4f} ms")
    print(SEPARATOR)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())