"""Day 2: summing IDs made of a repeated digit sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class IdRange:
    """An inclusive range of IDs."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))


def check_id_part1(number: int) -> bool:
    """True when the ID is one digit sequence written exactly twice."""
    digits = str(number)
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return digits[:half] == digits[half:]


def check_id_part2(number: int) -> bool:
    """True when the ID is one digit sequence written at least twice."""
    digits = str(number)
    length = len(digits)
    for size in range(1, length // 2 + 1):
        if length % size == 0 and digits[:size] * (length // size) == digits:
            return True
    return False


def _parse_bound(text: str) -> int:
    text = text.strip()
    if not text.isdigit():
        raise ValueError(f"invalid ID: {text!r}")
    return int(text)


def parse_ranges(text: str) -> list[IdRange]:
    """Parse a comma separated list of ranges such as ``11-22``."""
    ranges = []
    for pair in text.split(","):
        start, sep, end = pair.partition("-")
        if not sep:
            raise ValueError(f"range without '-': {pair!r}")
        ranges.append(IdRange(_parse_bound(start), _parse_bound(end)))
    return ranges


def solve(text: str) -> tuple[int, int]:
    """Return the sums of the IDs that match each rule."""
    part1 = 0
    part2 = 0
    for id_range in parse_ranges(text):
        for number in id_range:
            if check_id_part1(number):
                part1 += number
            if check_id_part2(number):
                part2 += number
    return part1, part2