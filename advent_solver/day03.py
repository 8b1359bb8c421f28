"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations

from typing import Sequence

PART2_DIGITS = 12


def parse_banks(text: str) -> list[list[int]]:
    """Parse one bank of single-digit battery charges per line."""
    banks = []
    for line in text.splitlines():
        bad = [c for c in line if c not in "0123456789"]
        if bad:
            raise ValueError(f"invalid battery charge: {bad[0]!r}")
        banks.append([int(c) for c in line])
    return banks


def _first_max(values: Sequence[int], offset: int = 0) -> tuple[int, int]:
    """Index (shifted by offset) and value of the first largest element."""
    if not values:
        raise ValueError("no batteries to pick from")
    best = max(values)
    return values.index(best) + offset, best


def solve_part1(bank: Sequence[int]) -> int:
    """Largest two-digit number formed by two batteries in order."""
    bank = list(bank)
    first_idx, first = _first_max(bank)
    if first_idx == len(bank) - 1:
        first_idx, first = _first_max(bank[:-1])
    _, second = _first_max(bank[first_idx + 1:], first_idx + 1)
    return first * 10 + second


def solve_part2(bank: Sequence[int]) -> int:
    """Largest twelve-digit number formed by batteries in order."""
    remaining = list(bank)
    if len(remaining) < PART2_DIGITS:
        raise ValueError(f"bank needs at least {PART2_DIGITS} batteries")
    result = 0
    for still_needed in range(PART2_DIGITS - 1, -1, -1):
        window = remaining[: len(remaining) - still_needed]
        idx, value = _first_max(window)
        result = result * 10 + value
        remaining = remaining[idx + 1:]
    return result


def solve(text: str) -> tuple[int, int]:
    """Return the total joltage for both parts."""
    part1 = 0
    part2 = 0
    for bank in parse_banks(text):
        part1 += solve_part1(bank)
        part2 += solve_part2(bank)
    return part1, part2