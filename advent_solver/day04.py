"""Day 4: removing paper rolls that a forklift can reach."""

from __future__ import annotations

from dataclasses import dataclass

ROLL = "@"
MAX_NEIGHBOURS = 4

_OFFSETS = (
    (1, 1), (1, 0), (1, -1),
    (0, 1), (0, -1),
    (-1, 1), (-1, 0), (-1, -1),
)


@dataclass(frozen=True, order=True)
class RollPosition:
    """Grid position of a paper roll."""

    x: int
    y: int

    def neighbours(self) -> tuple[RollPosition, ...]:
        """The eight surrounding positions."""
        return tuple(RollPosition(self.x + dx, self.y + dy) for dx, dy in _OFFSETS)


def parse_rolls(text: str) -> set[RollPosition]:
    """Collect the positions of every ``@`` in the grid."""
    return {
        RollPosition(x, y)
        for y, line in enumerate(text.splitlines())
        for x, char in enumerate(line)
        if char == ROLL
    }


def count_neighbours(rolls: set[RollPosition], position: RollPosition) -> int:
    """Number of rolls next to the given position."""
    return sum(1 for neighbour in position.neighbours() if neighbour in rolls)


def remove_accessible(rolls: set[RollPosition]) -> int:
    """Remove, in place, every roll with fewer than four neighbours; return how many."""
    accessible = {
        roll for roll in rolls if count_neighbours(rolls, roll) < MAX_NEIGHBOURS
    }
    rolls -= accessible
    return len(accessible)


def solve(text: str) -> tuple[int, int]:
    """Return the rolls removable at once, and those removable in total."""
    rolls = parse_rolls(text)
    part1 = remove_accessible(rolls)
    part2 = part1
    while removed := remove_accessible(rolls):
        part2 += removed
    return part1, part2