"""Day 1: counting how often a circular dial lock passes or stops at zero."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DIAL_SIZE = 100
START_POSITION = 50
MAX_DISTANCE = 0xFFFF


class Direction(Enum):
    """Turning direction of the dial."""

    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class LockOperation:
    """A single turn of the dial."""

    direction: Direction
    distance: int


@dataclass
class Lock:
    """A dial numbered 0 to 99 that wraps around in both directions."""

    position: int = START_POSITION

    def is_at_zero(self) -> bool:
        return self.position == 0

    def apply_operation(self, operation: LockOperation) -> int:
        """Turn the dial and return how many times it wrapped past zero."""
        was_at_zero = self.is_at_zero()

        full_turns, remainder = divmod(operation.distance, DIAL_SIZE)
        overflows = full_turns

        if operation.direction is Direction.LEFT:
            self.position -= remainder
        else:
            self.position += remainder

        if abs(self.position) == DIAL_SIZE:
            self.position = 0

        if self.position > DIAL_SIZE:
            if not was_at_zero:
                overflows += 1
            self.position -= DIAL_SIZE
        elif self.position < 0:
            if not was_at_zero:
                overflows += 1
            self.position += DIAL_SIZE

        return overflows


def _parse_line(line: str) -> LockOperation:
    line = line.strip()
    if not line:
        raise ValueError("empty operation line")
    head, rest = line[0], line[1:]
    try:
        direction = Direction(head)
    except ValueError:
        raise ValueError(f"invalid direction: {head!r}") from None
    if not rest.lstrip("+").isdigit() or rest.startswith("++"):
        raise ValueError(f"invalid distance: {rest!r}")
    distance = int(rest)
    if distance > MAX_DISTANCE:
        raise ValueError(f"distance out of range: {distance}")
    return LockOperation(direction, distance)


def parse_input(text: str) -> list[LockOperation]:
    """Parse one operation such as ``L68`` or ``R14`` per line."""
    return [_parse_line(line) for line in text.splitlines()]


def solve(text: str) -> tuple[int, int]:
    """Return the stops at zero, and the stops plus passes over zero."""
    lock = Lock()
    times_at_zero = 0
    times_over_zero = 0

    for operation in parse_input(text):
        was_at_zero = lock.is_at_zero()
        times_over_zero += lock.apply_operation(operation)
        if not was_at_zero and lock.is_at_zero():
            times_at_zero += 1

    return times_at_zero, times_at_zero + times_over_zero