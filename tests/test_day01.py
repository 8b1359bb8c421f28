import pytest

from advent_solver.day01 import (
    Direction,
    Lock,
    LockOperation,
    parse_input,
    solve,
)

EXAMPLE = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"


def test_example():
    assert solve(EXAMPLE) == (3, 6)


def test_parse_input():
    operations = parse_input("L68\nR14\n")
    assert operations == [
        LockOperation(Direction.LEFT, 68),
        LockOperation(Direction.RIGHT, 14),
    ]


def test_parse_invalid_direction():
    with pytest.raises(ValueError):
        parse_input("X5\n")


def test_parse_invalid_distance():
    with pytest.raises(ValueError):
        parse_input("Lfive\n")


def test_parse_negative_distance_rejected():
    with pytest.raises(ValueError):
        parse_input("L-5\n")


def test_lock_starts_at_fifty():
    lock = Lock()
    assert lock.position == 50
    assert lock.is_at_zero() is False


def test_turn_left_wraps_once():
    lock = Lock()
    assert lock.apply_operation(LockOperation(Direction.LEFT, 68)) == 1
    assert lock.position == 82


def test_landing_on_zero_is_not_an_overflow():
    lock = Lock()
    assert lock.apply_operation(LockOperation(Direction.LEFT, 50)) == 0
    assert lock.is_at_zero()


def test_full_turns_count_as_overflows():
    lock = Lock()
    assert lock.apply_operation(LockOperation(Direction.RIGHT, 1000)) == 10
    assert lock.position == 50


def test_leaving_zero_does_not_overflow():
    lock = Lock(position=0)
    assert lock.apply_operation(LockOperation(Direction.LEFT, 5)) == 0
    assert lock.position == 95


def test_right_turn_to_exact_hundred_is_zero():
    lock = Lock()
    assert lock.apply_operation(LockOperation(Direction.RIGHT, 50)) == 0
    assert lock.position == 0


def test_single_stop_at_zero():
    assert solve("L50\n") == (1, 1)