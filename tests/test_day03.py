import pytest

from advent_solver.day03 import parse_banks, solve, solve_part1, solve_part2

EXAMPLE = "987654321111111\n811111111111119\n234234234234278\n818181911112111"


def _bank(digits):
    return [int(c) for c in digits]


def test_example():
    assert solve(EXAMPLE) == (357, 3121910778619)


def test_parse_banks():
    assert parse_banks("12\n907\n") == [[1, 2], [9, 0, 7]]


def test_parse_banks_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_banks("12a\n")


@pytest.mark.parametrize(
    "digits, expected",
    [("987654321111111", 98), ("811111111111119", 89),
     ("234234234234278", 78), ("818181911112111", 92)],
)
def test_solve_part1(digits, expected):
    assert solve_part1(_bank(digits)) == expected


@pytest.mark.parametrize(
    "digits, expected",
    [("987654321111111", 987654321111), ("811111111111119", 811111111119),
     ("234234234234278", 434234234278), ("818181911112111", 888911112111)],
)
def test_solve_part2(digits, expected):
    assert solve_part2(_bank(digits)) == expected


def test_part2_exact_length_keeps_all():
    assert solve_part2(_bank("000000000001")) == 1


def test_part1_single_battery_fails():
    with pytest.raises(ValueError):
        solve_part1([5])


def test_part2_short_bank_fails():
    with pytest.raises(ValueError):
        solve_part2(_bank("12345"))