import pytest

from lines.core.line_matcher import Direction, DirectionResult
from lines.core.scoring import (
    DIRECTION_COUNT_MULTIPLIERS,
    compute_score,
    length_multiplier,
    next_combo,
)


def run(direction, length):
    return DirectionResult(direction=direction, cells=[(i, 0) for i in range(length)])


def empty(direction):
    return DirectionResult(direction=direction)


def test_single_direction_of_five():
    results = [run(Direction.HORIZONTAL, 5), empty(Direction.VERTICAL),
               empty(Direction.DIAGONAL_DOWN), empty(Direction.DIAGONAL_UP)]
    assert compute_score(results, 5, 1) == 5


def test_two_directions_of_five():
    results = [run(Direction.HORIZONTAL, 5), run(Direction.VERTICAL, 5),
               empty(Direction.DIAGONAL_DOWN), empty(Direction.DIAGONAL_UP)]
    assert compute_score(results, 5, 1) == 15


def test_three_directions_use_two_and_a_half():
    results = [run(Direction.HORIZONTAL, 5), run(Direction.VERTICAL, 5),
               run(Direction.DIAGONAL_DOWN, 5), empty(Direction.DIAGONAL_UP)]
    assert compute_score(results, 5, 1) == 37


def test_four_directions_jackpot():
    results = [run(direction, 5) for direction in Direction]
    assert compute_score(results, 5, 1) == 20 * 69


@pytest.mark.parametrize(
    "length, expected",
    [(5, 1.0), (6, 1.0), (7, 1.5), (8, 1.5), (9, 2.0)],
)
def test_length_multiplier_steps_every_two_extra(length, expected):
    assert length_multiplier(length, 5) == expected


def test_long_run_bonus():
    # 7 pieces: 7 * 1.5 = 10.5 -> 10
    assert compute_score([run(Direction.HORIZONTAL, 7)], 5, 1) == 10


def test_flattened_direction_list_counts_as_one_run():
    # Two separate runs of five in the same direction are scored as one list of ten.
    assert compute_score([run(Direction.HORIZONTAL, 10)], 5, 1) == 10 * 2.0


def test_combo_multiplies_and_floors():
    assert compute_score([run(Direction.HORIZONTAL, 5)], 5, 1.5) == 7
    assert compute_score([run(Direction.HORIZONTAL, 5)], 5, 2.25) == 11


def test_no_direction_scores_zero():
    assert compute_score([empty(direction) for direction in Direction], 5, 3) == 0


def test_multiplier_table():
    assert DIRECTION_COUNT_MULTIPLIERS == {0: 0, 1: 1, 2: 1.5, 3: 2.5, 4: 69}


def test_next_combo_rounds_to_two_decimals():
    assert next_combo(1.0) == 1.5
    assert next_combo(1.5) == 2.25
    assert next_combo(2.25) == 3.38
    assert next_combo(2.0, growth=2) == 4.0
