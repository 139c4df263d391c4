import pytest

from cpsolve.contests import apple_game_winner, crossing, haybale_median, split_max


def test_split_max_all_equal_gives_none():
    assert split_max([5, 5, 5]) is None


def test_split_max_marks_first_maximum_only():
    result = split_max([3, 1, 3])
    assert len(result) == 3
    assert result[0] == 2
    assert result.count(2) == 1
    assert set(result) <= {1, 2}


def test_split_max_uses_both_groups():
    result = split_max([4, 9, 2, 9, 1])
    assert set(result) == {1, 2}
    assert result.index(2) == 1


def test_split_max_empty_raises():
    with pytest.raises(ValueError):
        split_max([])


def test_apple_game_parity_decides():
    assert apple_game_winner([1, 2], 1) == "Tom"
    assert apple_game_winner([2, 2], 1) == "Jerry"


def test_apple_game_large_spread_goes_to_jerry():
    assert apple_game_winner([1, 10], 1) == "Jerry"
    assert apple_game_winner([1, 10], 8) == "Tom"


def test_apple_game_ignores_order():
    values = [7, 3, 5, 4]
    assert apple_game_winner(values, 3) == apple_game_winner(list(reversed(values)), 3)


def test_apple_game_empty_raises():
    with pytest.raises(ValueError):
        apple_game_winner([], 1)


def test_crossing_empty_lanes_scale_with_lane_count():
    one = crossing(1, 0, [[]])
    assert crossing(2, 0, [[], []]) == 2 * one
    assert crossing(1, 2, [[], [], []]) == 3 * one


def test_crossing_far_car_leaves_start_free():
    assert crossing(1, 0, [[10**10]]) == 0


def test_crossing_blocking_car_delays_by_its_window():
    base = crossing(1, 0, [[]])
    assert crossing(1, 0, [[5 * 10**9]]) == 5 * 10**9 + base


def test_crossing_lane_count_must_match():
    with pytest.raises(ValueError):
        crossing(1, 1, [[]])


def test_haybale_full_cover_counts_instructions():
    instructions = [(1, 6)] * 3
    assert haybale_median(5, instructions) == len(instructions)


def test_haybale_ignores_instruction_order():
    instructions = [(1, 6), (2, 4), (3, 5), (1, 3)]
    assert haybale_median(5, instructions) == haybale_median(5, instructions[::-1])


def test_haybale_too_few_stacks_raises():
    with pytest.raises(ValueError):
        haybale_median(2, [(1, 2)])


def test_haybale_out_of_range_raises():
    with pytest.raises(ValueError):
        haybale_median(4, [(1, 9)])