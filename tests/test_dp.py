import pytest

from cpsolve.dp import (
    array_description,
    book_shop,
    coin_combinations,
    hoof_paper_scissors,
    increasing_subsequence,
    reachable_subset_sums,
    removing_digits,
)


def test_reachable_subset_sums_single_coin():
    assert reachable_subset_sums([5], 5) == [0, 5]
    assert reachable_subset_sums([5], 4) == [0]


def test_reachable_subset_sums_invariants():
    coins = [5, 6, 1, 10, 12, 2]
    k = 18
    sums = reachable_subset_sums(coins, k)
    assert sums == sorted(set(sums))
    assert sums[0] == 0
    assert all(0 <= x <= k for x in sums)
    assert all(coin in sums for coin in coins if coin <= k)
    assert set(reachable_subset_sums(coins, k - 3)) <= set(sums)


def test_reachable_subset_sums_rejects_negative_k():
    with pytest.raises(ValueError):
        reachable_subset_sums([1], -1)


def test_book_shop_example():
    assert book_shop([4, 8, 5, 3], [5, 12, 8, 1], 10) == 13


def test_book_shop_invariants():
    prices = [4, 8, 5, 3]
    pages = [5, 12, 8, 1]
    assert book_shop(prices, pages, sum(prices)) == sum(pages)
    assert book_shop([7], [9], 6) == book_shop([], [], 6)
    results = [book_shop(prices, pages, budget) for budget in range(sum(prices) + 1)]
    assert results == sorted(results)


def test_book_shop_rejects_bad_input():
    with pytest.raises(ValueError):
        book_shop([1, 2], [3], 5)
    with pytest.raises(ValueError):
        book_shop([1], [3], -1)


def test_coin_combinations_example():
    assert coin_combinations([2, 3, 5], 9) == 3


def test_coin_combinations_edge_cases():
    assert coin_combinations([2], 3) == coin_combinations([], 3)
    assert coin_combinations([1], 40) == coin_combinations([], 0)
    assert coin_combinations([3, 7], -2) == coin_combinations([], 1)


def test_coin_combinations_rejects_zero_coin():
    with pytest.raises(ValueError):
        coin_combinations([0, 1], 4)


def test_removing_digits_example():
    assert removing_digits(27) == 5


def test_removing_digits_invariants():
    assert removing_digits(0) == 0
    for digit in range(1, 10):
        assert removing_digits(digit) == removing_digits(digit - digit) + 1
    for n in range(1, 120):
        for d in {int(c) for c in str(n)} - {0}:
            assert removing_digits(n) <= removing_digits(n - d) + 1


def test_removing_digits_rejects_negative():
    with pytest.raises(ValueError):
        removing_digits(-5)


def test_array_description_single_unknown():
    assert array_description([0], 7) == 7


def test_array_description_split_over_first_value():
    rest = [0, 2, 0]
    upper = 4
    total = array_description([0, *rest], upper)
    assert total == sum(array_description([v, *rest], upper) for v in range(1, upper + 1))


def test_array_description_fixed_arrays():
    assert array_description([1, 2, 2, 3], 3) == array_description([3], 3)
    assert array_description([1, 3], 3) == array_description([5], 3)


def test_array_description_rejects_empty():
    with pytest.raises(ValueError):
        array_description([], 3)


def test_hoof_paper_scissors_without_switches():
    moves = "PPHPSHH"
    assert hoof_paper_scissors(moves, 0) == max(moves.count(m) for m in "HPS")


def test_hoof_paper_scissors_invariants():
    moves = "PPHPSSHPHS"
    results = [hoof_paper_scissors(moves, k) for k in range(6)]
    assert results == sorted(results)
    assert all(r <= len(moves) for r in results)
    assert hoof_paper_scissors("", 2) == hoof_paper_scissors("", 0)
    assert hoof_paper_scissors("HPS", 2) == len("HPS")


def test_hoof_paper_scissors_rejects_bad_input():
    with pytest.raises(ValueError):
        hoof_paper_scissors("HXP", 1)
    with pytest.raises(ValueError):
        hoof_paper_scissors("HP", -1)


def test_increasing_subsequence_sorted_and_reversed():
    values = [1, 4, 6, 9, 12]
    assert increasing_subsequence(values) == len(values)
    assert increasing_subsequence(reversed(values)) == increasing_subsequence(values[:1])
    assert increasing_subsequence([]) == 0


def test_increasing_subsequence_counts_equal_values():
    values = [2, 2, 2, 2]
    assert increasing_subsequence(values) == len(values)


def test_increasing_subsequence_bounds():
    values = [3, 8, 2, 1, 5, 5, 9, 4]
    length = increasing_subsequence(values)
    assert 1 <= length <= len(values)
    assert increasing_subsequence(values + [100]) == length + 1