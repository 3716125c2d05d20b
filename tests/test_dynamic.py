import random

import pytest

from algoshelf.dynamic import (
    knapsack_bottom_up,
    knapsack_top_down,
    longest_common_subsequence,
    longest_palindromic_subsequence,
    longest_subarray_with_sum,
    max_subarray_sum,
    min_deletions_to_palindrome,
)


@pytest.mark.parametrize("function", [knapsack_top_down, knapsack_bottom_up])
def test_knapsack_source_example(function):
    assert function([10, 20, 10, 15], [2, 2, 3, 1], 30) == 55


def test_knapsack_variants_agree():
    rng = random.Random(7)
    for _ in range(50):
        count = rng.randint(0, 8)
        prices = [rng.randint(0, 30) for _ in range(count)]
        weights = [rng.randint(1, 10) for _ in range(count)]
        capacity = rng.randint(0, 25)
        top = knapsack_top_down(prices, weights, capacity)
        assert top == knapsack_bottom_up(prices, weights, capacity)
        assert 0 <= top <= sum(prices)


@pytest.mark.parametrize("function", [knapsack_top_down, knapsack_bottom_up])
def test_knapsack_everything_fits_takes_all(function):
    prices = [3, 9, 4]
    weights = [1, 2, 3]
    assert function(prices, weights, sum(weights)) == sum(prices)


@pytest.mark.parametrize("function", [knapsack_top_down, knapsack_bottom_up])
def test_knapsack_zero_capacity(function):
    assert function([5, 6], [0, 1], 0) == 0


@pytest.mark.parametrize("function", [knapsack_top_down, knapsack_bottom_up])
def test_knapsack_errors(function):
    with pytest.raises(ValueError):
        function([1, 2], [1], 5)
    with pytest.raises(ValueError):
        function([1], [1], -1)


@pytest.mark.parametrize("first,second,expected", [("baz", "axyz", 2), ("aggtab", "gxtxayb", 4)])
def test_lcs_source_examples(first, second, expected):
    assert longest_common_subsequence(first, second) == expected


def test_lcs_invariants():
    rng = random.Random(3)
    for _ in range(30):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 10)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 10)))
        value = longest_common_subsequence(a, b)
        assert value == longest_common_subsequence(b, a)
        assert value <= min(len(a), len(b))
        assert longest_common_subsequence(a, a) == len(a)


def test_palindrome_source_examples():
    assert longest_palindromic_subsequence("aebcbda") == 5
    assert min_deletions_to_palindrome("aebcbda") == 2
    assert min_deletions_to_palindrome("krishna") == 6


def test_palindrome_needs_no_deletions():
    assert min_deletions_to_palindrome("racecar") == 0
    assert min_deletions_to_palindrome("") == 0


@pytest.mark.parametrize("values,expected", [([4, 1, -3, 7, 12], 21), ([-1, -4, -5, 8, 7, 9], 24)])
def test_max_subarray_source_examples(values, expected):
    assert max_subarray_sum(values) == expected


def test_max_subarray_all_non_negative_is_total():
    values = [3, 0, 8, 2]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_all_negative_is_largest():
    values = [-7, -2, -9]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_empty():
    assert max_subarray_sum([]) == 0


def test_max_subarray_at_least_every_element():
    rng = random.Random(11)
    for _ in range(30):
        values = [rng.randint(-10, 10) for _ in range(rng.randint(1, 12))]
        assert max_subarray_sum(values) >= max(values)


def test_longest_subarray_source_example():
    assert longest_subarray_with_sum([10, 5, 2, 7, 1, 9], 15) == 4


def test_longest_subarray_whole_array():
    values = [1, 2, 3, 4]
    assert longest_subarray_with_sum(values, sum(values)) == len(values)


def test_longest_subarray_none():
    assert longest_subarray_with_sum([1, 2, 3], 100) == 0
    assert longest_subarray_with_sum([], 5) == 0