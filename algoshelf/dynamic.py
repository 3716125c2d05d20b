"""Dynamic programming: knapsack, common subsequences and subarray sums."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _check_knapsack(prices: Sequence[int], weights: Sequence[int], capacity: int) -> None:
    if len(prices) != len(weights):
        raise ValueError("prices and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")


def knapsack_top_down(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total price of items fitting in ``capacity``, by memoised recursion."""
    _check_knapsack(prices, weights, capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        excluded = best(count - 1, room)
        weight = weights[count - 1]
        if room >= weight:
            return max(prices[count - 1] + best(count - 1, room - weight), excluded)
        return excluded

    return best(len(prices), capacity)


def knapsack_bottom_up(prices: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total price of items fitting in ``capacity``, from a single table row."""
    _check_knapsack(prices, weights, capacity)
    row = [0] * (capacity + 1)
    for price, weight in zip(prices, weights):
        for room in range(capacity, max(weight, 1) - 1, -1):
            row[room] = max(row[room], price + row[room - weight])
    return row[capacity]


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Length of the longest subsequence common to ``first`` and ``second``."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that reads the same backwards."""
    return longest_common_subsequence(text, text[::-1])


def min_deletions_to_palindrome(text: str) -> int:
    """Fewest characters to delete from ``text`` to leave a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run of ``values`` (Kadane's algorithm).

    With no negative values the whole sum is returned (0 when empty); with
    only negative values, the largest one.
    """
    if all(value >= 0 for value in values):
        return sum(values)
    if all(value < 0 for value in values):
        return max(values)
    running = best = 0
    for value in values:
        if running + value <= 0:
            running = 0
        else:
            running += value
            best = max(best, running)
    return best


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Length of the longest contiguous run of ``values`` summing to ``k``; 0 if none."""
    seen: dict[int, int] = {}
    prefix = 0
    length = 0
    for index, value in enumerate(values):
        prefix += value
        if prefix == k:
            length = max(length, index + 1)
        if prefix - k in seen:
            length = max(length, index - seen[prefix - k])
        else:
            seen[prefix] = index
    return length