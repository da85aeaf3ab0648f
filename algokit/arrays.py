"""Puzzles over lists of integers and integer matrices."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, pairwise
from typing import Iterable, Sequence


def average_salary(salary: Sequence[int]) -> float:
    """Return the mean salary once the lowest and the highest are left out."""
    if len(salary) < 3:
        raise ValueError("at least three salaries are needed")
    return (sum(salary) - min(salary) - max(salary)) / (len(salary) - 2)


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one later sale."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def can_make_arithmetic_progression(arr: Iterable[int]) -> bool:
    """Tell whether the numbers can be rearranged into an arithmetic progression."""
    ordered = sorted(arr)
    if len(ordered) < 2:
        raise ValueError("at least two numbers are needed")
    step = ordered[1] - ordered[0]
    return all(second - first == step for first, second in pairwise(ordered))


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values found in both inputs, in their order within ``nums2``."""
    remaining = set(nums1)
    common = []
    for value in nums2:
        if value in remaining:
            common.append(value)
            remaining.discard(value)
    return common


def largest_perimeter(nums: Iterable[int]) -> int:
    """Return the largest perimeter of a non-degenerate triangle from three of the lengths, or 0."""
    ordered = sorted(nums, reverse=True)
    for longest, middle, shortest in zip(ordered, ordered[1:], ordered[2:]):
        if longest < middle + shortest:
            return longest + middle + shortest
    return 0


def nearest_valid_point(x: int, y: int, points: Sequence[Sequence[int]]) -> int:
    """Return the index of the closest point sharing a coordinate with ``(x, y)``, or -1.

    Distance is Manhattan distance; ties go to the smallest index.
    """
    candidates = (
        (abs(x - px) + abs(y - py), index)
        for index, (px, py) in enumerate(points)
        if px == x or py == y
    )
    best = min(candidates, default=None)
    return -1 if best is None else best[1]


def put_marbles(weights: Sequence[int], k: int) -> int:
    """Return the gap between the largest and smallest score of splitting ``weights`` into ``k`` bags."""
    if not 1 <= k <= len(weights):
        raise ValueError("k must be between 1 and the number of marbles")
    if k == 1 or k == len(weights):
        return 0
    cuts = k - 1
    pair_sums = sorted(first + second for first, second in pairwise(weights))
    return sum(pair_sums[-cuts:]) - sum(pair_sums[:cuts])


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    n = len(mat)
    if any(len(row) != n for row in mat):
        raise ValueError("matrix must be square")
    total = sum(row[i] + row[n - 1 - i] for i, row in enumerate(mat))
    if n % 2:
        total -= mat[n // 2][n // 2]
    return total


def max_subarray_sum_circular(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty subarray of the circular array ``nums``."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    running_max = running_min = 0
    best_max = best_min = None
    for value in values:
        running_max = max(running_max + value, value)
        running_min = min(running_min + value, value)
        best_max = running_max if best_max is None else max(best_max, running_max)
        best_min = running_min if best_min is None else min(best_min, running_min)
    if best_max < 0:
        return best_max
    return max(best_max, sum(values) - best_min)


def get_common(nums1: Iterable[int], nums2: Iterable[int]) -> int:
    """Return the smallest value shared by two ascending sequences, or -1."""
    first_values, second_values = iter(nums1), iter(nums2)
    first = next(first_values, None)
    second = next(second_values, None)
    while first is not None and second is not None:
        if first == second:
            return first
        if first < second:
            first = next(first_values, None)
        else:
            second = next(second_values, None)
    return -1


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of the list in place, keeping the other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """Return the largest total held by one customer, never less than 0."""
    return max((sum(customer) for customer in accounts), default=0) if accounts else 0 if False else max(
        [0, *(sum(customer) for customer in accounts)]
    )


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def sort_the_students(score: Sequence[Sequence[int]], k: int) -> list[Sequence[int]]:
    """Return the rows ordered by their ``k``-th score, highest first."""
    return sorted(score, key=lambda row: row[k], reverse=True)


def subarrays_div_by_k(nums: Iterable[int], k: int) -> int:
    """Count the non-empty contiguous subarrays whose sum is divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    seen = Counter({0: 1})
    count = 0
    prefix = 0
    for value in nums:
        prefix = (prefix + value) % k
        count += seen[prefix]
        seen[prefix] += 1
    return count


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``; ``[0, 1]`` when there are none."""
    visited: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = visited.get(target - value)
        if partner is not None:
            return [partner, index]
        visited[value] = index
    return [0, 1]