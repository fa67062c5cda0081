"""Pair counting, number splits, bit flips, triangular sums and building selection."""

from __future__ import annotations

from itertools import combinations


def count_pairs(nums: list[int], k: int) -> int:
    """Count index pairs i < j with equal values and i * j divisible by ``k``."""
    return sum(
        1
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a == b and (i * j) % k == 0
    )


def sum_of_three(num: int) -> list[int]:
    """Return three consecutive integers summing to ``num``, or an empty list."""
    if num % 3 != 0:
        return []
    middle = num // 3
    return [middle - 1, middle, middle + 1]


def maximum_even_split(n: int) -> list[int]:
    """Split ``n`` into the largest number of distinct positive even integers."""
    if n % 2 != 0:
        return []
    parts: list[int] = []
    total = 0
    step = 2
    while total < n:
        total += step
        parts.append(step)
        step += 2
    excess = total - n
    if excess in parts:
        parts.remove(excess)
    return sorted(parts)


def min_bit_flips(start: int, goal: int) -> int:
    """Return the number of bit flips needed to turn ``start`` into ``goal``."""
    return bin(start ^ goal).count("1")


def triangular_sum(nums: list[int]) -> int:
    """Repeatedly replace the row by pairwise sums modulo 10 until one value is left."""
    if not nums:
        raise ValueError("triangular_sum needs at least one number")
    row = list(nums)
    while len(row) > 1:
        row = [(a + b) % 10 for a, b in zip(row, row[1:])]
    return row[0]


def number_of_ways(s: str) -> int:
    """Count the ways to choose three buildings with alternating types ("010" or "101")."""
    zeros_total = s.count("0")
    ones_total = s.count("1")
    zeros_seen = ones_seen = 0
    ways = 0
    for ch in s:
        if ch == "1":
            ways += zeros_seen * (zeros_total - zeros_seen)
            ones_seen += 1
        elif ch == "0":
            ways += ones_seen * (ones_total - ones_seen)
            zeros_seen += 1
    return ways