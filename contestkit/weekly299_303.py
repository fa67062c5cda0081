"""Matrix checks, house placements, piece moves, pair counts, trimmed queries and food ratings."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from math import gcd

MOD = 1_000_000_007


def check_x_matrix(grid: list[list[int]]) -> bool:
    """Return True when exactly the two diagonals of ``grid`` hold non-zero values."""
    if not grid:
        raise ValueError("grid must have at least one row")
    n = len(grid[0])
    return all(
        (value != 0) == (i == j or i + j == n - 1)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
    )


def _fibonacci(n: int) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, (a + b) % MOD
    return a


def count_house_placements(n: int) -> int:
    """Count house placements on both sides of an ``n``-plot street, modulo 1e9+7."""
    one_side = _fibonacci(n + 2)
    return one_side * one_side % MOD


def can_change(start: str, target: str) -> bool:
    """Return True if ``start`` can become ``target`` by moving L pieces left and R pieces right."""
    if len(start) != len(target):
        raise ValueError("start and target must have the same length")
    start_pieces = [(ch, i) for i, ch in enumerate(start) if ch != "_"]
    target_pieces = [(ch, i) for i, ch in enumerate(target) if ch != "_"]
    if len(start_pieces) != len(target_pieces):
        return False
    for (piece, origin), (wanted, destination) in zip(start_pieces, target_pieces):
        if piece != wanted:
            return False
        if piece == "L" and origin < destination:
            return False
        if piece == "R" and origin > destination:
            return False
    return True


def number_of_pairs(nums: list[int]) -> list[int]:
    """Return ``[pairs formed, numbers left over]`` after pairing equal values."""
    counts = Counter(nums).values()
    return [sum(c // 2 for c in counts), sum(c % 2 for c in counts)]


def _digit_sum(value: int) -> int:
    return sum(int(digit) for digit in str(value))


def maximum_sum(nums: list[int]) -> int:
    """Return the largest sum of two numbers with equal digit sums, or -1."""
    groups: defaultdict[int, list[int]] = defaultdict(list)
    for value in nums:
        groups[_digit_sum(value)].append(value)
    best = -1
    for members in groups.values():
        if len(members) >= 2:
            best = max(best, sum(heapq.nlargest(2, members)))
    return best


def smallest_trimmed_numbers(nums: list[str], queries: list[list[int]]) -> list[int]:
    """Answer ``[k, trim]`` queries with the index of the k-th smallest trimmed number."""
    answers = []
    for k, trim in queries:
        keyed = []
        for index, number in enumerate(nums):
            if trim > len(number):
                raise ValueError("trim exceeds the length of a number")
            keyed.append((number[len(number) - trim:], index))
        answers.append(heapq.nsmallest(k, keyed)[-1][1])
    return answers


def min_operations(nums: list[int], nums_divide: list[int]) -> int:
    """Return the fewest deletions so the smallest of ``nums`` divides all of ``nums_divide``."""
    divisor = gcd(*nums_divide)
    deleted = 0
    for value, count in sorted(Counter(nums).items()):
        if divisor % value == 0:
            return deleted
        if divisor < value:
            return -1
        deleted += count
    return -1


def repeated_character(s: str) -> str:
    """Return the first character whose second occurrence comes earliest."""
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            return ch
        seen.add(ch)
    return "a"


def equal_pairs(grid: list[list[int]]) -> int:
    """Count (row, column) pairs whose contents are equal."""
    rows = Counter(map(tuple, grid))
    return sum(rows[column] for column in zip(*grid))


class FoodRatings:
    """Track food ratings and report the best-rated food of each cuisine."""

    def __init__(self, foods: list[str], cuisines: list[str], ratings: list[int]) -> None:
        self._rating: dict[str, int] = {}
        self._cuisine: dict[str, str] = {}
        self._by_cuisine: defaultdict[str, list[tuple[int, str]]] = defaultdict(list)
        for food, cuisine, rating in zip(foods, cuisines, ratings):
            self._rating[food] = rating
            self._cuisine[food] = cuisine
            heapq.heappush(self._by_cuisine[cuisine], (-rating, food))

    def change_rating(self, food: str, new_rating: int) -> None:
        """Give ``food`` a new rating."""
        if food not in self._cuisine:
            raise KeyError(food)
        self._rating[food] = new_rating
        heapq.heappush(self._by_cuisine[self._cuisine[food]], (-new_rating, food))

    def highest_rated(self, cuisine: str) -> str:
        """Return the best-rated food of ``cuisine``; ties go to the smaller name."""
        heap = self._by_cuisine.get(cuisine)
        if not heap:
            raise KeyError(cuisine)
        while -heap[0][0] != self._rating[heap[0][1]]:
            heapq.heappop(heap)
        return heap[0][1]