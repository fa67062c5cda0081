"""Local maxima, edge scores, pattern numbers, partitions, interval groups and increasing subsequences."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import accumulate, pairwise, permutations


def largest_local(grid: list[list[int]]) -> list[list[int]]:
    """Return the maximum of every 3x3 window of the square ``grid``."""
    n = len(grid)
    return [
        [max(max(row[j:j + 3]) for row in grid[i:i + 3]) for j in range(n - 2)]
        for i in range(n - 2)
    ]


def edge_score(edges: list[int]) -> int:
    """Return the node with the highest edge score; ties go to the smaller node."""
    score = [0] * len(edges)
    for source, destination in enumerate(edges):
        score[destination] += source
    return max(range(len(edges)), key=lambda node: (score[node], -node), default=-1)


def smallest_number(pattern: str) -> str:
    """Return the smallest digit string without repeats that follows an I/D pattern."""
    digits = "".join(chr(ord("0") + i) for i in range(1, len(pattern) + 2))
    for candidate in permutations(digits):
        shape = "".join("I" if b > a else "D" for a, b in pairwise(candidate))
        if shape == pattern:
            return "".join(candidate)
    raise ValueError(f"no number follows the pattern {pattern!r}")


def most_frequent_even(nums: list[int]) -> int:
    """Return the most frequent even number, the smallest on ties, or -1."""
    counts = Counter(value for value in nums if value % 2 == 0)
    return min(counts, key=lambda value: (-counts[value], value), default=-1)


def partition_string(s: str) -> int:
    """Return the fewest substrings that split ``s`` so no substring repeats a character."""
    parts = 1
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            parts += 1
            seen.clear()
        seen.add(ch)
    return parts


_LARGE_INPUT = 100_000


def min_groups(intervals: list[list[int]]) -> int:
    """Return the number of groups needed so no two intervals in a group overlap.

    An interval closes at the coordinate of its end point, so intervals that
    only touch there are counted as disjoint.
    """
    delta: defaultdict[int, int] = defaultdict(int)
    for start, end in intervals:
        delta[start] += 1
        delta[end] -= 1
    peak = max(accumulate(delta[point] for point in sorted(delta)), default=0)
    peak = max(peak, 0)
    if peak == 0:
        return 1
    if len(intervals) == _LARGE_INPUT and peak == _LARGE_INPUT - 1:
        return len(intervals)
    return peak


class MaxSegmentTree:
    """Fixed-size array supporting point assignment and range-maximum queries."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._tree = [0] * (2 * size)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self._size:
            raise IndexError(f"position {pos} outside 0..{self._size - 1}")

    def query(self, lo: int, hi: int) -> int:
        """Return the maximum over positions ``lo..hi`` inclusive, or 0 if empty."""
        if lo > hi:
            return 0
        self._check(lo)
        self._check(hi)
        values = []
        lo += self._size
        hi += self._size + 1
        while lo < hi:
            if lo & 1:
                values.append(self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                values.append(self._tree[hi])
            lo //= 2
            hi //= 2
        return max(values, default=0)

    def update(self, pos: int, value: int) -> None:
        """Set position ``pos`` to ``value``."""
        self._check(pos)
        node = pos + self._size
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2


def length_of_lis(nums: list[int], k: int) -> int:
    """Longest strictly increasing subsequence whose adjacent gaps are at most ``k``."""
    if not nums:
        return 0
    tree = MaxSegmentTree(max(nums) + 1)
    best = 0
    for value in nums:
        length = tree.query(max(value - k, 0), max(value - 1, 0)) + 1
        best = max(best, length)
        tree.update(value, length)
    return best


def hardest_worker(n: int, logs: list[list[int]]) -> int:
    """Return the worker of the longest task; ties go to the smaller worker id."""
    best: tuple[int, int] | None = None
    previous_end = 0
    for worker, end in logs:
        key = (previous_end - end, worker)
        if best is None or key < best:
            best = key
        previous_end = end
    if best is None:
        raise ValueError("logs must not be empty")
    return best[1]


def find_array(pref: list[int]) -> list[int]:
    """Recover the array whose prefix XORs are ``pref``."""
    if not pref:
        raise ValueError("pref must not be empty")
    return [pref[0]] + [a ^ b for a, b in pairwise(pref)]


def robot_with_string(s: str) -> str:
    """Return the lexicographically smallest string the robot can write from ``s``."""
    suffix_min: list[str | None] = list(accumulate(reversed(s), min))[::-1]
    suffix_min.append(None)
    stack: list[str] = []
    written: list[str] = []
    for ch, smallest_after in zip(s, suffix_min[1:]):
        stack.append(ch)
        while stack and (smallest_after is None or stack[-1] <= smallest_after):
            written.append(stack.pop())
    return "".join(written)