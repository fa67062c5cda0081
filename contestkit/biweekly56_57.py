"""Counting triples, character frequencies, chair allocation, painting segments and queue visibility."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from math import isqrt


def count_triples(n: int) -> int:
    """Count ordered triples (a, b, c) with 1 <= a, b, c <= n and a*a + b*b == c*c."""
    total = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            square = a * a + b * b
            c = isqrt(square)
            if c * c == square and c <= n:
                total += 1
    return total


def are_occurrences_equal(s: str) -> bool:
    """Return True when every character present in ``s`` occurs equally often."""
    return len(set(Counter(s).values())) <= 1


def smallest_chair(times: list[list[int]], target_friend: int) -> int:
    """Return the chair number taken by ``target_friend``.

    Each friend takes the lowest-numbered free chair on arrival and frees it
    on leaving; a chair freed at a moment is available to arrivals at that moment.
    """
    events = []
    for friend, (arrival, leaving) in enumerate(times):
        events.append((arrival, 1, friend))
        events.append((leaving, -1, friend))
    events.sort()

    free = list(range(len(times)))
    free_set = set(free)
    assigned: dict[int, int] = {}

    for _, kind, friend in events:
        if kind == 1:
            if friend == target_friend:
                return free[0]
            chair = heapq.heappop(free)
            free_set.discard(chair)
            assigned[friend] = chair
        else:
            chair = assigned.pop(friend, 0)
            if chair not in free_set:
                heapq.heappush(free, chair)
                free_set.add(chair)
    return 0


def split_painting(segments: list[list[int]]) -> list[list[int]]:
    """Describe overlapping painted segments as ``[start, end, colour_sum]`` pieces."""
    delta: defaultdict[int, int] = defaultdict(int)
    for start, end, colour in segments:
        delta[start] += colour
        delta[end] -= colour

    pieces: list[list[int]] = []
    previous: int | None = None
    running = 0
    for point in sorted(delta):
        if previous is not None and running != 0:
            pieces.append([previous, point, running])
        running += delta[point]
        previous = point
    return pieces


def can_see_persons_count(heights: list[int]) -> list[int]:
    """For each person, count how many people to the right they can see."""
    stack: list[int] = []
    seen_from_right: list[int] = []
    for height in reversed(heights):
        seen = 0
        while stack and stack[-1] < height:
            stack.pop()
            seen += 1
        if stack:
            seen += 1
        stack.append(height)
        seen_from_right.append(seen)
    return seen_from_right[::-1]