"""Digit counts, messaging totals, road importance, graph reachability, poker hands and frequencies."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from operator import or_


def digit_count(num: str) -> bool:
    """Return True when digit ``i`` occurs ``num[i]`` times for every index ``i``."""
    counts = Counter(num)
    return all(counts[str(index)] == int(digit) for index, digit in enumerate(num))


def largest_word_count(messages: list[str], senders: list[str]) -> str:
    """Return the sender with the most words sent; ties go to the larger name."""
    totals: Counter[str] = Counter()
    for message, sender in zip(messages, senders):
        totals[sender] += message.count(" ") + 1
    if not totals:
        return ""
    return max(totals.items(), key=lambda item: (item[1], item[0]))[0]


def maximum_importance(n: int, roads: list[list[int]]) -> int:
    """Assign values 1..n to cities to maximise the summed importance of all roads."""
    degree = [0] * n
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
    return sum(d * value for value, d in enumerate(sorted(degree), start=1))


def count_asterisks(s: str) -> int:
    """Count asterisks that lie outside of ``|``-delimited pairs."""
    bars = 0
    total = 0
    for ch in s:
        if ch == "*" and bars % 2 == 0:
            total += 1
        elif ch == "|":
            bars += 1
    return total


def _component_sizes(n: int, edges: list[list[int]]):
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = [False] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [root]
        size = 0
        while stack:
            node = stack.pop()
            size += 1
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        yield size


def count_unreachable_pairs(n: int, edges: list[list[int]]) -> int:
    """Count unordered node pairs that have no path between them."""
    pairs = 0
    seen = 0
    for size in _component_sizes(n, edges):
        pairs += size * seen
        seen += size
    return pairs


def maximum_xor(nums: list[int]) -> int:
    """Return the largest XOR reachable, which is the OR of all numbers."""
    return reduce(or_, nums, 0)


def best_hand(ranks: list[int], suits: list[str]) -> str:
    """Name the best poker hand among Flush, Three of a Kind, Pair and High Card."""
    if any(count >= 5 for count in Counter(suits).values()):
        return "Flush"
    most_common_rank = max(Counter(ranks).values(), default=0)
    if most_common_rank >= 3:
        return "Three of a Kind"
    if most_common_rank >= 2:
        return "Pair"
    return "High Card"


def minimum_recolors(blocks: str, k: int) -> int:
    """Return the fewest recolourings giving ``k`` consecutive ``B`` blocks."""
    if k > len(blocks):
        raise ValueError("window length exceeds the number of blocks")
    return min(
        k - blocks[start:start + k].count("B")
        for start in range(len(blocks) - k + 1)
    )


def equal_frequency(word: str) -> bool:
    """Return True if removing one character leaves all present characters equally frequent."""
    counts = Counter(word)
    for ch in counts:
        trial = counts.copy()
        trial[ch] -= 1
        if len({v for v in trial.values() if v}) <= 1:
            return True
    return False