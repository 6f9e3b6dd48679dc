"""Assorted interview puzzles: bike assignment, visit patterns, unlock patterns and more."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations

__all__ = [
    "assign_bikes",
    "most_visited_pattern",
    "number_of_patterns",
    "number_of_patterns_backtracking",
    "discount_prices",
    "combination_sum",
]

_KEYS = 9
_DIGITS = frozenset("0123456789")


def _manhattan(p1: Sequence[int], p2: Sequence[int]) -> int:
    return abs(p1[0] - p2[0]) + abs(p1[1] - p2[1])


def assign_bikes(workers: Sequence[Sequence[int]], bikes: Sequence[Sequence[int]]) -> list[int]:
    """Greedily give each worker a bike, closest (worker, bike) pairs first.

    Ties on Manhattan distance go to the smaller worker index, then the
    smaller bike index. Returns the bike index chosen for each worker.
    """
    if len(bikes) < len(workers):
        raise ValueError("there must be at least as many bikes as workers")
    # Each worker's candidates, nearest last so that pop() yields the next best.
    candidates = [
        sorted(
            ((_manhattan(worker, bike), w, b) for b, bike in enumerate(bikes)),
            reverse=True,
        )
        for w, worker in enumerate(workers)
    ]
    heap = [options.pop() for options in candidates]
    heapq.heapify(heap)

    result = [0] * len(workers)
    taken: set[int] = set()
    while len(taken) < len(workers):
        _, worker, bike = heapq.heappop(heap)
        if bike not in taken:
            result[worker] = bike
            taken.add(bike)
        else:
            heapq.heappush(heap, candidates[worker].pop())
    return result


def most_visited_pattern(
    username: Sequence[str], timestamp: Sequence[int], website: Sequence[str]
) -> list[str]:
    """The three-website sequence visited in order by the most users.

    Ties go to the lexicographically smallest sequence. Returns an empty list
    when no user visited at least three websites.
    """
    if not len(username) == len(timestamp) == len(website):
        raise ValueError("username, timestamp and website must have the same length")
    visits = sorted(zip(timestamp, username, website))
    histories: defaultdict[str, list[str]] = defaultdict(list)
    for _, user, site in visits:
        histories[user].append(site)

    counts: Counter[tuple[str, str, str]] = Counter()
    for sites in histories.values():
        counts.update(set(combinations(sites, 3)))
    if not counts:
        return []
    best = min(counts, key=lambda pattern: (-counts[pattern], pattern))
    return list(best)


def _crosses_unvisited(used: int, i: int, j: int) -> bool:
    """Whether the stroke from key i to key j jumps over a key not yet in ``used``."""
    x1, y1 = divmod(i, 3)
    x2, y2 = divmod(j, 3)
    jumps = (
        (x1 == x2 and abs(y1 - y2) == 2)
        or (y1 == y2 and abs(x1 - x2) == 2)
        or (abs(x1 - x2) == 2 and abs(y1 - y2) == 2)
    )
    if not jumps:
        return False
    middle = 3 * ((x1 + x2) // 2) + (y1 + y2) // 2
    return not used & (1 << middle)


def number_of_patterns(m: int, n: int) -> int:
    """Number of 3x3 unlock patterns using between ``m`` and ``n`` keys, by dynamic programming."""
    # ways[used][i]: patterns over the key set ``used`` that end on key i.
    ways = [[0] * _KEYS for _ in range(1 << _KEYS)]
    for i in range(_KEYS):
        ways[1 << i][i] = 1

    total = 0
    for used, ending in enumerate(ways):
        size = used.bit_count() if hasattr(used, "bit_count") else bin(used).count("1")
        if size > n:
            continue
        for i in range(_KEYS):
            if not used & (1 << i):
                continue
            if m <= size <= n:
                total += ending[i]
            for j in range(_KEYS):
                if used & (1 << j) or _crosses_unvisited(used, i, j):
                    continue
                ways[used | (1 << j)][j] += ending[i]
    return total


def _count_from(m: int, n: int, level: int, used: int, i: int) -> int:
    if level > n:
        return 0
    count = 1 if level >= m else 0
    for j in range(_KEYS):
        if used & (1 << j) or _crosses_unvisited(used, i, j):
            continue
        count += _count_from(m, n, level + 1, used | (1 << j), j)
    return count


def number_of_patterns_backtracking(m: int, n: int) -> int:
    """Number of 3x3 unlock patterns using between ``m`` and ``n`` keys, by backtracking.

    Uses the grid's symmetry: corners and edges each count four times.
    """
    corners = _count_from(m, n, 1, 1 << 0, 0)
    edges = _count_from(m, n, 1, 1 << 1, 1)
    centre = _count_from(m, n, 1, 1 << 4, 4)
    return 4 * corners + 4 * edges + centre


def _format_price(digits: str, discount: int) -> str:
    cents = int(digits) * (100 - discount)
    return f"${cents // 100}.{cents % 100:02d}"


def discount_prices(sentence: str, discount: int) -> str:
    """Apply ``discount`` percent to every ``$<digits>`` word, written with two decimals.

    Other words, and the single spaces between words, are kept as they are.
    """
    words = sentence.split(" ")
    return " ".join(
        _format_price(word[1:], discount)
        if len(word) > 1 and word[0] == "$" and set(word[1:]) <= _DIGITS
        else word
        for word in words
    )


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates (each reusable) that sum to ``target``.

    Combinations list their values in candidate order; those taking more of an
    earlier candidate come first.
    """
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(candidates):
            if remaining == 0:
                found.append(list(chosen))
            return
        value = candidates[index]
        if remaining - value >= 0:
            chosen.append(value)
            search(index, remaining - value)
            chosen.pop()
        search(index + 1, remaining)

    search(0, target)
    return found