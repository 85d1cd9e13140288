"""Sequence, heap and number-theory problems."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable
from math import isqrt


def longest_two_kind_run(values: Iterable[int]) -> int:
    """Return the length of the longest contiguous run holding at most two kinds."""
    window: deque[int] = deque()
    kinds: Counter[int] = Counter()
    best = 0
    for value in values:
        window.append(value)
        kinds[value] += 1
        while len(kinds) >= 3:
            oldest = window.popleft()
            kinds[oldest] -= 1
            if not kinds[oldest]:
                del kinds[oldest]
        best = max(best, len(window))
    return best


def pyramid_height(blocks: int) -> int:
    """Return the tallest stepped pyramid that can be built from ``blocks``."""
    level = 1
    used = 0
    while True:
        used += level * level + (level - 1) * (level - 1)
        if used > blocks:
            return level - 1
        level += 1


class AbsoluteHeap:
    """Min-heap ordered by absolute value, then by value."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        heapq.heappush(self._items, (abs(value), value))

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)[1]

    def __len__(self) -> int:
        return len(self._items)


def run_absolute_heap(commands: Iterable[int]) -> list[int]:
    """Push each nonzero command; for each zero pop the smallest, or report 0."""
    heap = AbsoluteHeap()
    output = []
    for command in commands:
        if command == 0:
            output.append(heap.pop() if heap else 0)
        else:
            heap.push(command)
    return output


def polygon_area(points: Iterable[tuple[int, int]]) -> float:
    """Return the area of a simple polygon given by its vertices in order."""
    vertices = list(points)
    if not vertices:
        raise ValueError("a polygon needs at least one vertex")
    following = vertices[1:] + vertices[:1]
    twice = sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in zip(vertices, following))
    return abs(twice) / 2


def binomial(n: int, k: int) -> int:
    """Return n choose k."""
    result = 1
    for i in range(min(k, n - k)):
        result = result * (n - i) // (i + 1)
    return result


def proper_divisors(n: int) -> list[int]:
    """Return the divisors of ``n`` smaller than ``n``, in ascending order."""
    if n < 1:
        raise ValueError("n must be positive")
    small = []
    large = []
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
    return [d for d in small + large[::-1] if d != n]


def describe_perfect(n: int) -> str:
    """Describe ``n`` as a sum of its divisors if perfect, else say it is not."""
    divisors = proper_divisors(n)
    if sum(divisors) != n:
        return f"{n} is NOT perfect."
    return f"{n} = " + " + ".join(map(str, divisors))