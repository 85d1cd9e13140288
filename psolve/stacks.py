"""Problems solved with a monotonic stack."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def sum_after_erasures(commands: Iterable[int]) -> int:
    """Push each nonzero number, erase the latest one on each zero, and sum the rest."""
    stack: list[int] = []
    for command in commands:
        if command == 0:
            if not stack:
                raise IndexError("nothing to erase")
            stack.pop()
        else:
            stack.append(command)
    return sum(stack)


def next_greater(values: Iterable[int]) -> list[int]:
    """Return, for each value, the first later value that is larger, or -1."""
    items = list(values)
    result = [-1] * len(items)
    waiting: list[int] = []
    for index, value in enumerate(items):
        while waiting and items[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def count_buildings(heights: Iterable[int]) -> int:
    """Return the fewest buildings that explain a skyline given by its heights."""
    count = 0
    stack: list[int] = []
    for height in heights:
        while stack and stack[-1] > height:
            stack.pop()
            count += 1
        if stack and stack[-1] == height:
            stack.pop()
        if height != 0:
            stack.append(height)
    return count + len(stack)


def max_min_times_sum(values: Iterable[int]) -> int:
    """Return the largest ``min * sum`` over all contiguous subarrays, at least 0."""
    items = list(values)
    prefix = list(accumulate(items, initial=0))
    best = 0
    stack: list[int] = []

    def settle(right: int) -> None:
        nonlocal best
        lowest = stack.pop()
        left = stack[-1] if stack else -1
        best = max(best, items[lowest] * (prefix[right] - prefix[left + 1]))

    for index, value in enumerate(items):
        while stack and items[stack[-1]] >= value:
            settle(index)
        stack.append(index)
    while stack:
        settle(len(items))
    return best


def tower_receivers(heights: Iterable[int]) -> list[int]:
    """Return for each tower the 1-based position of the nearest taller one to its left, or 0."""
    result = []
    stack: list[tuple[int, int]] = []
    for position, height in enumerate(heights, start=1):
        while stack and stack[-1][1] <= height:
            stack.pop()
        result.append(stack[-1][0] if stack else 0)
        stack.append((position, height))
    return result


def count_visible_pairs(heights: Iterable[int]) -> int:
    """Return how many pairs in a line can see each other; nobody between is taller than either."""
    count = 0
    stack: list[tuple[int, int]] = []
    for height in heights:
        same = 1
        while stack and stack[-1][0] < height:
            count += stack.pop()[1]
        if stack and stack[-1][0] == height:
            repeats = stack.pop()[1]
            same += repeats
            count += repeats
        if stack:
            count += 1
        stack.append((height, same))
    return count