"""Counting problems over numbers, digits and letters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from string import ascii_lowercase, digits as _DIGITS

_HIARC = "HIARC"
_GENDERS = (0, 1)
_GRADES = range(1, 7)


def sum_without_max(values: Iterable[int]) -> int:
    """Return the sum of all values except one largest value.

    The largest value never counts as less than zero, so an empty input gives 0.
    """
    items = list(values)
    return sum(items) - max(0, max(items, default=0))


def longest_adjacent_run(digits: str) -> int:
    """Return the longest run of characters whose neighbours differ by exactly one.

    The character before the first one is taken to be ``'0'``, so a leading
    ``'1'`` already extends the run.
    """
    best = run = 1
    previous = "0"
    for char in digits:
        if abs(ord(char) - ord(previous)) == 1:
            run += 1
            best = max(best, run)
        else:
            run = 1
        previous = char
    return best


def is_lucky(digits: str) -> bool:
    """Tell whether the digits hold a run of five or more consecutive steps."""
    return longest_adjacent_run(digits) >= 5


def hiarc_count(text: str) -> int:
    """Return how many times the letters of ``HIARC`` can be taken from ``text``."""
    counts = Counter(text)
    return min(counts[letter] for letter in _HIARC)


def count_value(values: Iterable[int], target: int) -> int:
    """Return how many of the values equal ``target``."""
    return sum(1 for value in values if value == target)


def _lowercase_counts(word: str) -> Counter[str]:
    for char in word:
        if char not in ascii_lowercase:
            raise ValueError(f"not a lowercase letter: {char!r}")
    return Counter(word)


def letter_counts(word: str) -> list[int]:
    """Return the number of each letter ``a`` to ``z`` in a lowercase word."""
    counts = _lowercase_counts(word)
    return [counts[letter] for letter in ascii_lowercase]


def can_rearrange(source: str, target: str) -> bool:
    """Tell whether ``target`` is a rearrangement of the letters of ``source``."""
    return _lowercase_counts(source) == _lowercase_counts(target)


def rooms_needed(students: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the rooms needed when each room holds one gender of one grade.

    Each student is a ``(gender, grade)`` pair with gender 0 or 1 and grade 1 to 6.
    """
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    groups: Counter[tuple[int, int]] = Counter()
    for gender, grade in students:
        if gender not in _GENDERS:
            raise ValueError(f"gender must be 0 or 1, got {gender}")
        if grade not in _GRADES:
            raise ValueError(f"grade must be from 1 to 6, got {grade}")
        groups[gender, grade] += 1
    return sum(-(-size // capacity) for size in groups.values())


def digit_sets_needed(number: int) -> int:
    """Return how many digit sets spell ``number``, with 6 and 9 interchangeable."""
    if number < 0:
        raise ValueError("number must not be negative")
    counts = Counter(str(number))
    needed = [counts[d] for d in "01234578"]
    needed.append((counts["6"] + counts["9"] + 1) // 2)
    return max(needed)


def anagram_deletions(first: str, second: str) -> int:
    """Return how many letters must be removed to make the two words anagrams."""
    a = _lowercase_counts(first)
    b = _lowercase_counts(second)
    return sum(((a - b) + (b - a)).values())


def digit_counts_of_product(a: int, b: int, c: int) -> list[int]:
    """Return how often each digit 0 to 9 appears in ``a * b * c``."""
    product = a * b * c
    if product < 0:
        raise ValueError("product must not be negative")
    counts = Counter(str(product))
    return [counts[d] for d in _DIGITS]


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Return the number of pairs of different values that add up to ``target``."""
    items = list(values)
    present = set(items)
    hits = sum(1 for value in items if value != target - value and target - value in present)
    return hits // 2