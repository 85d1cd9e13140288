"""Grouping words into anagram classes."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class AnagramGroup:
    """Words sharing the same letters; ``words`` is sorted and keeps repeats."""

    key: str
    words: tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.words)

    @property
    def distinct_words(self) -> list[str]:
        return list(dict.fromkeys(self.words))


def anagram_groups(words: Iterable[str], limit: int = 5) -> list[AnagramGroup]:
    """Return the largest anagram groups, ties broken by their first word."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    buckets: defaultdict[str, list[str]] = defaultdict(list)
    for word in words:
        buckets["".join(sorted(word))].append(word)
    groups = [AnagramGroup(key, tuple(sorted(members))) for key, members in buckets.items()]
    groups.sort(key=lambda group: (-group.size, group.words[0]))
    return groups[:limit]


def format_groups(groups: Iterable[AnagramGroup]) -> str:
    """Render each group on its own line, each distinct word once."""
    return "".join(
        f"Group of size {group.size}: " + "".join(f"{word} " for word in group.distinct_words) + ".\n"
        for group in groups
    )