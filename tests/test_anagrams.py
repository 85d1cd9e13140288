import pytest

from psolve.anagrams import AnagramGroup, anagram_groups, format_groups

WORDS = ["cab", "dog", "abc", "x", "god", "bca"]


def test_groups_ordered_by_size():
    groups = anagram_groups(WORDS)
    assert [g.words for g in groups] == [("abc", "bca", "cab"), ("dog", "god"), ("x",)]
    sizes = [g.size for g in groups]
    assert sizes == sorted(sizes, reverse=True)
    assert sum(sizes) == len(WORDS)


def test_ties_broken_by_first_word():
    groups = anagram_groups(["zz", "yx", "ab", "xy"])
    firsts = [g.words[0] for g in groups if g.size == 1]
    assert firsts == sorted(firsts)
    assert groups[0].words == ("xy", "yx")


def test_limit_defaults_to_five():
    words = [chr(ord("a") + i) for i in range(8)]
    assert len(anagram_groups(words)) == 5
    assert len(anagram_groups(words, 2)) == 2


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        anagram_groups(WORDS, -1)


def test_repeats_count_but_print_once():
    words = ["ab", "ab", "ba"]
    groups = anagram_groups(words)
    assert groups[0].size == len(words)
    assert groups[0].distinct_words == ["ab", "ba"]
    assert format_groups(groups) == f"Group of size {len(words)}: ab ba .\n"


def test_format_groups_lines():
    group = AnagramGroup("dgo", ("dog", "god"))
    assert format_groups([group, group]) == "Group of size 2: dog god .\n" * 2
    assert format_groups([]) == ""