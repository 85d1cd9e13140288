"""Command line front end: solve a problem from its text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from psolve.anagrams import anagram_groups, format_groups
from psolve.counting import (
    anagram_deletions,
    can_rearrange,
    count_pairs_with_sum,
    count_value,
    digit_counts_of_product,
    digit_sets_needed,
    hiarc_count,
    is_lucky,
    letter_counts,
    rooms_needed,
    sum_without_max,
)
from psolve.grid import ripening_days
from psolve.sequences import (
    binomial,
    describe_perfect,
    longest_two_kind_run,
    polygon_area,
    pyramid_height,
    run_absolute_heap,
)
from psolve.stacks import (
    count_buildings,
    count_visible_pairs,
    max_min_times_sum,
    next_greater,
    sum_after_erasures,
    tower_receivers,
)


class _Tokens:
    """Whitespace separated tokens of the input."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        return int(self.word())

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def rest(self) -> list[str]:
        return list(self._items)


def _line(value: object) -> str:
    return f"{value}\n"


def _lines(values: list) -> str:
    return "".join(f"{value}\n" for value in values)


def _counted(tokens: _Tokens) -> list[int]:
    return tokens.integers(tokens.integer())


def _p11908(tokens: _Tokens) -> str:
    return _line(sum_without_max(_counted(tokens)))


def _p30804(tokens: _Tokens) -> str:
    return _line(longest_two_kind_run(_counted(tokens)))


def _p7770(tokens: _Tokens) -> str:
    return _line(pyramid_height(tokens.integer()))


def _p11286(tokens: _Tokens) -> str:
    return _lines(run_absolute_heap(_counted(tokens)))


def _p25183(tokens: _Tokens) -> str:
    tokens.integer()
    return _line("YES" if is_lucky(tokens.word()) else "NO")


def _p26004(tokens: _Tokens) -> str:
    tokens.integer()
    return _line(hiarc_count(tokens.word()))


def _p7569(tokens: _Tokens) -> str:
    cols, rows, layers = tokens.integers(3)
    boxes = [[tokens.integers(cols) for _ in range(rows)] for _ in range(layers)]
    return _line(ripening_days(boxes))


def _p6566(tokens: _Tokens) -> str:
    return format_groups(anagram_groups(tokens.rest()))


def _p2166(tokens: _Tokens) -> str:
    count = tokens.integer()
    points = [(tokens.integer(), tokens.integer()) for _ in range(count)]
    return f"{polygon_area(points):.1f}\n"


def _p6591(tokens: _Tokens) -> str:
    results = []
    while True:
        n, k = tokens.integers(2)
        if n == 0 and k == 0:
            return _lines(results)
        results.append(binomial(n, k))


def _p9506(tokens: _Tokens) -> str:
    results = []
    while (number := tokens.integer()) != -1:
        results.append(describe_perfect(number))
    return _lines(results)


def _p10807(tokens: _Tokens) -> str:
    values = _counted(tokens)
    return _line(count_value(values, tokens.integer()))


def _p10908(tokens: _Tokens) -> str:
    return "".join(f"{count} " for count in letter_counts(tokens.word())) + "\n"


def _p11328(tokens: _Tokens) -> str:
    results = []
    for _ in range(tokens.integer()):
        source, target = tokens.word(), tokens.word()
        results.append("Possible" if can_rearrange(source, target) else "Impossible")
    return _lines(results)


def _p13300(tokens: _Tokens) -> str:
    count, capacity = tokens.integers(2)
    students = [(tokens.integer(), tokens.integer()) for _ in range(count)]
    return _line(rooms_needed(students, capacity))


def _p1475(tokens: _Tokens) -> str:
    return _line(digit_sets_needed(tokens.integer()))


def _p1919(tokens: _Tokens) -> str:
    return _line(anagram_deletions(tokens.word(), tokens.word()))


def _p2577(tokens: _Tokens) -> str:
    return _lines(digit_counts_of_product(*tokens.integers(3)))


def _p3273(tokens: _Tokens) -> str:
    values = _counted(tokens)
    return _line(count_pairs_with_sum(values, tokens.integer()))


def _p10773(tokens: _Tokens) -> str:
    return _line(sum_after_erasures(_counted(tokens)))


def _p17298(tokens: _Tokens) -> str:
    return "".join(f"{value} " for value in next_greater(_counted(tokens))) + "\n"


def _p1863(tokens: _Tokens) -> str:
    heights = []
    for _ in range(tokens.integer()):
        tokens.integer()
        heights.append(tokens.integer())
    return _line(count_buildings(heights))


def _p2104(tokens: _Tokens) -> str:
    return _line(max_min_times_sum(_counted(tokens)))


def _p2493(tokens: _Tokens) -> str:
    return "".join(f"{position} " for position in tower_receivers(_counted(tokens)))


def _p3015(tokens: _Tokens) -> str:
    return _line(count_visible_pairs(_counted(tokens)))


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "11908": _p11908,
    "30804": _p30804,
    "7770": _p7770,
    "11286": _p11286,
    "25183": _p25183,
    "26004": _p26004,
    "7569": _p7569,
    "6566": _p6566,
    "2166": _p2166,
    "6591": _p6591,
    "9506": _p9506,
    "10807": _p10807,
    "10908": _p10908,
    "11328": _p11328,
    "13300": _p13300,
    "1475": _p1475,
    "1919": _p1919,
    "2577": _p2577,
    "3273": _p3273,
    "10773": _p10773,
    "17298": _p17298,
    "1863": _p1863,
    "2104": _p2104,
    "2493": _p2493,
    "3015": _p3015,
}


def solve(problem: str, text: str) -> str:
    """Solve the numbered problem for the given input text and return its output."""
    try:
        handler = _PROBLEMS[str(problem)]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return handler(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="psolve", description="Solve a numbered problem.")
    parser.add_argument("problem", choices=sorted(_PROBLEMS, key=int), help="problem number")
    parser.add_argument("input", nargs="?", help="input file; standard input if omitted")
    args = parser.parse_args(argv)

    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solve(args.problem, text)
    except (OSError, ValueError, IndexError) as error:
        print(f"psolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0