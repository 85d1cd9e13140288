# psolve

A small library of solutions to classic algorithmic puzzles, plus a `psolve`
command that reads a puzzle's input from a file or standard input and prints
its answer.

No third-party libraries are needed; Python 3.10 or later is enough.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Library

The package is split by the technique each puzzle needs.

- `psolve.counting`: tallies and frequency counts. It provides
  `sum_without_max`, `longest_adjacent_run`, `is_lucky`, `hiarc_count`,
  `count_value`, `letter_counts`, `can_rearrange`, `rooms_needed`,
  `digit_sets_needed`, `anagram_deletions`, `digit_counts_of_product` and
  `count_pairs_with_sum`.
  - Functions that take words (`letter_counts`, `can_rearrange`,
    `anagram_deletions`) raise `ValueError` on anything but lowercase `a`–`z`.
  - `rooms_needed` raises `ValueError` on a capacity below 1, a gender other
    than 0 or 1, or a grade outside 1 to 6.
- `psolve.sequences`: sliding windows, a heap and a little arithmetic. It
  provides `longest_two_kind_run`, `pyramid_height`, `AbsoluteHeap`,
  `run_absolute_heap`, `polygon_area`, `binomial`, `proper_divisors` and
  `describe_perfect`.
  - `AbsoluteHeap.pop` returns the value with the smallest absolute value. On
    a tie it returns the negative one. It raises `IndexError` when the heap is
    empty.
- `psolve.grid`: breadth-first search through a stack of tomato boxes, in
  `ripening_days`. The function takes layers of rows, where 1 is ripe, 0 is
  unripe and -1 is empty. It returns the number of days until every tomato is
  ripe, or -1 if some never ripen.
- `psolve.anagrams`: grouping words into anagram classes. It provides
  `AnagramGroup`, with `key`, `words`, `size` and `distinct_words`, and also
  `anagram_groups(words, limit=5)` and `format_groups`.
  - Groups are ordered by size, largest first. Ties are broken by each
    group's first word.
- `psolve.stacks`: monotonic-stack problems. It provides
  `sum_after_erasures`, `next_greater`, `count_buildings`,
  `max_min_times_sum`, `tower_receivers` and `count_visible_pairs`.

Example:

```python
from psolve.counting import sum_without_max
from psolve.sequences import AbsoluteHeap, binomial, describe_perfect

sum_without_max([1, 2, 3])   # 3
binomial(5, 2)               # 10
describe_perfect(6)          # '6 = 1 + 2 + 3'

heap = AbsoluteHeap()
heap.push(-2)
heap.push(1)
heap.push(-1)
heap.pop()                   # -1: smallest absolute value, ties go to the negative
```

## Command line

    psolve PROBLEM [INPUT]

`PROBLEM` is one of the puzzle numbers below. `INPUT` is a file holding the
puzzle's input; when it is left out, the input is read from standard input.
The input is read as whitespace-separated tokens and the answer is printed to
standard output.

When the input is malformed or the file cannot be read, the command prints
`psolve: <message>` to standard error and exits with status 1.

    echo "3 1 2 3" | psolve 11908
    psolve 7569 boxes.txt
    psolve --help

The same thing is available from Python as
`psolve.cli.solve(problem, text)`, which returns the output as a string. It
raises `ValueError` for an unknown problem number.

| Problem | Input | Solved by |
|---------|-------|-----------|
| 11908 | count, values | `sum_without_max` |
| 30804 | count, values | `longest_two_kind_run` |
| 7770 | number of blocks | `pyramid_height` |
| 11286 | count, commands (0 pops) | `run_absolute_heap` |
| 25183 | length, digit string | `is_lucky` (prints YES/NO) |
| 26004 | length, text | `hiarc_count` |
| 7569 | columns, rows, layers, cells | `ripening_days` |
| 6566 | words until end of input | `anagram_groups`, `format_groups` |
| 2166 | count, x y pairs | `polygon_area` (one decimal place) |
| 6591 | n k pairs until `0 0` | `binomial` |
| 9506 | numbers until `-1` | `describe_perfect` |
| 10807 | count, values, target | `count_value` |
| 10908 | lowercase word | `letter_counts` |
| 11328 | cases, word pairs | `can_rearrange` (prints Possible/Impossible) |
| 13300 | students, capacity, gender grade pairs | `rooms_needed` |
| 1475 | number | `digit_sets_needed` |
| 1919 | two words | `anagram_deletions` |
| 2577 | three numbers | `digit_counts_of_product` |
| 3273 | count, values, target | `count_pairs_with_sum` |
| 10773 | count, commands (0 erases) | `sum_after_erasures` |
| 17298 | count, values | `next_greater` |
| 1863 | count, x y pairs (x ignored) | `count_buildings` |
| 2104 | count, values | `max_min_times_sum` |
| 2493 | count, heights | `tower_receivers` |
| 3015 | count, heights | `count_visible_pairs` |