# puzzlekit

This is a small collection of solutions to classic programming puzzles,
grouped by subject. It uses only the standard library and needs Python
3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlekit.integers`

- `reverse(x)` reverses the decimal digits of `x` and keeps its sign. If
  the reversed value does not fit in a 32-bit signed integer, it returns 0.
  If `x` is outside the 32-bit range, or is the smallest 32-bit integer, it
  raises `OverflowError`.
- `my_atoi(s)` parses a leading integer from `s`. It skips leading spaces,
  accepts one optional `+` or `-`, and stops at the first character that is
  not a digit. The result is clamped to the 32-bit signed range. If there
  are no digits, it returns 0.
- `is_palindrome(x)` tells whether the decimal form of `x` reads the same
  both ways. Negative numbers are never palindromes.

### `puzzlekit.strings`

- `roman_to_int(s)` converts a Roman numeral to an integer. It raises
  `ValueError` for an unknown symbol.
- `longest_common_prefix(strs)` returns the longest prefix that every
  string shares. It raises `ValueError` for an empty list.
- `is_valid(s)` checks that each `)`, `]` and `}` closes the most recent
  open character. Any character that is not a closing bracket counts as an
  opener.
- `partition_string(s)` returns the fewest substrings, none with a repeated
  character, that make up `s`.

### `puzzlekit.arrays`

- `two_sum(nums, target)` returns the indices of two numbers that add up
  to `target`. If there is no such pair, it returns `[]`.
- `max_area(height)` returns the most water that two of the lines can
  hold. It raises `ValueError` for an empty list.
- `remove_duplicates(nums)` removes consecutive repeats from `nums` in
  place and returns the new length.
- `minimum_boxes(apple, capacity)` returns how many of the largest boxes
  are needed to hold all the apples. If even all the boxes are not enough,
  it returns the number of boxes.

### `puzzlekit.arithmetic`

- `series_sum(first, last, count)` sums `count` evenly spaced terms that
  run from `first` to `last`. The division by two truncates toward zero.
- `arithmetic_sequence_sum(a, d, n)` sums the first `n` terms of the
  sequence that starts at `a` and steps by `d`.
- `minimum_sum(n, k)` returns the smallest possible sum of `n` distinct
  positive integers where no two of them add up to `k`.

### `puzzlekit.linked_list`

`ListNode` is a dataclass with the fields `val` and `next`.
`ListNode.from_values(values)` builds a list, or returns `None` for no
values. Iterating over a node yields the values from that node onward.

There are three ways to merge two sorted lists:

- `merge_two_lists` builds new nodes for the merged front part. Once one
  list runs out, it shares the rest of the other. On equal values, the
  value from `list1` comes first.
- `merge_two_lists_iterative` relinks the existing nodes. On equal values,
  the node from `list2` comes first.
- `merge_two_lists_spliced` relinks the existing nodes. On equal values,
  the node from `list1` comes first.

### `puzzlekit.boss_battle`

`battle(h, a, b)` works out a fight against a boss. The boss has `h` hit
points. You deal `a` damage each turn, and the boss heals `b` afterwards.
If the boss can be defeated, it returns `("OK", turns)`. Otherwise it
returns `("NO", 0)`. It raises `ValueError` for a negative argument.

## Example

```python
from puzzlekit.integers import my_atoi
from puzzlekit.strings import roman_to_int
from puzzlekit.linked_list import ListNode, merge_two_lists

my_atoi("   -042")        # -42
roman_to_int("MCMXCIV")   # 1994
merged = merge_two_lists(ListNode.from_values([1, 2, 4]),
                         ListNode.from_values([1, 3, 4]))
list(merged)              # [1, 1, 2, 3, 4, 4]
```

## Command line

`boss-battle` reads one line from standard input that holds `h a b`. If
the boss can be defeated, it prints `OK` followed by the number of turns.
Otherwise it prints `NO`:

```
$ echo "10 4 1" | boss-battle
OK
4
```

If there are fewer than three numbers, a value is not an integer, or a
value is negative, it prints a usage error and exits with status 2.

This is the only command. The other puzzles are available only as Python
functions.