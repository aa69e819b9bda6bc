"""Puzzles on strings: Roman numerals, prefixes, brackets and partitions."""

from itertools import pairwise

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_SUBTRACTIVE_PAIRS = frozenset({"IV", "IX", "XL", "XC", "CD", "CM"})

_CLOSING_TO_OPENING = {"}": "{", "]": "[", ")": "("}


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Raises ValueError for a character that is not a Roman numeral symbol.
    """
    try:
        total = sum(_ROMAN_VALUES[c] for c in s)
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral symbol: {exc.args[0]!r}") from None
    for before, current in pairwise(s):
        if before + current in _SUBTRACTIVE_PAIRS:
            total -= _ROMAN_VALUES[before] * 2
    return total


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``.

    Raises ValueError when ``strs`` is empty.
    """
    if not strs:
        raise ValueError("at least one string is required")
    prefix = strs[0]
    for s in strs:
        if not prefix:
            break
        while not s.startswith(prefix):
            prefix = prefix[:-1]
    return prefix


def is_valid(s: str) -> bool:
    """Tell whether every closing bracket in ``s`` closes the latest open one.

    Any character that is not a closing bracket is treated as an opener.
    """
    stack: list[str] = []
    for c in s:
        opening = _CLOSING_TO_OPENING.get(c)
        if opening is None:
            stack.append(c)
        elif not stack or stack.pop() != opening:
            return False
    return not stack


def partition_string(s: str) -> int:
    """Count the fewest substrings, each without a repeated character, that make up ``s``."""
    count = 1
    seen: set[str] = set()
    for c in reversed(s):
        if c in seen:
            count += 1
            seen.clear()
        seen.add(c)
    return count