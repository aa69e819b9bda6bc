import pytest

from puzzlekit.strings import (
    is_valid,
    longest_common_prefix,
    partition_string,
    roman_to_int,
)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("III", 3),
        ("LVIII", 58),
        ("MCMXCIV", 1994),
    ],
)
def test_roman_to_int_cases(s, expected):
    assert roman_to_int(s) == expected


@pytest.mark.parametrize(
    "s, expected",
    [("IV", 4), ("IX", 9), ("XL", 40), ("XC", 90), ("CD", 400), ("CM", 900), ("", 0)],
)
def test_roman_to_int_subtractive(s, expected):
    assert roman_to_int(s) == expected


def test_roman_to_int_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")


@pytest.mark.parametrize(
    "strs, expected",
    [
        (["flower", "flow", "flight"], "fl"),
        (["dog", "racecar", "car"], ""),
    ],
)
def test_longest_common_prefix_cases(strs, expected):
    assert longest_common_prefix(strs) == expected


def test_longest_common_prefix_single():
    assert longest_common_prefix(["alone"]) == "alone"


def test_longest_common_prefix_is_prefix_of_all():
    strs = ["interview", "internet", "interval"]
    prefix = longest_common_prefix(strs)
    assert prefix == "inter"
    assert all(s.startswith(prefix) for s in strs)


def test_longest_common_prefix_empty_list():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize(
    "s, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("(]", False),
    ],
)
def test_is_valid_cases(s, expected):
    assert is_valid(s) is expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("", True),
        ("{[()]}", True),
        ("(", False),
        (")", False),
        ("([)]", False),
        ("a", False),
    ],
)
def test_is_valid_edges(s, expected):
    assert is_valid(s) is expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("abacaba", 4),
        ("ssssss", 6),
    ],
)
def test_partition_string_cases(s, expected):
    assert partition_string(s) == expected


def test_partition_string_distinct_characters():
    assert partition_string("abcdef") == 1


def test_partition_string_empty():
    assert partition_string("") == 1