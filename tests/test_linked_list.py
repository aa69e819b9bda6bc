import pytest

from puzzlekit.linked_list import (
    ListNode,
    merge_two_lists,
    merge_two_lists_iterative,
    merge_two_lists_spliced,
)

MERGERS = [merge_two_lists, merge_two_lists_iterative, merge_two_lists_spliced]

CASES = [
    ([1, 2, 4], [1, 3, 4], [1, 1, 2, 3, 4, 4]),
    ([], [], []),
    ([], [0], [0]),
]


@pytest.mark.parametrize("merge", MERGERS)
@pytest.mark.parametrize("list1, list2, expected", CASES)
def test_merge_matches_expected(merge, list1, list2, expected):
    actual = merge(ListNode.from_values(list1), ListNode.from_values(list2))
    assert actual == ListNode.from_values(expected)


@pytest.mark.parametrize("merge", MERGERS)
def test_merge_keeps_order_for_longer_lists(merge):
    actual = merge(ListNode.from_values([-5, 0, 7, 9]), ListNode.from_values([-6, 1, 2, 100]))
    assert list(actual) == [-6, -5, 0, 1, 2, 7, 9, 100]


def test_from_values_empty_is_none():
    assert ListNode.from_values([]) is None


def test_from_values_links_in_order():
    head = ListNode.from_values([3, 1, 2])
    assert head.val == 3
    assert head.next.val == 1
    assert head.next.next.val == 2
    assert head.next.next.next is None


def test_iter_yields_values():
    assert list(ListNode.from_values([4, 5, 6])) == [4, 5, 6]


def test_equality_compares_whole_list():
    assert ListNode.from_values([1, 2]) == ListNode.from_values([1, 2])
    assert not ListNode.from_values([1, 2]) == ListNode.from_values([1, 3])


def test_recursive_merge_makes_new_head():
    list1 = ListNode.from_values([1])
    list2 = ListNode.from_values([1])
    merged = merge_two_lists(list1, list2)
    assert list(merged) == [1, 1]
    assert merged is not list1 and merged is not list2


def test_iterative_merge_prefers_second_list_on_ties():
    list1 = ListNode.from_values([1])
    list2 = ListNode.from_values([1])
    merged = merge_two_lists_iterative(list1, list2)
    assert merged is list2
    assert merged.next is list1


def test_spliced_merge_prefers_first_list_on_ties():
    list1 = ListNode.from_values([1])
    list2 = ListNode.from_values([1])
    merged = merge_two_lists_spliced(list1, list2)
    assert merged is list1
    assert merged.next is list2


def test_spliced_merge_returns_other_list_when_one_is_empty():
    list2 = ListNode.from_values([2, 3])
    assert merge_two_lists_spliced(None, list2) is list2
    assert merge_two_lists_iterative(None, list2) is list2