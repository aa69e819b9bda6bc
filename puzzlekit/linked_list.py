"""Singly linked lists of integers and ways of merging two sorted ones."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; None when there are none."""
        head: Optional[ListNode] = None
        for val in reversed(list(values)):
            head = cls(val, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists into a new sorted list of fresh head nodes.

    On equal values the node from ``list1`` comes first. Once one list runs
    out, the rest of the other is shared with the result.
    """
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    if list1.val <= list2.val:
        return ListNode(list1.val, merge_two_lists(list1.next, list2))
    return ListNode(list2.val, merge_two_lists(list1, list2.next))


def merge_two_lists_iterative(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes.

    On equal values the node from ``list2`` comes first.
    """
    sentinel = ListNode(0)
    tail = sentinel
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return sentinel.next


def merge_two_lists_spliced(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists by relinking their nodes.

    On equal values the node from ``list1`` comes first.
    """
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    sentinel = ListNode(-1)
    tail = sentinel
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return sentinel.next