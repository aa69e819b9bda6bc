"""Puzzles on integer lists: pair sums, containers, deduplication and packing."""

from itertools import groupby


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two numbers in ``nums`` that add up to ``target``.

    Returns an empty list when no such pair exists.
    """
    first_index: dict[int, int] = {}
    halves: list[int] = []
    for index, n in enumerate(nums):
        if n * 2 == target:
            halves.append(index)
            if len(halves) == 2:
                return halves
            continue
        if n in first_index:
            continue
        partner = target - n
        if partner in first_index:
            return [first_index[partner], index]
        first_index[n] = index
    return []


def max_area(height: list[int]) -> int:
    """Return the most water held between two of the given vertical lines.

    Raises ValueError when ``height`` is empty.
    """
    if not height:
        raise ValueError("at least one height is required")
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        h_left, h_right = height[left], height[right]
        best = max(best, min(h_left, h_right) * (right - left))
        if h_left < h_right:
            left += 1
        elif h_left > h_right:
            right -= 1
        elif height[left + 1] < height[right - 1]:
            right -= 1
        else:
            left += 1
    return best


def remove_duplicates(nums: list[int]) -> int:
    """Drop consecutive repeats from ``nums`` in place and return its new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def minimum_boxes(apple: list[int], capacity: list[int]) -> int:
    """Return how many of the largest boxes are needed to hold all the apples.

    When even all boxes fall short, the number of boxes is returned.
    """
    remaining = sum(apple)
    boxes = 0
    for size in sorted(capacity, reverse=True):
        boxes += 1
        remaining -= size
        if remaining <= 0:
            break
    return boxes