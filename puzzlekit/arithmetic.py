"""Sums of arithmetic sequences and the minimum sum of a k-avoiding array."""


def _truncating_half(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def series_sum(first: int, last: int, count: int) -> int:
    """Sum ``count`` evenly spaced terms running from ``first`` to ``last``.

    Division truncates toward zero.
    """
    return _truncating_half((first + last) * count)


def arithmetic_sequence_sum(a: int, d: int, n: int) -> int:
    """Sum the first ``n`` terms of the sequence starting at ``a`` with step ``d``."""
    last = (n - 1) * d + a
    return series_sum(a, last, n)


def minimum_sum(n: int, k: int) -> int:
    """Return the smallest sum of ``n`` distinct positive integers no two of which add up to ``k``."""
    total = series_sum(1, n, n)
    if n < (k + 1) >> 1:
        return total

    removed_first = (k >> 1) + 1
    removed_last = min(k - 1, n)
    changed = removed_last - removed_first + 1
    removed = series_sum(removed_first, removed_last, changed)

    added_first = max(n + 1, k)
    added_last = added_first + changed - 1
    added = series_sum(added_first, added_last, changed)

    return total - removed + added