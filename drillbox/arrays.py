"""Small algorithms over lists of integers."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Trade:
    """A single buy/sell decision; days are numbered from 1."""

    profit: int
    buy_day: int
    sell_day: int


def pairs_summing_to(values: Sequence[int], target: int) -> list[tuple[int, int]]:
    """Return every pair of values (in input order) whose sum equals ``target``."""
    return [(a, b) for a, b in combinations(values, 2) if a + b == target]


def unique_sorted(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order with duplicates removed."""
    result: list[int] = []
    for value in sorted(values):
        if not result or result[-1] != value:
            result.append(value)
    return result


def largest_common(first: Iterable[int], second: Iterable[int]) -> int | None:
    """Return the largest value present in both inputs, or None if there is none."""
    left = sorted(first, reverse=True)
    right = sorted(second, reverse=True)
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] == right[j]:
            return left[i]
        if left[i] > right[j]:
            i += 1
        else:
            j += 1
    return None


def max_profit(prices: Sequence[int]) -> Trade | None:
    """Find the most profitable single buy followed by a later sell.

    The earliest best trade wins ties. Returns None when no trade makes a profit.
    """
    best: Trade | None = None
    for (buy, low), (sell, high) in combinations(enumerate(prices, start=1), 2):
        gain = high - low
        if gain > (best.profit if best else 0):
            best = Trade(profit=gain, buy_day=buy, sell_day=sell)
    return best


def merge_sorted(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge two collections into a single ascending list, keeping duplicates."""
    return sorted([*first, *second])


def reverse_in_groups(values: Sequence[int], k: int) -> list[int]:
    """Reverse consecutive blocks of ``k`` values; a shorter last block is reversed too.

    ``k`` must lie between 0 and ``len(values) - 1``; 0 and 1 leave the order unchanged.
    """
    if k < 0:
        raise ValueError("only non-negative group sizes are accepted")
    if k > len(values) - 1:
        raise ValueError(f"group size {k} is beyond the limit for {len(values)} values")
    if k <= 1:
        return list(values)
    result: list[int] = []
    for start in range(0, len(values), k):
        result.extend(reversed(values[start:start + k]))
    return result


def triplets_summing_to(values: Iterable[int], target: int) -> list[tuple[int, int, int]]:
    """Find triples of values whose sum equals ``target`` using a two-pointer scan.

    Each triple is returned in ascending order, in the order the scan finds them.
    """
    ordered = sorted(values)
    found: list[tuple[int, int, int]] = []
    for i, first in enumerate(ordered[:-2]):
        lo, hi = i + 1, len(ordered) - 1
        while hi > lo:
            total = first + ordered[lo] + ordered[hi]
            if total == target:
                found.append((first, ordered[lo], ordered[hi]))
                lo += 1
                hi -= 1
            elif total < target:
                lo += 1
            else:
                hi -= 1
    return found


def common_elements(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the values of ``first``, in order, that also occur in ``second``."""
    lookup = set(second)
    return [value for value in first if value in lookup]