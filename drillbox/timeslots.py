"""Free time slots: merging, conversion to UTC and finding common meeting starts.

Times are hours written as ``H.MM`` numbers, so 9.30 stands for half past nine.
"""

from __future__ import annotations

from typing import Iterable

Slot = tuple[float, float]


def merge_adjacent(slots: Iterable[Slot]) -> list[Slot]:
    """Join consecutive slots where one ends exactly when the next begins."""
    merged: list[Slot] = []
    for start, end in slots:
        if merged and merged[-1][1] == start:
            merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def _ist(value: float, threshold: float) -> float:
    value -= 5.30
    if value < threshold:
        return -(24.60 + value) + 1
    return value - 0.40


def _west(value: float, offset: float) -> float:
    value += offset
    return -(value - 24) if value > 24 else value


def _jst(value: float) -> float:
    value -= 9
    return -(24.60 + value) if value < 0 else value


def to_utc(slots: Iterable[Slot], standard: str) -> list[Slot]:
    """Convert slots in IST, EST, JST or PST to UTC.

    A negative result marks a time on the neighbouring day. Slots in any
    other standard are returned unchanged.
    """
    slots = list(slots)
    if standard == "IST":
        return [(_ist(start, 0), _ist(end, 1)) for start, end in slots]
    if standard == "EST":
        return [(_west(start, 5), _west(end, 5)) for start, end in slots]
    if standard == "JST":
        return [(_jst(start), _jst(end)) for start, end in slots]
    if standard == "PST":
        return [(_west(start, 8), _west(end, 8)) for start, end in slots]
    return slots


def _hundredths(value: float) -> int:
    return round(value * 100)


def common_starts(first: Iterable[Slot], second: Iterable[Slot], duration: float) -> list[float]:
    """Return start times at which both people are free for the meeting.

    A start is reported for each pair of slots where the second person's slot
    begins inside the first person's slot and both leave at least
    ``duration / 10`` before they end.
    """
    needed = duration / 10
    second = list(second)
    starts: list[float] = []
    for start1, end1 in first:
        low, high = _hundredths(start1), _hundredths(end1)
        for start2, end2 in second:
            begin = _hundredths(start2)
            if low <= begin < high and end1 - start2 >= needed and end2 - start2 >= needed:
                starts.append(begin / 100)
    return starts