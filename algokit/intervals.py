"""Interval scheduling and merging."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import pairwise


def can_attend_meetings(intervals: Sequence[Sequence[int]]) -> bool:
    """Return True if no two ``[start, end]`` meetings overlap."""
    ordered = sorted(intervals, key=lambda interval: interval[0])
    return all(cur[0] >= prev[1] for prev, cur in pairwise(ordered))


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals; return them ordered by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def min_meeting_rooms(intervals: Sequence[Sequence[int]]) -> int:
    """Return the fewest rooms needed to hold every meeting."""
    if len(intervals) < 2:
        return len(intervals)
    ordered = sorted(intervals, key=lambda interval: interval[0])
    ends = [ordered[0][1]]
    for start, end in ordered[1:]:
        if ends[0] <= start:
            heapq.heapreplace(ends, end)
        else:
            heapq.heappush(ends, end)
    return len(ends)


def overlap(start1: int, end1: int, start2: int, end2: int) -> int:
    """Count the inclusive units the second range shares with the first."""
    if end2 < start1:
        return 0
    if start2 <= start1:
        return min(end1, end2) - start1 + 1
    if start2 <= end1:
        return end1 - start2 + 1
    return 0