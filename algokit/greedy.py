"""Greedy algorithms."""

from __future__ import annotations

from collections.abc import Sequence


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the station from which a full lap is possible, or -1."""
    if sum(cost) > sum(gas):
        return -1
    tank = start = 0
    for index, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        if tank < 0:
            start = index + 1
            tank = 0
    return start


def jump(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last index."""
    n = len(nums)
    if n <= 1:
        return 0
    jumps = current_end = farthest = 0
    for index, reach in enumerate(nums):
        farthest = max(farthest, index + reach)
        if index == current_end:
            jumps += 1
            current_end = farthest
            if current_end >= n - 1:
                break
    return jumps