"""Dynamic programming: coins, palindromes, edit distance, rain water, word breaks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to ``amount``, or -1 if it cannot be made.

    Every denomination may be used any number of times.
    """
    if amount < 0:
        raise ValueError("amount must be non-negative")
    denominations = list(coins)
    if any(coin < 0 for coin in denominations):
        raise ValueError("coins must be non-negative")
    unreachable = amount + 1
    fewest = [0] + [unreachable] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            previous = fewest[total - coin]
            if previous != unreachable:
                fewest[total] = min(fewest[total], previous + 1)
    return -1 if fewest[amount] == unreachable else fewest[amount]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on a tie."""
    if len(s) < 2:
        return s
    start, length = 0, 1
    for center in range(2 * len(s) - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        size = hi - lo - 1
        if size > length:
            start, length = lo + 1, size
    return s[start : start + length]


def _can_form(word: str, pieces: set[str]) -> bool:
    formed = [True] + [False] * len(word)
    for end in range(1, len(word) + 1):
        formed[end] = any(
            formed[begin] and word[begin:end] in pieces for begin in range(end)
        )
    return formed[-1]


def longest_word(words: Iterable[str]) -> str:
    """Return the first word that can be built from the words ranked before it.

    Words are ranked longest first, then alphabetically; the top-ranked word
    is never chosen. Returns an empty string when no word qualifies.
    """
    seen: set[str] = set()
    for word in sorted(words, key=lambda w: (-len(w), w)):
        if seen and _can_form(word, seen):
            return word
        seen.add(word)
    return ""


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance (insert, delete, replace) between two words."""
    previous = list(range(len(word2) + 1))
    for i, a in enumerate(word1, start=1):
        current = [i]
        for j, b in enumerate(word2, start=1):
            if a == b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j], current[j - 1], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the bar heights hold."""
    n = len(height)
    if n < 3:
        return 0
    left_max = list(accumulate(height[:-1], max, initial=0))
    right_max = list(accumulate(reversed(height[1:]), max, initial=0))[::-1]
    return sum(
        max(min(left, right) - bar, 0)
        for left, right, bar in zip(left_max[1:-1], right_max[1:-1], height[1:-1])
    )


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Return True if ``s`` is a concatenation of dictionary words (reuse allowed)."""
    return _can_form(s, set(word_dict))