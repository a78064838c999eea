"""Hash-table algorithms over strings and integer arrays."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby, pairwise


def are_sentences_similar(
    sentence1: Sequence[str],
    sentence2: Sequence[str],
    similar_pairs: Sequence[Sequence[str]],
) -> bool:
    """Return True if the sentences match word for word.

    Two words match when they have the same length or when they form a
    listed pair, in either order.
    """
    if len(sentence1) != len(sentence2):
        return False
    pairs = {(first, second) for first, second in similar_pairs}
    return all(
        len(a) == len(b) or (a, b) in pairs or (b, a) in pairs
        for a, b in zip(sentence1, sentence2)
    )


def calculate_time(keyboard: str, word: str) -> int:
    """Return how far one finger travels to type ``word`` on a one-row keyboard.

    The finger starts on the first key. Characters missing from the
    keyboard count as sitting on the first key.
    """
    if not word:
        return 0
    position = {char: index for index, char in enumerate(keyboard)}
    travel = sum(
        abs(position.get(cur, 0) - position.get(prev, 0))
        for prev, cur in pairwise(word)
    )
    start = position.get(keyboard[0], 0) if keyboard else 0
    return travel + abs(start - position.get(word[0], 0))


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if ``ransom_note`` can be spelled from the letters of ``magazine``."""
    return not Counter(ransom_note) - Counter(magazine)


def count_elements(arr: Sequence[int]) -> int:
    """Count the elements ``x`` (duplicates included) for which ``x + 1`` is also present."""
    present = set(arr)
    return sum(1 for num in arr if num + 1 in present)


def find_shortest_sub_array(nums: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run with the same degree as ``nums``."""
    counts: Counter[int] = Counter()
    first: dict[int, int] = {}
    max_count = min_len = 0
    for index, num in enumerate(nums):
        first.setdefault(num, index)
        counts[num] += 1
        span = index - first[num] + 1
        if counts[num] > max_count:
            max_count = counts[num]
            min_len = span
        elif counts[num] == max_count:
            min_len = min(min_len, span)
    return min_len


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another, keeping input order in each group."""
    groups: dict[str, list[str]] = {}
    for s in strs:
        groups.setdefault("".join(sorted(s)), []).append(s)
    return list(groups.values())


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of ``s``."""
    return Counter(s) == Counter(t)


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for x, y in zip(s, t):
        if forward.setdefault(x, y) != y or backward.setdefault(y, x) != x:
            return False
    return True


def largest_unique_number(nums: Sequence[int]) -> int:
    """Return the largest value occurring exactly once, or -1 if there is none."""
    counts = Counter(nums)
    return max((num for num, count in counts.items() if count == 1), default=-1)


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers among ``nums``."""
    present = set(nums)
    best = 0
    for num in present:
        if num - 1 in present:
            continue
        end = num + 1
        while end in present:
            end += 1
        best = max(best, end - num)
    return best


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive values as ``"a->b"``, or ``"a"`` for a single value."""
    result: list[str] = []
    for _, run in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        values = [value for _, value in run]
        start, end = values[0], values[-1]
        result.append(str(start) if start == end else f"{start}->{end}")
    return result


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target`` and ``j < i``, or ``[-1, -1]``."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        other = seen.get(target - num)
        if other is not None:
            return [index, other]
        seen[num] = index
    return [-1, -1]


def word_pattern(pattern: str, s: str) -> bool:
    """Return True if the space-separated words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    word_to_letter: dict[str, str] = {}
    letter_to_word: dict[str, str] = {}
    for letter, word in zip(pattern, words):
        if word_to_letter.setdefault(word, letter) != letter:
            return False
        if letter_to_word.setdefault(letter, word) != word:
            return False
    return True