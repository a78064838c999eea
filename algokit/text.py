"""String algorithms: palindromes, word manipulation, windows over characters."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import groupby, zip_longest
from collections.abc import Iterator, MutableSequence, Sequence


def can_permute_palindrome(s: str) -> bool:
    """Return True if some rearrangement of ``s`` is a palindrome."""
    odd = sum(count % 2 for count in Counter(s).values())
    return odd <= 1


def common_chars(words: Sequence[str]) -> list[str]:
    """Return the characters (with repeats) that appear in every word, sorted."""
    if not words:
        return []
    common = reduce(lambda acc, word: acc & Counter(word), words[1:], Counter(words[0]))
    return sorted(common.elements())


def count_letters(s: str) -> int:
    """Count the substrings of ``s`` made of a single repeated letter."""
    total = 0
    for _, run in groupby(s):
        length = sum(1 for _ in run)
        total += length * (length + 1) // 2
    return total


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters of ``s`` read the same both ways, ignoring case."""
    letters = [c.upper() for c in s if c.isascii() and c.isalpha()]
    return letters == letters[::-1]


def length_of_last_word(s: str) -> int:
    """Return the length of the longest run of non-space characters in ``s``."""
    return max((len(word) for word in s.split(" ")), default=0)


def length_of_longest_substring_two_distinct(s: str) -> int:
    """Return the length of the longest substring with at most two distinct characters."""
    return length_of_longest_substring_k_distinct(s, 2)


def length_of_longest_substring_k_distinct(s: str, k: int) -> int:
    """Return the length of the longest substring with at most ``k`` distinct characters."""
    if len(s) <= k:
        return len(s)
    best = 0
    window: Counter[str] = Counter()
    left = 0
    for right, char in enumerate(s):
        window[char] += 1
        while len(window) > k:
            gone = s[left]
            window[gone] -= 1
            if window[gone] == 0:
                del window[gone]
            left += 1
        best = max(best, right - left + 1)
    return best


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the letters of two words, starting with ``word1``."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def partition(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""

    def splits(rest: str) -> Iterator[list[str]]:
        if not rest:
            yield []
            return
        for end in range(1, len(rest) + 1):
            head = rest[:end]
            if head == head[::-1]:
                for tail in splits(rest[end:]):
                    yield [head, *tail]

    return list(splits(s))


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing extra spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def reverse_words_in_place(chars: MutableSequence[str]) -> None:
    """Reverse the order of the space-separated words in a list of characters, in place."""
    chars.reverse()
    boundaries = [i for i, c in enumerate(chars) if c == " "]
    boundaries.append(len(chars))
    start = 0
    for end in boundaries:
        chars[start:end] = chars[start:end][::-1]
        start = end + 1


def shortest_way(source: str, target: str) -> int:
    """Return how many subsequences of ``source`` concatenate to ``target``, or -1."""
    passes, pos = 1, 0
    for char in target:
        index = source.find(char, pos)
        if index == -1:
            index = source.find(char)
            if index == -1:
                return -1
            passes += 1
        pos = index + 1
    return passes


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def string_shift(s: str, shift: Sequence[Sequence[int]]) -> str:
    """Apply ``[direction, amount]`` shifts (0 left, 1 right) to ``s``."""
    if not s:
        return ""
    move = sum(amount if direction else -amount for direction, amount in shift)
    move %= len(s)
    if move == 0:
        return s
    return s[-move:] + s[:-move]


def valid_word_square(words: Sequence[str]) -> bool:
    """Return True if the k-th row and k-th column of the words read the same."""
    if not words:
        return False
    for i, row in enumerate(words):
        for j, other in enumerate(words[i:], start=i):
            if i >= len(other):
                return True
            if j >= len(row) or row[j] != other[i]:
                return False
    return True


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both ``str1`` and ``str2``."""
    longer, shorter = str1, str2
    while True:
        if len(longer) < len(shorter):
            longer, shorter = shorter, longer
        if not shorter:
            return longer
        if not longer.startswith(shorter):
            return ""
        longer = longer[len(shorter):]