"""Bit manipulation routines."""

from __future__ import annotations

from functools import reduce
from itertools import zip_longest
from operator import xor
from collections.abc import Iterable

_UINT32_MAX = 0xFFFFFFFF


def add_binary(a: str, b: str) -> str:
    """Add two binary strings and return the sum as a binary string."""
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = int(x) + int(y) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def hamming_weight(n: int) -> int:
    """Return the number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("hamming_weight needs a non-negative integer")
    return bin(n).count("1")


def reverse_bits(num: int) -> int:
    """Reverse the bits of a 32-bit unsigned integer."""
    if not 0 <= num <= _UINT32_MAX:
        raise ValueError("reverse_bits needs a 32-bit unsigned integer")
    return int(f"{num:032b}"[::-1], 2)


def single_number(nums: Iterable[int]) -> int:
    """Return the element that appears once where every other appears twice."""
    return reduce(xor, nums, 0)


def single_number2(nums: Iterable[int]) -> int:
    """Return the 32-bit element that appears once where every other appears three times."""
    values = list(nums)
    result = 0
    for bit in range(32):
        ones = sum((num >> bit) & 1 for num in values)
        if ones % 3:
            result |= 1 << bit
    if result > 0x7FFFFFFF:
        result -= 1 << 32
    return result


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a power of four."""
    return n > 0 and n & (n - 1) == 0 and n % 3 == 1


def xor_operation(n: int, start: int) -> int:
    """XOR together ``start + 2*i`` for ``i`` in ``range(n)``."""
    return reduce(xor, (start + 2 * i for i in range(n)), 0)