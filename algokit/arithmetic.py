"""Integer and calendar arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from datetime import date, timedelta
from typing import TypeVar, Union

_ROTATIONS = {0: 0, 1: 1, 6: 9, 8: 8, 9: 6}
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

T = TypeVar("T")
Number = Union[int, float]


def _digits(n: int) -> Iterator[int]:
    """Yield the decimal digits of ``n`` from the lowest; nothing if ``n <= 0``."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def confusing_number(n: int) -> bool:
    """Return True if ``n`` turned upside down is a different valid number."""
    rotated = 0
    for digit in _digits(n):
        if digit not in _ROTATIONS:
            return False
        rotated = rotated * 10 + _ROTATIONS[digit]
    return rotated != n


def convert_temperature(celsius: float) -> list[float]:
    """Return ``[kelvin, fahrenheit]`` for a Celsius temperature."""
    return [celsius + 273.15, celsius * 1.80 + 32.00]


def difference_of_sum(nums: Iterable[int]) -> int:
    """Return the sum of the elements minus the sum of their digits."""
    values = list(nums)
    return sum(values) - sum(sum(_digits(num)) for num in values)


def is_palindrome(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, or -1 if ``x`` is negative."""
    return math.isqrt(x) if x >= 0 else -1


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as its decimal digits, most significant first."""
    if not digits:
        return []
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, value = divmod(digit + carry, 10)
        result.append(value)
    if carry % 10:
        result.append(carry % 10)
    return result[::-1]


def smallest_even_multiple(n: int) -> int:
    """Return the least common multiple of 2 and ``n``."""
    return n if n % 2 == 0 else n * 2


def sum_of_digits_of_harshad_number(x: int) -> int:
    """Return the digit sum of ``x`` if it divides ``x``, otherwise -1."""
    if x <= 0:
        raise ValueError("x must be positive")
    total = sum(_digits(x))
    return total if x % total == 0 else -1


def day_of_the_week(day: int, month: int, year: int) -> str:
    """Return the English weekday name of a date.

    Out-of-range months and days roll over into neighbouring months and years.
    """
    extra_years, month_index = divmod(month - 1, 12)
    first = date(year + extra_years, month_index + 1, 1)
    return _WEEKDAYS[(first + timedelta(days=day - 1)).weekday()]


def _square_digit_sum(n: int) -> int:
    return sum(digit * digit for digit in _digits(n))


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing squared digits of ``n`` reaches 1."""
    slow, fast = n, _square_digit_sum(n)
    while fast != 1 and slow != fast:
        slow = _square_digit_sum(slow)
        fast = _square_digit_sum(_square_digit_sum(fast))
    return fast == 1


def div(a: Number, b: Number) -> Number:
    """Divide ``a`` by ``b``; integers divide with truncation toward zero."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def add(a: T, b: T) -> T:
    """Return ``a + b`` for numbers or strings."""
    return a + b  # type: ignore[operator]