"""Integer puzzles: digits, powers, bit counts and simple searches."""

from __future__ import annotations

import math
from collections.abc import Callable

_UINT32_MASK = 0xFFFFFFFF


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def _power_non_negative(x: float, n: int) -> float:
    if n == 0:
        return 1.0
    if n == 1:
        return x
    half = _power_non_negative(x, n // 2)
    if n % 2 == 0:
        return half * half
    return x * half * half


def power(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring.

    Raises ZeroDivisionError when ``x`` is zero and ``n`` is negative.
    """
    if n < 0:
        x = 1 / x
        n = -n
    return _power_non_negative(x, n)


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError(f"cannot take the square root of negative number {x}")
    return math.isqrt(x)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` taken as an unsigned 32-bit value."""
    return (n & _UINT32_MASK).bit_count()


def _digit_square_sum(n: int) -> int:
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Return True if repeatedly summing squared digits of ``n`` reaches 1."""
    slow = fast = n
    while True:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
        if slow == fast:
            return slow == 1


def _is_power_of(n: int, base: int) -> bool:
    if n < 1:
        return False
    while n != 1:
        n, remainder = divmod(n, base)
        if remainder:
            return False
    return True


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return _is_power_of(n, 2)


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is a positive power of three."""
    return _is_power_of(n, 3)


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a positive power of four."""
    return _is_power_of(n, 4)


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` up to its highest set bit."""
    mask = 0
    while mask < num:
        mask = (mask << 1) | 1
    return ~num & mask


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) == 0."""
    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def divisor_game(n: int) -> bool:
    """Return True if the first player wins the divisor game starting at ``n``."""
    return n % 2 == 0


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum.

    Digits of a negative number carry its sign; zero has no digits.
    """
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    product, total = 1, 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        digit *= sign
        product *= digit
        total += digit
    return product - total


def count_odds(low: int, high: int) -> int:
    """Count the odd numbers between ``low`` and ``high`` inclusive."""
    count = (high - low) // 2
    if low % 2 == 1 or high % 2 == 1:
        count += 1
    return count


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits must be flipped to turn ``start`` into ``goal``."""
    return hamming_weight(start ^ goal)


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def smallest_even_multiple(n: int) -> int:
    """Return the smallest positive number that is a multiple of both 2 and ``n``."""
    if n == 0:
        raise ValueError("zero has no positive multiple")
    return math.lcm(2, n)


def count_bits(n: int) -> list[int]:
    """Return the set-bit count of every integer from 0 to ``n`` inclusive."""
    return [hamming_weight(i) for i in range(n + 1)]


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the number picked in 1..``n`` using the ``guess`` oracle.

    ``guess(num)`` returns 0 when ``num`` is the pick, -1 when ``num`` is
    higher than the pick and 1 when it is lower.  Raises ValueError if the
    oracle never answers 0.
    """
    low, high = 1, n
    while low <= high:
        mid = low + (high - low) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == 1:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"no number in 1..{n} satisfies the guess oracle")