"""String puzzles: numerals, brackets, palindromes and letter counts."""

from __future__ import annotations

import string
from functools import reduce
from operator import xor

_ROMAN_VALUES = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5}
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_BRACKET_PAIRS.values())
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _roman_value(symbol: str) -> int:
    return _ROMAN_VALUES.get(symbol, 1)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it forms a subtractive pair with it;
    unknown symbols count as 1.
    """
    total = 0
    pending: int | None = None
    for value in map(_roman_value, s):
        if pending is None:
            pending = value
        elif pending >= value:
            total += pending
            pending = value
        else:
            total += value - pending
            pending = None
    if pending is not None:
        total += pending
    return total


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order."""
    if len(s) % 2:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif stack and _BRACKET_PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def is_palindrome_text(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` form a palindrome,
    ignoring case."""
    cleaned = "".join(c for c in s if c.isascii() and c.isalnum()).lower()
    return cleaned == cleaned[::-1]


def find_the_difference(s: str, t: str) -> str:
    """Return the character that ``t`` has in addition to the characters of ``s``."""
    return chr(reduce(xor, map(ord, s + t), 0))


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII capital letters of ``s``, leaving everything else."""
    return s.translate(_ASCII_LOWER)


def array_strings_are_equal(word1: list[str], word2: list[str]) -> bool:
    """Return True if both lists of pieces join to the same string."""
    return "".join(word1) == "".join(word2)


def min_partitions(n: str) -> int:
    """Return how many deci-binary numbers are needed to sum to decimal ``n``."""
    return max((ord(c) - ord("0") for c in n), default=0)


def percentage_letter(s: str, letter: str) -> int:
    """Return the percentage of ``s`` made up of ``letter``, rounded down.

    Raises ZeroDivisionError for an empty string.
    """
    return s.count(letter) * 100 // len(s)


def longest_continuous_substring(s: str) -> int:
    """Return the length of the longest run of consecutive alphabet letters.

    The result is never below 1.
    """
    longest = current = 1
    for previous, char in zip(s, s[1:]):
        current = current + 1 if ord(char) - ord(previous) == 1 else 1
        longest = max(longest, current)
    return longest