"""Array puzzles: searching, prefix sums, in-place rearrangement and counting."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import accumulate, combinations, pairwise, takewhile


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]`` (``i < j``) of the first pair summing to ``target``.

    Pairs are tried in order of ``i`` and then ``j``; an empty list means no pair.
    """
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    return []


def remove_element(nums: list[int], val: int) -> int:
    """Move the elements not equal to ``val`` to the front of ``nums``, in order.

    Returns how many were kept. Elements past that count are left as they were.
    """
    kept = [x for x in nums if x != val]
    nums[: len(kept)] = kept
    return len(kept)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = nums[0]
    running = 0
    for x in nums:
        running += x
        best = max(best, running)
        running = max(running, 0)
    return best


def plus_one(digits: list[int]) -> list[int]:
    """Add one to the decimal number held as a list of digits.

    The list is changed in place and returned. Raises ValueError if it is empty.
    """
    if not digits:
        raise ValueError("plus_one() needs at least one digit")
    nines = sum(1 for _ in takewhile(lambda d: d == 9, reversed(digits)))
    if nines == len(digits):
        digits[:] = [1] + [0] * len(digits)
        return digits
    digits[-nines - 1] += 1
    digits[len(digits) - nines :] = [0] * nines
    return digits


def _subsets(rest: Sequence[int], chosen: list[int]) -> Iterator[list[int]]:
    if not rest:
        yield chosen
        return
    yield from _subsets(rest[1:], chosen)
    yield from _subsets(rest[1:], chosen + [rest[0]])


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``.

    Subsets without an element come before those with it, element by element.
    """
    return list(_subsets(list(nums), []))


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into the first ``m`` items of ``nums1``.

    ``nums1`` must have room for ``m + n`` items; the merged run replaces them.
    """
    if len(nums1) < m + n:
        raise ValueError(f"nums1 holds {len(nums1)} items, needs room for {m + n}")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
        else:
            previous = rows[-1]
            rows.append([1] + [a + b for a, b in pairwise(previous)] + [1])
    return rows


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sale, or 0."""
    profit = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        profit = max(profit, price - lowest)
    return profit


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = sorted(set(nums))
    if not values:
        return 0
    longest = current = 1
    for previous, value in pairwise(values):
        current = current + 1 if value == previous + 1 else 1
        longest = max(longest, current)
    return longest


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if some value appears more than once in ``nums``."""
    return len(set(nums)) != len(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end of ``nums`` in place, keeping the rest in order."""
    non_zero = [x for x in nums if x != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value of ``nums`` that occurs last.

    Raises ValueError if no value repeats.
    """
    counts = Counter(nums)
    for value in reversed(nums):
        if counts[value] > 1:
            return value
    raise ValueError("no value occurs more than once")


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    right = sum(nums)
    left = 0
    for index, value in enumerate(nums):
        right -= value
        if left == right:
            return index
        left += value
    return -1


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the peak of a mountain-shaped sequence.

    Raises ValueError for an empty sequence.
    """
    if not arr:
        raise ValueError("a mountain needs at least one element")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = (low + high) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def sort_by_parity(nums: Sequence[int]) -> list[int]:
    """Return the even numbers of ``nums`` followed by the odd ones, each in order."""
    return [x for x in nums if x % 2 == 0] + [x for x in nums if x % 2 != 0]


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the running totals of ``nums``."""
    return list(accumulate(nums))


def average_salary(salary: Sequence[int]) -> float:
    """Return the mean salary leaving out one lowest and one highest value.

    Raises ValueError when fewer than three salaries are given.
    """
    if len(salary) < 3:
        raise ValueError("need at least three salaries")
    middle = sorted(salary)[1:-1]
    return sum(middle) / len(middle)


def can_make_arithmetic_progression(arr: Sequence[int]) -> bool:
    """Return True if ``arr`` can be reordered into an arithmetic progression."""
    steps = {b - a for a, b in pairwise(sorted(arr))}
    return len(steps) <= 1


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest total of any customer's accounts.

    Raises ValueError when there are no customers.
    """
    if not accounts:
        raise ValueError("no customers given")
    return max(map(sum, accounts))


def sum_of_unique(nums: Sequence[int]) -> int:
    """Return the sum of the values that occur exactly once in ``nums``."""
    return sum(value for value, count in Counter(nums).items() if count == 1)


def array_sign(nums: Sequence[int]) -> int:
    """Return the sign (1, -1 or 0) of the product of ``nums``."""
    if 0 in nums:
        return 0
    negatives = sum(1 for x in nums if x < 0)
    return -1 if negatives % 2 else 1


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Return ``names`` ordered by height, tallest first.

    Equal heights are ordered by name, descending. Raises ValueError when the
    sequences differ in length.
    """
    ranked = sorted(zip(heights, names, strict=True), reverse=True)
    return [name for _, name in ranked]


def find_array(pref: Sequence[int]) -> list[int]:
    """Return the array whose prefix XORs are ``pref``."""
    return [previous ^ current for previous, current in zip([0, *pref], pref)]


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of ``0..len(nums)`` missing from ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)