"""Routines on integers and integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT32_MIN <= result <= INT32_MAX else 0


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets of ``nums`` that sum to zero."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered[:-2]):
        if i and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, len(ordered) - 1
        while lo < hi:
            left, right = ordered[lo], ordered[hi]
            total = first + left + right
            if total < 0:
                lo += 1
            elif total > 0:
                hi -= 1
            else:
                result.append([first, left, right])
                while lo < hi and ordered[lo] == left:
                    lo += 1
                while hi > lo and ordered[hi] == right:
                    hi -= 1
    return result


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence, or -1 if absent."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] >= nums[lo]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[-1]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    values = iter(nums)
    try:
        running = best = next(values)
    except StopIteration:
        raise ValueError("max_subarray needs at least one number") from None
    for value in values:
        running = max(running + value, value)
        best = max(best, running)
    return best


def unique_paths(m: int, n: int) -> int:
    """Number of right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(m - 1):
        row = list(accumulate(reversed(row)))[::-1]
    return row[0]


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses none of which are adjacent."""
    totals: list[int] = []
    for value in nums:
        if len(totals) >= 2:
            value += max(totals[-2], totals[-3] if len(totals) >= 3 else 0)
        totals.append(value)
    return max(totals, default=0)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait for a warmer temperature, 0 where none comes."""
    answer = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperatures[waiting[-1]] < temperature:
            earlier = waiting.pop()
            answer[earlier] = day - earlier
        waiting.append(day)
    return answer