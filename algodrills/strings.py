"""Routines on strings."""

from __future__ import annotations


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def _expand(s: str, lo: int, hi: int) -> tuple[int, int]:
    while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
        lo -= 1
        hi += 1
    return lo + 1, hi


def longest_palindrome(s: str) -> str:
    """The longest palindromic substring; the earliest one wins ties."""
    best = (0, min(len(s), 1))
    for centre in range(len(s) - 1):
        for lo, hi in (_expand(s, centre, centre + 1), _expand(s, centre, centre)):
            if hi - lo > best[1] - best[0]:
                best = (lo, hi)
    return s[best[0]:best[1]]