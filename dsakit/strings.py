"""String algorithms: longest palindrome and Knuth-Morris-Pratt search."""

from __future__ import annotations


def longest_palindrome(text: str) -> str:
    """Longest palindromic substring (Manacher); the first one on ties."""
    spread = "#" + "#".join(text) + "#" if text else "#"
    size = len(spread)
    radius = [0] * size
    center = right = 0
    for i in range(size):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while (
            i + radius[i] + 1 < size
            and i - radius[i] - 1 >= 0
            and spread[i + radius[i] + 1] == spread[i - radius[i] - 1]
        ):
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
    best_len, best_center = 0, 0
    for i, length in enumerate(radius):
        if length > best_len:
            best_len, best_center = length, i
    start = (best_center - best_len) // 2
    return text[start:start + best_len]


def prefix_function(pattern: str) -> list[int]:
    """For each prefix, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every, possibly overlapping, occurrence of ``pattern``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    matched = 0
    for i, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = lps[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(i - matched + 1)
            matched = lps[matched - 1]
    return matches