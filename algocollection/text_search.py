"""Exact pattern search (Knuth-Morris-Pratt) and edit distance between strings."""

from __future__ import annotations

from collections.abc import Sequence


def build_lps(pattern: Sequence) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``.

    Entry ``i`` is the length of the longest proper prefix of ``pattern[: i + 1]``
    that is also a suffix of it.
    """
    lps = [0] * len(pattern)
    for i in range(1, len(pattern)):
        j = lps[i - 1]
        while j > 0 and pattern[i] != pattern[j]:
            j = lps[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        lps[i] = j
    return lps


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported, in increasing order.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = build_lps(pattern)
    length = len(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j > 0 and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
        if j == length:
            matches.append(i - length + 1)
            j = lps[j - 1]
    return matches


def edit_distance(word1: Sequence, word2: Sequence) -> int:
    """Return the Levenshtein distance: fewest insertions, deletions and substitutions."""
    previous = list(range(len(word2) + 1))
    for i, first in enumerate(word1, start=1):
        current = [i]
        for j, second in enumerate(word2, start=1):
            if first == second:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]