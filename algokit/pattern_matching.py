"""Exact string matching algorithms.

Every matcher returns the list of positions of ``text`` where ``pattern``
occurs, in increasing order.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence


class _Sentinel:
    """A marker that compares equal only to itself."""

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name


_PATTERN_END = _Sentinel("<pattern end>")
_TEXT_END = _Sentinel("<text end>")


def _trivial(pattern: Sequence[Any], text: Sequence[Any]) -> Optional[List[int]]:
    if not pattern:
        return list(range(len(text) + 1))
    if len(pattern) > len(text):
        return []
    return None


def naive(pattern: str, text: str) -> List[int]:
    """Compare the pattern against every alignment of the text."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m = len(pattern)
    found = []
    for i in range(len(text) - m + 1):
        j = 0
        while j < m and pattern[j] == text[i + j]:
            j += 1
        if j >= m:
            found.append(i)
    return found


def naive_sentinel(pattern: str, text: str) -> List[int]:
    """The naive matcher, with end markers instead of a length check."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m = len(pattern)
    p = [*pattern, _PATTERN_END]
    t = [*text, _TEXT_END]
    found = []
    for i in range(len(text) - m + 1):
        j = 0
        while p[j] == t[i + j]:
            j += 1
        if j >= m:
            found.append(i)
    return found


def prefix_function(s: Sequence[Any]) -> List[int]:
    """Return, for each position i, the length of the longest prefix of ``s``
    that also starts at i (the whole length at position 0)."""
    n = len(s)
    if n == 0:
        return []
    pref = [0] * n
    pref[0] = n
    if n == 1:
        return pref
    h = 0
    while 1 + h < n and s[h] == s[1 + h]:
        h += 1
    pref[1] = h
    left, right = 1, h
    for i in range(2, n):
        if right < i:
            h = 0
        elif pref[i - left] < right - i + 1:
            pref[i] = pref[i - left]
            continue
        else:
            h = right - i + 1
        while i + h < n and s[h] == s[i + h]:
            h += 1
        pref[i] = h
        left, right = i, i + h - 1
    return pref


def prefix_matching(pattern: str, text: str) -> List[int]:
    """Find occurrences from the prefix function of pattern, separator, text."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m = len(pattern)
    pref = prefix_function([*pattern, _PATTERN_END, *text])
    return [i for i in range(len(text)) if pref[i + m + 1] == m]


def knuth_morris_pratt(pattern: str, text: str) -> List[int]:
    """Knuth-Morris-Pratt matching with shifts precomputed from the prefix function."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m, n = len(pattern), len(text)
    p = [*pattern, _PATTERN_END]
    t = [*text, _TEXT_END]
    pref = prefix_function(p)
    shift = list(range(m + 1))
    for h in range(m - 1, -1, -1):
        shift[1 + h + pref[1 + h]] = h
    found = []
    i = j = 0
    while i <= n - m:
        while p[j] == t[i + j]:
            j += 1
        if j >= m:
            found.append(i)
        i += shift[j] + 1
        j = max(0, j - shift[j] - 1)
    return found


def boyer_moore(pattern: str, text: str) -> List[int]:
    """Right-to-left matching with good-suffix shifts from the reversed pattern."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m, n = len(pattern), len(text)
    p = [_PATTERN_END, *pattern]
    t = [_TEXT_END, *text]
    pref = prefix_function([*reversed(pattern), _PATTERN_END])

    # Shifts h >= j: the suffix of length m - h is also a prefix.
    shift = [m] * (m + 1)
    best = m
    for j in range(m, -1, -1):
        if j >= 1 and pref[j] == m - j:
            best = j
        shift[j] = best
    # Shifts h < j: the matched suffix reappears ending at m - h,
    # preceded by a different character.
    for h in range(m - 1, 0, -1):
        j = m - pref[h]
        if h < j:
            shift[j] = min(shift[j], h)

    found = []
    i = 0
    while i <= n - m:
        j = m
        while p[j] == t[i + j]:
            j -= 1
        if j == 0:
            found.append(i)
        i += shift[j]
    return found


def shift_and(pattern: str, text: str) -> List[int]:
    """Bit-parallel matching: one mask of pattern positions per character."""
    trivial = _trivial(pattern, text)
    if trivial is not None:
        return trivial
    m = len(pattern)
    masks: dict = {}
    for k, char in enumerate(pattern):
        masks[char] = masks.get(char, 0) | (1 << k)
    last = 1 << (m - 1)
    state = 0
    found = []
    for i, char in enumerate(text):
        state = ((state << 1) | 1) & masks.get(char, 0)
        if state & last:
            found.append(i - m + 1)
    return found