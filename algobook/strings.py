"""String searching and suffix-array algorithms."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Iterable


class _TrieNode:
    __slots__ = ("children", "fail", "terminal", "output")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.fail: _TrieNode | None = None
        self.terminal: int | None = None
        self.output: list[int] = []


class AhoCorasick:
    """Multi-pattern matcher built from a list of patterns.

    Pattern identifiers are their positions in the list given to the
    constructor. If the same pattern appears twice, the later id wins.
    An empty pattern is never reported.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = list(patterns)
        self._root = _TrieNode()
        for pattern_id, pattern in enumerate(self.patterns):
            node = self._root
            for ch in pattern:
                node = node.children.setdefault(ch, _TrieNode())
            node.terminal = pattern_id
        self._compute_failures()

    def _compute_failures(self) -> None:
        root = self._root
        root.fail = root
        queue = deque([root])
        while queue:
            here = queue.popleft()
            for ch, child in here.children.items():
                if here is root:
                    child.fail = root
                else:
                    t = here.fail
                    while t is not root and ch not in t.children:
                        t = t.fail
                    child.fail = t.children.get(ch, root)
                child.output = list(child.fail.output)
                if child.terminal is not None:
                    child.output.append(child.terminal)
                queue.append(child)

    def search(self, text: str) -> list[tuple[int, int]]:
        """Return (end_index, pattern_id) for every match in ``text``."""
        root = self._root
        state = root
        matches: list[tuple[int, int]] = []
        for index, ch in enumerate(text):
            while state is not root and ch not in state.children:
                state = state.fail
            state = state.children.get(ch, state)
            matches.extend((index, pattern_id) for pattern_id in state.output)
        return matches


def naive_search(haystack: str, needle: str) -> list[int]:
    """Return every start position of ``needle`` in ``haystack`` (O(H*N))."""
    return [
        start
        for start in range(len(haystack) - len(needle) + 1)
        if haystack[start:start + len(needle)] == needle
    ]


def suffix_array_naive(text: str) -> list[int]:
    """Suffix array by sorting the suffixes directly."""
    return sorted(range(len(text)), key=lambda i: text[i:])


def suffix_array(text: str) -> list[int]:
    """Suffix array by prefix doubling (Manber-Myers)."""
    n = len(text)
    order = list(range(n))
    group = [ord(ch) for ch in text] + [-1]
    t = 1
    while t < n:
        keys = [(group[i], group[i + t] if i + t <= n else -1) for i in range(n)]
        order.sort(key=keys.__getitem__)
        t *= 2
        if t >= n:
            break
        new_group = [0] * (n + 1)
        new_group[n] = -1
        for prev, cur in pairwise(order):
            new_group[cur] = new_group[prev] + (keys[prev] < keys[cur])
        group = new_group
    return order


def min_rotation(text: str) -> str:
    """Return the lexicographically smallest rotation of ``text``."""
    if not text:
        return ""
    n = len(text)
    doubled = text + text
    start = next(s for s in suffix_array(doubled) if s <= n)
    return doubled[start:start + n]


def common_prefix_length(text: str, i: int, j: int) -> int:
    """Length of the common prefix of the suffixes starting at ``i`` and ``j``."""
    matched = 0
    while i < len(text) and j < len(text) and text[i] == text[j]:
        i += 1
        j += 1
        matched += 1
    return matched


def count_distinct_substrings(text: str) -> int:
    """Number of distinct non-empty substrings of ``text``."""
    if not text:
        return 0
    n = len(text)
    order = suffix_array(text)
    total = n - order[0]
    for prev, cur in pairwise(order):
        total += n - cur - common_prefix_length(text, prev, cur)
    return total