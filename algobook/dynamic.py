"""Dynamic programming, greedy and exhaustive-search exercises."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, Sequence


def longest_increasing_subsequence(values: Sequence[int]) -> list[int]:
    """A longest strictly increasing subsequence, preferring the earliest choices."""
    n = len(values)
    if n == 0:
        return []
    length = [1] * n
    choice: list[int | None] = [None] * n
    for cur in reversed(range(n)):
        for nxt in range(cur + 1, n):
            if values[nxt] > values[cur] and length[nxt] + 1 > length[cur]:
                length[cur] = length[nxt] + 1
                choice[cur] = nxt
    index: int | None = length.index(max(length))
    result = []
    while index is not None:
        result.append(values[index])
        index = choice[index]
    return result


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Most meetings ``(begin, end)`` that fit in one room, earliest-finish greedy."""
    count = 0
    last_end = None
    for end, begin in sorted((end, begin) for begin, end in meetings):
        if last_end is not None and last_end > begin:
            continue
        last_end = end
        count += 1
    return count


def _arrangements(n: int, m: int, prefix: str = "") -> Iterator[str]:
    if n == 0 and m == 0:
        yield prefix
        return
    if n > 0:
        yield from _arrangements(n - 1, m, prefix + "-")
    if m > 0:
        yield from _arrangements(n, m - 1, prefix + "o")


def morse_kth(n: int, m: int, k: int) -> str:
    """The ``k``-th (1-based) string of ``n`` dashes and ``m`` dots in dictionary order."""
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    if k < 1:
        raise ValueError("k must be at least 1")
    found = next(islice(_arrangements(n, m), k - 1, None), None)
    if found is None:
        raise ValueError(f"there are fewer than {k} such strings")
    return found


def snail_probability(days: int, depth: int) -> float:
    """Chance of climbing at least ``depth`` in ``days`` days, 1 or 2 a day with even odds."""
    if days < 0:
        raise ValueError("days must be non-negative")
    ways = [1]
    for _ in range(days):
        nxt = [0] * (len(ways) + 2)
        for height, count in enumerate(ways):
            nxt[height + 1] += count
            nxt[height + 2] += count
        ways = nxt
    reached = sum(count for height, count in enumerate(ways) if height >= depth)
    return reached / 2**days


def _fence(heights: Sequence[int], lo: int, hi: int) -> int:
    if lo == hi:
        return heights[lo]
    mid = (lo + hi) // 2
    best = max(_fence(heights, lo, mid), _fence(heights, mid + 1, hi))
    x, y = mid, mid + 1
    height = min(heights[x], heights[y])
    best = max(best, height * 2)
    while lo < x or y < hi:
        if y < hi and (x == lo or heights[x - 1] < heights[y + 1]):
            y += 1
            height = min(height, heights[y])
        else:
            x -= 1
            height = min(height, heights[x])
        best = max(best, height * (y - x + 1))
    return best


def fence_max_area(heights: Sequence[int]) -> int:
    """Largest rectangle under a fence of unit-width boards (divide and conquer)."""
    if not heights:
        raise ValueError("fence has no boards")
    return _fence(heights, 0, len(heights) - 1)


def selection_sort(values: Iterable) -> list:
    """Sorted copy of ``values`` by iterative selection sort."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def selection_sort_recursive(values: Iterable) -> list:
    """Sorted copy of ``values``: move the minimum to the front, then sort the rest."""
    items = list(values)
    if len(items) <= 1:
        return items
    smallest = min(range(len(items)), key=items.__getitem__)
    items[0], items[smallest] = items[smallest], items[0]
    return [items[0], *selection_sort_recursive(items[1:])]