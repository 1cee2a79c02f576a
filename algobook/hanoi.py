"""Shortest solutions of the four-peg, twelve-disc tower puzzle.

A state packs the peg of every disc into two bits: disc ``d`` (0 is the
smallest) sits on peg ``(state >> 2 * (11 - d)) & 3``.
"""

from __future__ import annotations

from collections import deque

DISCS = 12
PEGS = 4
_STATE_LIMIT = 1 << (2 * DISCS)


def _check(state: int) -> None:
    if not 0 <= state < _STATE_LIMIT:
        raise ValueError(f"{state} is not a valid state")


def tops(state: int) -> list[int | None]:
    """Smallest disc on each peg, or None for an empty peg."""
    _check(state)
    top: list[int | None] = [None] * PEGS
    for i in range(DISCS):
        peg = (state >> (2 * i)) & 3
        disc = DISCS - 1 - i
        if top[peg] is None or disc < top[peg]:
            top[peg] = disc
    return top


def adjacent_states(state: int) -> list[int]:
    """States reachable by moving one top disc onto an empty peg or a larger disc."""
    top = tops(state)
    result = []
    for peg, disc in enumerate(top):
        if disc is None:
            continue
        shift = 2 * (DISCS - 1 - disc)
        for target in range(PEGS):
            if target == peg:
                continue
            if top[target] is not None and disc > top[target]:
                continue
            result.append((state & ~(3 << shift)) | (target << shift))
    return result


def min_moves(start: int, end: int) -> int:
    """Fewest moves from ``start`` to ``end`` by breadth-first search."""
    _check(start)
    _check(end)
    if start == end:
        return 0
    distance = {start: 0}
    queue = deque([start])
    while queue:
        here = queue.popleft()
        for nxt in adjacent_states(here):
            if nxt in distance:
                continue
            if nxt == end:
                return distance[here] + 1
            distance[nxt] = distance[here] + 1
            queue.append(nxt)
    raise RuntimeError("end state is unreachable")


def min_moves_bidirectional(start: int, end: int) -> int:
    """Fewest moves from ``start`` to ``end``, searching from both ends at once."""
    _check(start)
    _check(end)
    if start == end:
        return 0
    # Positive marks are steps from start plus one, negative ones from end.
    mark = {start: 1, end: -1}
    queue = deque([start, end])
    while queue:
        here = queue.popleft()
        for nxt in adjacent_states(here):
            if nxt not in mark:
                mark[nxt] = mark[here] + (1 if mark[here] > 0 else -1)
                queue.append(nxt)
            elif mark[here] * mark[nxt] < 0:
                return abs(mark[here]) + abs(mark[nxt]) - 1
    raise RuntimeError("end state is unreachable")