"""Travelling salesman by branch and bound with a DP finish."""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Sequence

from algobook.disjoint_set import DisjointSet

_CACHED_DEPTH = 5


def shortest_tour(dist: Sequence[Sequence[float]]) -> float:
    """Length of the shortest closed tour through every city, from city 0.

    ``dist`` must be a square, symmetric distance matrix.
    """
    n = len(dist)
    if n == 0:
        raise ValueError("no cities given")
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    if any(dist[i][j] != dist[j][i] for i in range(n) for j in range(i)):
        raise ValueError("distance matrix must be symmetric")
    if n == 1:
        return 0.0

    min_edge = [min(dist[i][j] for j in range(n) if j != i) for i in range(n)]
    nearest = [
        sorted((j for j in range(n) if j != i), key=lambda j, i=i: (dist[i][j], j))
        for i in range(n)
    ]
    edges = sorted((dist[i][j], i, j) for i in range(n) for j in range(i))
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def complete(here: int, visited: int) -> float:
        if visited == full:
            return dist[here][0]
        return min(
            dist[here][i] + complete(i, visited | (1 << i))
            for i in range(n)
            if not visited & (1 << i)
        )

    def unvisited_min_edges(visited: int) -> float:
        return sum(min_edge[i] for i in range(n) if not visited & (1 << i))

    def spanning_tree_bound(here: int, visited: int) -> float:
        allowed = {v for v in range(n) if v in (0, here) or not visited & (1 << v)}
        needed = len(allowed) - 1
        sets = DisjointSet(n)
        total = 0.0
        used = 0
        for weight, a, b in edges:
            if used == needed:
                break
            if a in allowed and b in allowed and sets.union(a, b):
                total += weight
                used += 1
        return total

    def swap_improves(path: list[int]) -> bool:
        if len(path) < 4:
            return False
        a, b, c, d = path[-4:]
        return dist[a][b] + dist[c][d] > dist[a][c] + dist[b][d]

    def reversal_improves(path: list[int]) -> bool:
        if len(path) < 4:
            return False
        b, q = path[-2], path[-1]
        return any(
            dist[p][a] + dist[b][q] > dist[p][b] + dist[a][q]
            for a, p in zip(path[:-3], path[1:-2])
        )

    best = math.inf

    def search(path: list[int], visited: int, length: float) -> None:
        nonlocal best
        here = path[-1]
        if length >= best:
            return
        if length + unvisited_min_edges(visited) >= best:
            return
        if len(path) + _CACHED_DEPTH >= n:
            best = min(best, length + complete(here, visited))
            return
        if length + spanning_tree_bound(here, visited) >= best:
            return
        if swap_improves(path) or reversal_improves(path):
            return
        for nxt in nearest[here]:
            if visited & (1 << nxt):
                continue
            path.append(nxt)
            search(path, visited | (1 << nxt), length + dist[here][nxt])
            path.pop()

    search([0], 1, 0.0)
    return best