"""Graph traversals, shortest paths and structural decompositions."""

from __future__ import annotations

import heapq
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Sequence

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[float, int]]]


@dataclass
class BfsResult:
    """Outcome of a breadth-first search.

    ``distance[v]`` and ``parent[v]`` are ``None`` for vertices that were not
    reached; the start vertex is its own parent.
    """

    distance: list[int | None]
    parent: list[int | None]
    order: list[int]


class EdgeKind(Enum):
    TREE = 1
    FORWARD = 2
    BACK = 3
    CROSS = 4


def bfs(adj: Adjacency, start: int) -> BfsResult:
    """Breadth-first search from ``start`` over adjacency lists."""
    n = len(adj)
    distance: list[int | None] = [None] * n
    parent: list[int | None] = [None] * n
    order: list[int] = []
    distance[start] = 0
    parent[start] = start
    queue = deque([start])
    while queue:
        here = queue.popleft()
        order.append(here)
        for there in adj[here]:
            if distance[there] is None:
                distance[there] = distance[here] + 1
                parent[there] = here
                queue.append(there)
    return BfsResult(distance, parent, order)


def shortest_path(parent: Sequence[int | None], vertex: int) -> list[int]:
    """Path from ``vertex`` up to the root of a BFS spanning tree."""
    if parent[vertex] is None:
        raise ValueError(f"vertex {vertex} was not reached")
    path = [vertex]
    while parent[path[-1]] != path[-1]:
        path.append(parent[path[-1]])
    return path


def _dfs(neighbours, start: int, visited: list[bool], order: list[int]) -> None:
    visited[start] = True
    order.append(start)
    stack = [iter(neighbours(start))]
    while stack:
        there = next(stack[-1], None)
        if there is None:
            stack.pop()
        elif not visited[there]:
            visited[there] = True
            order.append(there)
            stack.append(iter(neighbours(there)))


def dfs_order(adj: Adjacency, start: int) -> list[int]:
    """Vertices in the order a depth-first search from ``start`` visits them."""
    visited = [False] * len(adj)
    order: list[int] = []
    _dfs(lambda v: adj[v], start, visited, order)
    return order


def dfs_all(adj: Adjacency) -> list[int]:
    """Depth-first visiting order covering every vertex of the graph."""
    visited = [False] * len(adj)
    order: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            _dfs(lambda v: adj[v], vertex, visited, order)
    return order


def dfs_matrix(matrix: Sequence[Sequence[bool]], start: int) -> list[int]:
    """Depth-first visiting order over an adjacency matrix."""
    visited = [False] * len(matrix)
    order: list[int] = []
    _dfs(
        lambda v: (there for there, edge in enumerate(matrix[v]) if edge),
        start,
        visited,
        order,
    )
    return order


def dijkstra(adj: WeightedAdjacency, start: int) -> list[float]:
    """Shortest distances from ``start`` using a priority queue.

    ``adj[v]`` holds ``(weight, vertex)`` pairs; unreachable vertices get ``inf``.
    """
    dist = [math.inf] * len(adj)
    dist[start] = 0
    queue = [(0, start)]
    while queue:
        cost, here = heapq.heappop(queue)
        if dist[here] < cost:
            continue
        for weight, there in adj[here]:
            candidate = cost + weight
            if candidate < dist[there]:
                dist[there] = candidate
                heapq.heappush(queue, (candidate, there))
    return dist


def dijkstra_dense(adj: WeightedAdjacency, start: int) -> list[float]:
    """Shortest distances from ``start`` by repeated linear scans (O(V^2))."""
    n = len(adj)
    dist = [math.inf] * n
    visited = [False] * n
    dist[start] = 0
    while True:
        candidates = [v for v in range(n) if not visited[v] and dist[v] < math.inf]
        if not candidates:
            break
        here = min(candidates, key=dist.__getitem__)
        visited[here] = True
        for weight, there in adj[here]:
            if not visited[there]:
                dist[there] = min(dist[there], dist[here] + weight)
    return dist


def cut_vertices(adj: Adjacency) -> list[int]:
    """Articulation points of an undirected graph, in increasing order."""
    n = len(adj)
    discovered: list[int | None] = [None] * n
    is_cut = [False] * n
    counter = count()

    def visit(here: int, is_root: bool) -> int:
        discovered[here] = next(counter)
        low = discovered[here]
        children = 0
        for there in adj[here]:
            if discovered[there] is None:
                children += 1
                sub = visit(there, False)
                if not is_root and sub >= discovered[here]:
                    is_cut[here] = True
                low = min(low, sub)
            else:
                low = min(low, discovered[there])
        if is_root:
            is_cut[here] = children >= 2
        return low

    for vertex in range(n):
        if discovered[vertex] is None:
            visit(vertex, True)
    return [v for v in range(n) if is_cut[v]]


def classify_edges(adj: Adjacency, start: int) -> dict[tuple[int, int], EdgeKind]:
    """Classify the directed edges met by a depth-first search from ``start``."""
    n = len(adj)
    discovered: list[int | None] = [None] * n
    finished = [False] * n
    kinds: dict[tuple[int, int], EdgeKind] = {}
    counter = count()

    def visit(here: int) -> None:
        discovered[here] = next(counter)
        for there in adj[here]:
            if discovered[there] is None:
                kinds[here, there] = EdgeKind.TREE
                visit(there)
            elif discovered[here] < discovered[there]:
                kinds[here, there] = EdgeKind.FORWARD
            elif not finished[there]:
                kinds[here, there] = EdgeKind.BACK
            else:
                kinds[here, there] = EdgeKind.CROSS
        finished[here] = True

    visit(start)
    return kinds


def euler_circuit(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Euler circuit of an undirected multigraph given as an edge-count matrix.

    The vertices are returned in the order they are finished, so the list
    begins and ends at ``start``. The input matrix is left untouched.
    """
    remaining = [list(row) for row in matrix]
    n = len(remaining)
    circuit: list[int] = []
    stack = [[start, 0]]
    while stack:
        frame = stack[-1]
        here, there = frame
        while there < n and remaining[here][there] == 0:
            there += 1
        frame[1] = there
        if there < n:
            remaining[here][there] -= 1
            remaining[there][here] -= 1
            stack.append([there, 0])
        else:
            stack.pop()
            circuit.append(here)
    return circuit


def strongly_connected_components(adj: Adjacency) -> list[int]:
    """Component id of every vertex (Tarjan); ids are 0-based, in completion order."""
    n = len(adj)
    discovered: list[int | None] = [None] * n
    component: list[int | None] = [None] * n
    stack: list[int] = []
    vertex_counter = count()
    component_counter = count()

    def visit(here: int) -> int:
        discovered[here] = next(vertex_counter)
        low = discovered[here]
        stack.append(here)
        for there in adj[here]:
            if discovered[there] is None:
                low = min(low, visit(there))
            elif component[there] is None:
                low = min(low, discovered[there])
        if low == discovered[here]:
            cid = next(component_counter)
            while True:
                member = stack.pop()
                component[member] = cid
                if member == here:
                    break
        return low

    for vertex in range(n):
        if discovered[vertex] is None:
            visit(vertex)
    return component