"""Segment-tree range minimum queries and LCA distances in a family tree."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


class RangeMinQuery:
    """Segment tree answering minimum-over-range queries on a fixed list."""

    def __init__(self, values: Sequence[int]) -> None:
        if not values:
            raise ValueError("range minimum query needs at least one value")
        self._n = len(values)
        self._nodes = [0] * (4 * self._n)
        self._build(values, 0, self._n - 1, 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: Sequence[int], lo: int, hi: int, node: int) -> int:
        if lo == hi:
            self._nodes[node] = values[lo]
        else:
            mid = (lo + hi) // 2
            self._nodes[node] = min(
                self._build(values, lo, mid, node * 2),
                self._build(values, mid + 1, hi, node * 2 + 1),
            )
        return self._nodes[node]

    def _query(self, left: int, right: int, node: int, lo: int, hi: int) -> int | None:
        if hi < left or right < lo:
            return None
        if left <= lo and hi <= right:
            return self._nodes[node]
        mid = (lo + hi) // 2
        parts = (
            self._query(left, right, node * 2, lo, mid),
            self._query(left, right, node * 2 + 1, mid + 1, hi),
        )
        return min(p for p in parts if p is not None)

    def query(self, left: int, right: int) -> int:
        """Minimum of the values at positions ``left..right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")
        return self._query(left, right, 1, 0, self._n - 1)


class FamilyTree:
    """Rooted tree at node 0; ``parents[i - 1]`` is the parent of node ``i``."""

    def __init__(self, parents: Sequence[int]) -> None:
        n = len(parents) + 1
        children: list[list[int]] = [[] for _ in range(n)]
        for child, parent in enumerate(parents, start=1):
            if not 0 <= parent < n:
                raise ValueError(f"parent {parent} of node {child} is out of range")
            children[parent].append(child)

        self._depth: list[int | None] = [None] * n
        self._location: list[int | None] = [None] * n
        trip: list[int] = []
        self._depth[0] = 0
        self._location[0] = 0
        trip.append(0)
        stack = [(0, iter(children[0]))]
        while stack:
            node, pending = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                if stack:
                    trip.append(stack[-1][0])
            else:
                self._depth[child] = self._depth[node] + 1
                self._location[child] = len(trip)
                trip.append(child)
                stack.append((child, iter(children[child])))

        if any(d is None for d in self._depth):
            raise ValueError("parents do not form a tree rooted at 0")
        self._rmq = RangeMinQuery([self._depth[v] for v in trip])

    def __len__(self) -> int:
        return len(self._depth)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._depth):
            raise IndexError(f"node {node} is out of range")

    def depth(self, node: int) -> int:
        self._check(node)
        return self._depth[node]

    def distance(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        left, right = sorted((self._location[a], self._location[b]))
        lca_depth = self._rmq.query(left, right)
        return self._depth[a] + self._depth[b] - 2 * lca_depth


def main(argv: Sequence[str] | None = None) -> int:
    """Answer family-tree distance queries read from a file or standard input."""
    parser = argparse.ArgumentParser(description="Distances between family members.")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()

    tokens = iter(int(tok) for tok in text.split())
    out: list[str] = []
    for _ in range(next(tokens)):
        n, queries = next(tokens), next(tokens)
        tree = FamilyTree([next(tokens) for _ in range(n - 1)])
        for _ in range(queries):
            a, b = next(tokens), next(tokens)
            out.append(str(tree.distance(a, b)))
        out.append("")
    sys.stdout.write("".join(line + "\n" for line in out))
    return 0