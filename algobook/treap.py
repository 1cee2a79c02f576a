"""Treap: a randomised balanced binary search tree with order statistics."""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("key", "priority", "size", "left", "right")

    def __init__(self, key: Any, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None

    def update(self) -> None:
        self.size = 1 + _size(self.left) + _size(self.right)


def _size(node: _Node | None) -> int:
    return node.size if node is not None else 0


def _split(root: _Node | None, key: Any) -> tuple[_Node | None, _Node | None]:
    """Split into keys smaller than ``key`` and keys not smaller than ``key``."""
    if root is None:
        return None, None
    if root.key < key:
        less, rest = _split(root.right, key)
        root.right = less
        root.update()
        return root, rest
    less, rest = _split(root.left, key)
    root.left = rest
    root.update()
    return less, root


def _insert(root: _Node | None, node: _Node) -> _Node:
    if root is None:
        return node
    if root.priority > node.priority:
        if root.key > node.key:
            root.left = _insert(root.left, node)
        else:
            root.right = _insert(root.right, node)
        root.update()
        return root
    node.left, node.right = _split(root, node.key)
    node.update()
    return node


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    """Join two treaps where every key of ``left`` precedes every key of ``right``."""
    if left is None:
        return right
    if right is None:
        return left
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        left.update()
        return left
    right.left = _merge(left, right.left)
    right.update()
    return right


def _erase(root: _Node | None, key: Any) -> tuple[_Node | None, bool]:
    if root is None:
        return None, False
    if root.key == key:
        return _merge(root.left, root.right), True
    if root.key < key:
        root.right, removed = _erase(root.right, key)
    else:
        root.left, removed = _erase(root.left, key)
    root.update()
    return root, removed


class Treap:
    """Ordered multiset of keys kept balanced by random priorities."""

    def __init__(self, keys: Iterable = (), seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._root: _Node | None = None
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return _size(self._root)

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if node.key == key:
                return True
            node = node.right if node.key < key else node.left
        return False

    def insert(self, key: Any) -> None:
        """Add ``key``; equal keys are kept side by side."""
        self._root = _insert(self._root, _Node(key, self._random.random()))

    def erase(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; False if it was not present."""
        self._root, removed = _erase(self._root, key)
        return removed

    def kth(self, k: int) -> Any:
        """The ``k``-th smallest key, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError(f"rank {k} is out of range")
        node = self._root
        while True:
            left_size = _size(node.left)
            if k <= left_size:
                node = node.left
            elif k == left_size + 1:
                return node.key
            else:
                k -= left_size + 1
                node = node.right

    def count_less_than(self, x: Any) -> int:
        """Number of keys strictly smaller than ``x``."""
        count = 0
        node = self._root
        while node is not None:
            if node.key >= x:
                node = node.left
            else:
                count += _size(node.left) + 1
                node = node.right
        return count