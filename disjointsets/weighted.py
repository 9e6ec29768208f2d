"""Weighted disjoint sets tracking potential differences between elements."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


class WeightedDsu:
    """Disjoint sets where each element has a weight relative to its leader."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._diff = [0] * n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range 0..{len(self._parent) - 1}")

    def leader(self, x: int) -> int:
        """Return the representative of ``x``, compressing the path."""
        self._check(x)
        path = []
        while self._parent[x] != x:
            path.append(x)
            x = self._parent[x]
        root = x
        for node in reversed(path):
            self._diff[node] += self._diff[self._parent[node]]
            self._parent[node] = root
        return root

    def weight(self, x: int) -> int:
        """Return the weight of ``x`` relative to its leader."""
        self.leader(x)
        return self._diff[x]

    def unite(self, x: int, y: int, w: int) -> None:
        """Merge so that ``weight(y) - weight(x) == w``."""
        if self.is_same(x, y):
            raise ValueError(f"elements {x} and {y} are already in the same set")
        w = w + self.weight(x) - self.weight(y)
        lx = self.leader(x)
        ly = self.leader(y)
        if self._rank[lx] == self._rank[ly]:
            self._parent[ly] = lx
            self._rank[lx] += 1
            self._diff[ly] = w
        elif self._rank[lx] > self._rank[ly]:
            self._parent[ly] = lx
            self._diff[ly] = w
        else:
            self._parent[lx] = ly
            self._diff[lx] = -w

    def is_same(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.leader(x) == self.leader(y)

    def diff(self, x: int, y: int) -> int:
        """Return ``weight(y) - weight(x)``; both must share a set."""
        if not self.is_same(x, y):
            raise ValueError(f"elements {x} and {y} are in different sets")
        return self.weight(y) - self.weight(x)


def depth_determination(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Answer depth queries on a forest of ``n`` single-node trees.

    ``(1, v, ...)`` asks for the depth of ``v``; ``(2, r, v)`` makes the root
    ``r`` a child of ``v``, which lies in another tree.
    """
    dsu = WeightedDsu(n)
    tree_root = list(range(n))
    depths = []
    for query in queries:
        command = query[0]
        if command == 1:
            v = query[1]
            depths.append(dsu.diff(tree_root[dsu.leader(v)], v))
        elif command == 2:
            r, v = query[1], query[2]
            if tree_root[dsu.leader(r)] != r:
                raise ValueError(f"node {r} is not the root of its tree")
            if dsu.is_same(r, v):
                raise ValueError(f"nodes {r} and {v} are in the same tree")
            root_of_v = tree_root[dsu.leader(v)]
            dsu.unite(v, r, 1)
            tree_root[dsu.leader(v)] = root_of_v
        else:
            raise ValueError(f"unknown command {command}")
    return depths


def answer_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int | None]:
    """Run ``(0, x, y, z)`` relate and ``(1, x, y)`` difference queries.

    A difference between unrelated elements is answered with None.
    """
    dsu = WeightedDsu(n)
    answers: list[int | None] = []
    for query in queries:
        command = query[0]
        if command == 0:
            _, x, y, z = query
            if not dsu.is_same(x, y):
                dsu.unite(x, y, z)
        else:
            x, y = query[1], query[2]
            answers.append(dsu.diff(x, y) if dsu.is_same(x, y) else None)
    return answers


def main(argv: list[str] | None = None) -> int:
    """Read relate/difference queries from standard input and print answers."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    n = next(numbers)
    count = next(numbers)
    queries: list[tuple[int, ...]] = []
    for _ in range(count):
        command = next(numbers)
        if command == 0:
            queries.append((command, next(numbers), next(numbers), next(numbers)))
        else:
            queries.append((command, next(numbers), next(numbers)))
    for answer in answer_queries(n, queries):
        print("?" if answer is None else answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())