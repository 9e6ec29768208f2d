"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

import sys
from collections.abc import Iterable


class Dsu:
    """Disjoint sets over the integers ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range 0..{len(self._parent) - 1}")

    def leader(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already merged."""
        x = self.leader(x)
        y = self.leader(y)
        if x == y:
            return False
        if self._rank[x] == self._rank[y]:
            self._parent[y] = x
            self._rank[x] += 1
        elif self._rank[x] > self._rank[y]:
            self._parent[y] = x
        else:
            self._parent[x] = y
        return True

    def is_same(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set."""
        return self.leader(x) == self.leader(y)


def answer_queries(n: int, queries: Iterable[tuple[int, int, int]]) -> list[bool]:
    """Run ``(command, x, y)`` queries: command 0 unites, any other asks."""
    dsu = Dsu(n)
    answers = []
    for command, x, y in queries:
        if command == 0:
            dsu.unite(x, y)
        else:
            answers.append(dsu.is_same(x, y))
    return answers


def main(argv: list[str] | None = None) -> int:
    """Read ``N Q`` and ``Q`` queries from standard input; print 1 or 0 per question."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    n = next(numbers)
    count = next(numbers)
    queries = [(next(numbers), next(numbers), next(numbers)) for _ in range(count)]
    for same in answer_queries(n, queries):
        print(1 if same else 0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())