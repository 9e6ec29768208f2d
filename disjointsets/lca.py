"""Tarjan's offline lowest-common-ancestor algorithm on a rooted tree."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from disjointsets.dsu import Dsu


def offline_lca(
    children: Sequence[Sequence[int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the lowest common ancestor of each ``(u, v)`` pair.

    ``children[i]`` lists the children of node ``i``; node 0 is the root.
    """
    n = len(children)
    pairs = list(queries)
    pending: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for index, (u, v) in enumerate(pairs):
        for node in (u, v):
            if not 0 <= node < n:
                raise IndexError(f"node {node} out of range 0..{n - 1}")
        pending[u].append((v, index))
        pending[v].append((u, index))

    answers: list[int | None] = [None] * len(pairs)
    if n == 0:
        return []

    dsu = Dsu(n)
    ancestor = list(range(n))
    finished = [False] * n
    stack = [(0, iter(children[0]))]
    while stack:
        u, remaining = stack[-1]
        child = next(remaining, None)
        if child is not None:
            ancestor[dsu.leader(child)] = child
            stack.append((child, iter(children[child])))
            continue
        stack.pop()
        finished[u] = True
        for other, index in pending[u]:
            if finished[other]:
                answers[index] = ancestor[dsu.leader(other)]
        if stack:
            parent = stack[-1][0]
            dsu.unite(u, parent)
            ancestor[dsu.leader(parent)] = parent

    unanswered = [pairs[i] for i, answer in enumerate(answers) if answer is None]
    if unanswered:
        raise ValueError(f"nodes not reachable from the root in queries {unanswered}")
    return [answer for answer in answers if answer is not None]


def main(argv: list[str] | None = None) -> int:
    """Read a tree and LCA queries from standard input; print one answer per line."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    n = next(numbers)
    children = []
    for _ in range(n):
        k = next(numbers)
        children.append([next(numbers) for _ in range(k)])
    count = next(numbers)
    queries = [(next(numbers), next(numbers)) for _ in range(count)]
    for answer in offline_lca(children, queries):
        print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())