"""Offline minimum: answer a known sequence of insert / extract-min operations."""

from __future__ import annotations

from collections.abc import Iterable

from disjointsets.dsu import Dsu

EXTRACT = -1


def offline_minimum(operations: Iterable[int]) -> list[int]:
    """Return the keys removed by each extract-min, in order.

    Every item other than ``EXTRACT`` inserts that distinct integer.
    """
    block_of: dict[int, int] = {}
    block = 0
    size = 0
    for op in operations:
        if op == EXTRACT:
            if size == 0:
                raise ValueError("extract-min on an empty set")
            size -= 1
            block += 1
        else:
            if op in block_of:
                raise ValueError(f"value {op} is inserted more than once")
            block_of[op] = block
            size += 1

    extracts = block
    # Each set of blocks carries the label of the smallest extraction still open.
    labels = Dsu(extracts + 1)
    label_of = list(range(extracts + 1))
    extracted: list[int] = [0] * extracts

    for value in sorted(block_of):
        j = label_of[labels.leader(block_of[value])]
        if j == extracts:
            continue
        extracted[j] = value
        following = label_of[labels.leader(j + 1)]
        labels.unite(j, j + 1)
        label_of[labels.leader(j)] = following
    return extracted