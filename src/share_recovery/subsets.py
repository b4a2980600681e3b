# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Lexicographic enumeration of share id subsets."""

from __future__ import annotations

import math
from typing import Iterable, Iterator


def combinations(ids: Iterable[int], k: int) -> Iterator[tuple[int, ...]]:
    """Yield every size-``k`` subset of ``ids`` as a strictly increasing tuple.

    Ids are sorted first, then subsets are built by choosing the smallest
    remaining id, recursing and backtracking. The generator is lazy and each
    call starts a fresh enumeration.
    """

    if k < 0:
        raise ValueError("k must be non-negative")
    pool = sorted(set(ids))
    return _choose(pool, k, 0, [])


def _choose(pool: list[int], k: int, start: int, current: list[int]) -> Iterator[tuple[int, ...]]:
    if len(current) == k:
        yield tuple(current)
        return
    # stop early once too few ids remain to fill the subset
    for i in range(start, len(pool) - (k - len(current)) + 1):
        current.append(pool[i])
        yield from _choose(pool, k, i + 1, current)
        current.pop()


def count_combinations(n: int, k: int) -> int:
    """Return C(n, k), the number of subsets :func:`combinations` yields."""

    if k < 0 or n < 0:
        raise ValueError("n and k must be non-negative")
    return math.comb(n, k)


__all__ = ["combinations", "count_combinations"]
