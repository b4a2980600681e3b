# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Plurality vote over candidate secrets."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from .config import TIE_BREAK_FIRST, TIE_BREAK_SMALLEST
from .errors import NoCandidates

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    winner: int
    count: int
    tied: bool
    total: int


def tally(candidates: Iterable[int]) -> Counter:
    """Count candidates, keeping first-encounter order for equal counts."""

    return Counter(candidates)


def tied_leaders(counts: Counter) -> list[int]:
    """Return every candidate sharing the maximum count, in encounter order."""

    if not counts:
        return []
    top = max(counts.values())
    return [candidate for candidate, count in counts.items() if count == top]


def decide(counts: Counter, *, tie_break: str | None = None) -> Verdict:
    """Pick the plurality winner from an existing tally.

    With ``tie_break="smallest"`` a tie goes to the smallest candidate, which
    does not depend on input order. ``"first"`` keeps the candidate met first.
    """

    if not counts:
        raise NoCandidates()
    tie_break = tie_break or TIE_BREAK_SMALLEST
    if tie_break not in (TIE_BREAK_SMALLEST, TIE_BREAK_FIRST):
        raise ValueError(f"unknown tie-break rule {tie_break!r}")

    leaders = tied_leaders(counts)
    winner = min(leaders) if tie_break == TIE_BREAK_SMALLEST else leaders[0]
    tied = len(leaders) > 1
    if tied:
        _logger.warning(
            "%d candidates tie with %d vote(s) each; picked by %s rule",
            len(leaders),
            counts[winner],
            tie_break,
        )
    return Verdict(winner=winner, count=counts[winner], tied=tied, total=sum(counts.values()))


def most_frequent(candidates: Iterable[int], *, tie_break: str | None = None) -> int:
    """Return the most frequent candidate, raising :class:`NoCandidates` if empty."""

    return decide(tally(candidates), tie_break=tie_break).winner


__all__ = ["Verdict", "tally", "tied_leaders", "decide", "most_frequent"]
