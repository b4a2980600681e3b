# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Robust reconstruction: interpolate every k-subset and take a plurality vote.

Any ``k`` honest shares interpolate to the same constant term, while a subset
that contains a corrupted share almost always lands somewhere else. Running
every subset and counting the results therefore singles out the secret as long
as honest subsets outnumber the ones that happen to agree on a wrong value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Union

from .config import RecoveryConfig
from .decoder import decode_shares
from .errors import DuplicateShareId, InsufficientShares, InvalidThreshold
from .interpolation import interpolate_at_zero
from .models import EvaluatedShare, ShareDocument
from .subsets import combinations, count_combinations
from .tally import decide, tally

_logger = logging.getLogger(__name__)

Shares = Union[Mapping[int, EvaluatedShare], Iterable[EvaluatedShare]]


@dataclass(frozen=True)
class Reconstruction:
    """Outcome of one reconstruction run."""

    secret: int
    threshold: int
    share_count: int
    combination_count: int
    agreement: int
    tied: bool
    suspects: tuple[int, ...]

    def __repr__(self) -> str:
        # keep the secret out of reprs that may end up in logs
        return (
            f"Reconstruction(threshold={self.threshold}, shares={self.share_count}, "
            f"combinations={self.combination_count}, agreement={self.agreement}, "
            f"tied={self.tied}, suspects={self.suspects})"
        )

    def summary(self) -> dict:
        """Metadata about the run, without the secret."""
        return {
            "threshold": self.threshold,
            "shares": self.share_count,
            "combinations": self.combination_count,
            "agreement": self.agreement,
            "tied": self.tied,
            "suspects": list(self.suspects),
        }


def _index(shares: Shares) -> dict[int, EvaluatedShare]:
    if isinstance(shares, Mapping):
        for key, share in shares.items():
            if key != share.x:
                raise ValueError(f"share keyed {key} has x={share.x}")
        return dict(shares)
    indexed: dict[int, EvaluatedShare] = {}
    for share in shares:
        if share.x in indexed:
            raise DuplicateShareId(share.x)
        indexed[share.x] = share
    return indexed


def reconstruct(shares: Shares, k: int, *, tie_break: str | None = None) -> Reconstruction:
    """Recover the secret from decoded ``shares`` with threshold ``k``.

    Raises :class:`InvalidThreshold` when ``k < 1`` and
    :class:`InsufficientShares` when fewer than ``k`` shares are available.
    """

    if k < 1:
        raise InvalidThreshold(k)
    points = _index(shares)
    if len(points) < k:
        raise InsufficientShares(len(points), k)

    expected = count_combinations(len(points), k)
    _logger.debug("Interpolating %d subset(s) of %d share(s), k=%d", expected, len(points), k)

    members: dict[int, set[int]] = {}

    def _candidates():
        for combo in combinations(points, k):
            candidate = interpolate_at_zero(points[i].as_point() for i in combo)
            members.setdefault(candidate, set()).update(combo)
            yield candidate

    counts = tally(_candidates())
    verdict = decide(counts, tie_break=tie_break)
    suspects = tuple(sorted(set(points) - members[verdict.winner]))
    if suspects:
        _logger.warning("Shares %s never agree with the winning candidate", list(suspects))

    return Reconstruction(
        secret=verdict.winner,
        threshold=k,
        share_count=len(points),
        combination_count=verdict.total,
        agreement=verdict.count,
        tied=verdict.tied,
        suspects=suspects,
    )


def recover_secret(document: ShareDocument, *, settings: RecoveryConfig | None = None) -> Reconstruction:
    """Decode ``document`` and reconstruct its secret.

    ``settings`` defaults to the built-in :class:`RecoveryConfig` values; the
    environment is only consulted by callers that pass :func:`load_config`.
    """

    settings = settings or RecoveryConfig()
    decoded = decode_shares(document.shares, max_exponent=settings.max_exponent)
    result = reconstruct(decoded, document.threshold, tie_break=settings.tie_break)
    _logger.debug("Reconstruction finished: %s", result.summary())
    return result


__all__ = ["Reconstruction", "reconstruct", "recover_secret"]
