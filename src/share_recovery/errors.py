# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy for secret reconstruction.

Messages carry share ids and counts only. Share values and expression text are
the sensitive material and never end up in an exception.
"""

from __future__ import annotations


class RecoveryError(Exception):
    """Base class for every terminal reconstruction failure."""

    kind = "RecoveryError"


class MalformedExpression(RecoveryError):
    """A raw share value matches none of the supported expression forms."""

    kind = "MalformedExpression"

    def __init__(self, reason: str, *, share_id: int | None = None) -> None:
        self.reason = reason
        self.share_id = share_id
        if share_id is None:
            super().__init__(reason)
        else:
            super().__init__(f"share {share_id}: {reason}")

    def for_share(self, share_id: int) -> "MalformedExpression":
        return MalformedExpression(self.reason, share_id=share_id)


class DuplicateShareId(RecoveryError):
    kind = "DuplicateShareId"

    def __init__(self, share_id: int) -> None:
        self.share_id = share_id
        super().__init__(f"share id {share_id} appears more than once")


class InsufficientShares(RecoveryError):
    """Fewer shares are available than the threshold requires."""

    kind = "InsufficientShares"

    def __init__(self, available: int, threshold: int) -> None:
        self.available = available
        self.threshold = threshold
        super().__init__(f"{available} share(s) available, threshold is {threshold}")


class NoCandidates(InsufficientShares):
    """No candidate secrets reached the aggregation stage."""

    kind = "NoCandidates"

    def __init__(self, available: int = 0, threshold: int = 0) -> None:
        super().__init__(available, threshold)
        self.args = ("no candidate secrets to aggregate",)


class InvalidThreshold(RecoveryError):
    kind = "InvalidThreshold"

    def __init__(self, threshold: int, total: int | None = None) -> None:
        self.threshold = threshold
        self.total = total
        if total is None:
            super().__init__(f"threshold must be at least 1, got {threshold}")
        else:
            super().__init__(f"threshold must satisfy 1 <= k <= n, got k={threshold}, n={total}")


class InvalidDocument(RecoveryError):
    """The share document is structurally unusable."""

    kind = "InvalidDocument"


__all__ = [
    "RecoveryError",
    "MalformedExpression",
    "DuplicateShareId",
    "InsufficientShares",
    "NoCandidates",
    "InvalidThreshold",
    "InvalidDocument",
]
