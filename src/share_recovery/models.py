# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Value types passed between the loader, the decoder and the engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Share:
    """A share as read from the input document, before decoding."""

    id: int
    base: int
    raw_value: str

    def __repr__(self) -> str:
        return f"Share(id={self.id}, base={self.base})"


@dataclass(frozen=True)
class EvaluatedShare:
    """A decoded ``(x, y)`` point on the sharing polynomial."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"EvaluatedShare(x={self.x})"

    def as_point(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class ShareDocument:
    threshold: int
    total: int
    shares: tuple[Share, ...]


__all__ = ["Share", "EvaluatedShare", "ShareDocument"]
