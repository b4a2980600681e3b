# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation at zero over the integers.

Basis coefficients are kept as exact rationals and the weighted sum is reduced
to an integer once, by truncation toward zero. Points taken from one
degree-``k-1`` integer polynomial give its constant term exactly; a subset
mixing in a corrupted point still yields an integer instead of failing.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable


def _lagrange_interpolate(x: int, points: list[tuple[int, int]]) -> Fraction:
    """Perform Lagrange interpolation at ``x`` over the given points."""
    total = Fraction(0)
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            num *= x - xj
            den *= xi - xj
        total += yi * Fraction(num, den)
    return total


def interpolate_at_zero(points: Iterable[tuple[int, int]]) -> int:
    """Return the interpolating polynomial's value at zero.

    ``points`` must be non-empty with pairwise distinct ``x`` values.
    """

    points = list(points)
    if not points:
        raise ValueError("at least one point is required")
    if len({x for x, _ in points}) != len(points):
        raise ValueError("points must have distinct x values")
    return math.trunc(_lagrange_interpolate(0, points))


__all__ = ["interpolate_at_zero"]
