# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Turn raw shares into ``(x, y)`` points.

A value that is a plain numeral in the share's base is read in that base.
Anything else, and any value containing the variable token ``x`` (even in
bases 34 to 36 where ``x`` is a digit), is handed to the expression evaluator
with ``x`` bound to the share id.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from .errors import DuplicateShareId, InvalidDocument, MalformedExpression
from .digits import unlimited_int_digits
from .expression import VARIABLE, evaluate
from .models import EvaluatedShare, Share

_logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36

_NUMERAL = re.compile(r"([+-]?)([0-9a-zA-Z]+)")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_base(value: object) -> int:
    """Return ``value`` as a numeral base in ``2..36``."""

    if isinstance(value, bool):
        raise InvalidDocument("base must be an integer")
    if isinstance(value, int):
        base = value
    elif isinstance(value, str) and value.strip().isdecimal():
        base = int(value.strip())
    else:
        raise InvalidDocument("base must be an integer")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidDocument(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return base


def is_numeral(text: str, base: int) -> bool:
    match = _NUMERAL.fullmatch(text)
    if not match:
        return False
    return all(int(digit, 36) < base for digit in match.group(2))


def decode_value(base: int, raw: str, x: int, *, max_exponent: int | None = None) -> int:
    text = raw.strip()
    # the variable token wins over the digit x of bases 34 to 36
    if VARIABLE not in text and is_numeral(text, base):
        with unlimited_int_digits():
            return int(text, base)
    if _DECIMAL.fullmatch(text):
        raise MalformedExpression(f"value is not a valid base-{base} numeral")
    return evaluate(text, x, max_exponent=max_exponent)


def decode_share(share: Share, *, max_exponent: int | None = None) -> EvaluatedShare:
    try:
        y = decode_value(share.base, share.raw_value, share.id, max_exponent=max_exponent)
    except MalformedExpression as exc:
        raise exc.for_share(share.id) from None
    return EvaluatedShare(x=share.id, y=y)


def decode_shares(
    shares: Iterable[Share],
    *,
    max_exponent: int | None = None,
) -> dict[int, EvaluatedShare]:
    """Decode every share, keyed by id.

    Duplicate ids are rejected before anything is evaluated.
    """

    shares = list(shares)
    seen: set[int] = set()
    for share in shares:
        if share.id in seen:
            raise DuplicateShareId(share.id)
        seen.add(share.id)

    decoded = {share.id: decode_share(share, max_exponent=max_exponent) for share in shares}
    _logger.debug("Decoded %d share(s)", len(decoded))
    return decoded


__all__ = [
    "parse_base",
    "is_numeral",
    "decode_value",
    "decode_share",
    "decode_shares",
    "MIN_BASE",
    "MAX_BASE",
]
