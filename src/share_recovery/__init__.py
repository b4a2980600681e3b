# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Recover a threshold-shared secret when some shares may be corrupted."""

from __future__ import annotations

from .subsets import combinations, count_combinations
from .decoder import decode_share, decode_shares, decode_value
from .document import load_document, parse_document
from .errors import (
    DuplicateShareId,
    InsufficientShares,
    InvalidDocument,
    InvalidThreshold,
    MalformedExpression,
    NoCandidates,
    RecoveryError,
)
from .expression import evaluate
from .interpolation import interpolate_at_zero
from .models import EvaluatedShare, Share, ShareDocument
from .reconstruct import Reconstruction, reconstruct, recover_secret
from .tally import most_frequent

__version__ = "0.1.0"

__all__ = [
    "combinations",
    "count_combinations",
    "decode_share",
    "decode_shares",
    "decode_value",
    "load_document",
    "parse_document",
    "DuplicateShareId",
    "InsufficientShares",
    "InvalidDocument",
    "InvalidThreshold",
    "MalformedExpression",
    "NoCandidates",
    "RecoveryError",
    "evaluate",
    "interpolate_at_zero",
    "EvaluatedShare",
    "Share",
    "ShareDocument",
    "Reconstruction",
    "reconstruct",
    "recover_secret",
    "most_frequent",
]
