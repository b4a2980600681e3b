# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Centralised runtime configuration.

All tunables live in one frozen dataclass. The dataclass defaults are what the
library uses; :func:`load_config` layers environment overrides on top and is
only called by the command line entry point, which passes the result down
explicitly. Unparsable values fall back to the default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

TIE_BREAK_SMALLEST = "smallest"
TIE_BREAK_FIRST = "first"
_TIE_BREAKS = (TIE_BREAK_SMALLEST, TIE_BREAK_FIRST)

DEFAULT_MAX_EXPONENT = 2**31 - 1


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    return value if value in choices else default


def _load_log_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    return value if isinstance(logging.getLevelName(value), int) else default


@dataclass(frozen=True)
class RecoveryConfig:
    """Holds runtime tunables for a reconstruction run."""

    max_exponent: int = DEFAULT_MAX_EXPONENT
    tie_break: str = TIE_BREAK_SMALLEST
    log_level: str = "WARNING"


def load_config() -> RecoveryConfig:
    """Load the configuration considering environment overrides."""

    max_exponent = _load_int("SHARE_RECOVERY_MAX_EXPONENT", DEFAULT_MAX_EXPONENT)
    if max_exponent < 0:
        max_exponent = DEFAULT_MAX_EXPONENT
    return RecoveryConfig(
        max_exponent=max_exponent,
        tie_break=_load_choice("SHARE_RECOVERY_TIE_BREAK", TIE_BREAK_SMALLEST, _TIE_BREAKS),
        log_level=_load_log_level("SHARE_RECOVERY_LOG_LEVEL", "WARNING"),
    )


__all__ = [
    "RecoveryConfig",
    "load_config",
    "TIE_BREAK_SMALLEST",
    "TIE_BREAK_FIRST",
    "DEFAULT_MAX_EXPONENT",
]
