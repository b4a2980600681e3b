# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Scoped lifting of CPython's limit on int/str conversion length.

Share values and secrets are arbitrary-precision, so decimal (or other
non power-of-two base) conversions of several thousand digits must not be
refused. Interpreters without the limit leave this a no-op.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    get_limit = getattr(sys, "get_int_max_str_digits", None)
    if get_limit is None:
        yield
        return
    previous = get_limit()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


__all__ = ["unlimited_int_digits"]
