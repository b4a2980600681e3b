# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Load share documents from JSON or YAML.

Expected layout::

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}

Top-level keys that are not decimal share ids are ignored. Ids above ``n`` are
kept (with a warning) since shares need not be numbered contiguously. Quote values
in YAML documents, otherwise a value such as ``0111`` is read as an octal
number before it reaches the decoder.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml

from .decoder import parse_base
from .digits import unlimited_int_digits
from .errors import DuplicateShareId, InvalidDocument, InvalidThreshold
from .models import Share, ShareDocument

_logger = logging.getLogger(__name__)

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"
_YAML_SUFFIXES = {".yaml", ".yml"}

KEYS_FIELD = "keys"


class _DuplicateKey(Exception):
    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKey(key)
        result[key] = value
    return result


class _UniqueKeyLoader(yaml.SafeLoader):
    """Safe loader that refuses mappings with repeated keys."""

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise _DuplicateKey(key)
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _share_id(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.strip().isdecimal():
        return int(key.strip())
    return None


def _duplicate_error(key: Any) -> Exception:
    share_id = _share_id(key)
    if share_id is not None:
        return DuplicateShareId(share_id)
    return InvalidDocument(f"duplicate key {key!r}")


def _count(keys: dict, name: str) -> int:
    value = keys.get(name)
    if isinstance(value, bool) or value is None:
        raise InvalidDocument(f"'{KEYS_FIELD}.{name}' must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise InvalidDocument(f"'{KEYS_FIELD}.{name}' must be an integer")


def _raw_value(share_id: int, entry: dict) -> str:
    value = entry.get("value")
    if isinstance(value, bool) or value is None:
        raise InvalidDocument(f"share {share_id}: 'value' is missing")
    if isinstance(value, int):
        return str(value)
    if not isinstance(value, str):
        raise InvalidDocument(f"share {share_id}: 'value' must be a string")
    return value


def build_document(data: Any) -> ShareDocument:
    """Validate decoded document data and collect its shares."""

    if not isinstance(data, dict):
        raise InvalidDocument("document must be a mapping")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, dict):
        raise InvalidDocument(f"document has no '{KEYS_FIELD}' section")
    total = _count(keys, "n")
    threshold = _count(keys, "k")
    if not 1 <= threshold <= total:
        raise InvalidThreshold(threshold, total)

    shares: dict[int, Share] = {}
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        share_id = _share_id(key)
        if share_id is None:
            _logger.debug("Ignoring document key %r", key)
            continue
        if share_id < 1:
            raise InvalidDocument(f"share ids must be positive, got {share_id}")
        if share_id > total:
            _logger.warning("Share id %d is outside the declared range 1..%d", share_id, total)
        if share_id in shares:
            raise DuplicateShareId(share_id)
        if not isinstance(entry, dict):
            raise InvalidDocument(f"share {share_id}: entry must be a mapping")
        if "base" not in entry:
            raise InvalidDocument(f"share {share_id}: 'base' is missing")
        try:
            base = parse_base(entry["base"])
        except InvalidDocument as exc:
            raise InvalidDocument(f"share {share_id}: {exc}") from None
        shares[share_id] = Share(id=share_id, base=base, raw_value=_raw_value(share_id, entry))

    _logger.debug("Loaded %d share(s), n=%d, k=%d", len(shares), total, threshold)
    return ShareDocument(
        threshold=threshold,
        total=total,
        shares=tuple(shares[i] for i in sorted(shares)),
    )


def parse_document(text: str, fmt: str = FORMAT_JSON) -> ShareDocument:
    """Parse document ``text`` in the given format (``json`` or ``yaml``)."""

    if fmt not in (FORMAT_JSON, FORMAT_YAML):
        raise ValueError(f"unsupported document format {fmt!r}")
    try:
        with unlimited_int_digits():
            if fmt == FORMAT_JSON:
                data = json.loads(text, object_pairs_hook=_reject_duplicates)
            else:
                data = yaml.load(text, Loader=_UniqueKeyLoader)
            return build_document(data)
    except _DuplicateKey as exc:
        raise _duplicate_error(exc.key) from None
    except json.JSONDecodeError as exc:
        raise InvalidDocument(f"invalid JSON at line {exc.lineno}, column {exc.colno}") from None
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        where = f" at line {mark.line + 1}" if mark is not None else ""
        raise InvalidDocument(f"invalid YAML{where}") from None


def detect_format(path: os.PathLike[str] | str) -> str:
    return FORMAT_YAML if Path(path).suffix.lower() in _YAML_SUFFIXES else FORMAT_JSON


def load_document(path: os.PathLike[str] | str) -> ShareDocument:
    """Read and parse the share document stored at ``path``."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InvalidDocument(f"cannot read {path}: {exc.strerror}") from None
    return parse_document(text, detect_format(path))


__all__ = [
    "FORMAT_JSON",
    "FORMAT_YAML",
    "build_document",
    "parse_document",
    "detect_format",
    "load_document",
]
