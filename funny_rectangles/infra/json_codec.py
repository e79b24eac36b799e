"""JSON codec helpers for log records and rectangle export."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson


def dumps_bytes(
    payload: Any,
    *,
    sort_keys: bool = False,
    default: Callable[[Any], Any] | None = None,
) -> bytes:
    """Serialize payload to compact UTF-8 JSON bytes."""
    options = orjson.OPT_SORT_KEYS if sort_keys else 0
    return orjson.dumps(payload, default=default, option=options)


def dumps_text(
    payload: Any,
    *,
    sort_keys: bool = False,
    default: Callable[[Any], Any] | None = None,
) -> str:
    return dumps_bytes(payload, sort_keys=sort_keys, default=default).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
