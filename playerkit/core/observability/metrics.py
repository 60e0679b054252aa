from __future__ import annotations

from collections import Counter
from typing import Dict, Optional

# Requests counters (HTTP-level)
_REQUESTS = Counter()

# Named counters (renders, health probes, ...)
_NAMED = Counter()


def reset_metrics() -> None:
    """
    Test helper: clears all counters to avoid cross-test leakage.
    Safe to call multiple times.
    """
    _REQUESTS.clear()
    _NAMED.clear()


def inc_http(method: str, path: str, status: Optional[int] = None) -> None:
    m = (method or "UNKNOWN").upper()
    p = path or "/"
    s = status if status is not None else "unknown"

    _REQUESTS["requests_total"] += 1
    _REQUESTS[f"requests_{m}"] += 1
    _REQUESTS[f"path_{p}|{s}"] += 1


def inc_named(name: str, value: int = 1) -> None:
    if not name:
        return
    _NAMED[name] += int(value)


def snapshot_requests() -> Dict[str, int]:
    return dict(_REQUESTS)


def snapshot_named() -> Dict[str, int]:
    return dict(_NAMED)
