"""
Injected capabilities: time source and content hashing.
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Dict, Optional, Protocol
from zoneinfo import ZoneInfo

DEFAULT_HASH_ALGORITHM = "blake2b-64"

# Hash factories that hashlib does not expose under a single name.
_CUSTOM_ALGORITHMS: Dict[str, Callable[[], Any]] = {
    "blake2b-64": lambda: hashlib.blake2b(digest_size=8),
    "blake2s-64": lambda: hashlib.blake2s(digest_size=8),
}


class Clock(Protocol):
    """Source of the current, timezone-aware instant."""

    def now(self) -> datetime:
        ...


def resolve_timezone(name: Optional[str]) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


class SystemClock:
    """Wall clock in a fixed timezone."""

    def __init__(self, tz: Optional[str | tzinfo] = None):
        self.tz = tz if isinstance(tz, tzinfo) else resolve_timezone(tz)

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Clock frozen at one instant (naive values are taken as UTC)."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def format_timestamp(moment: datetime) -> str:
    """`YYYY-mm-dd HH:MM:SS <zone>` using the zone identifier when known."""
    zone = getattr(moment.tzinfo, "key", None) or moment.tzname() or "UTC"
    return f"{moment:%Y-%m-%d %H:%M:%S} {zone}"


class ContentHasher:
    """
    Hex digest of text, keyed by algorithm name.

    Accepts `blake2b-64` / `blake2s-64` (64-bit digests) and any name
    known to hashlib.
    """

    def __init__(self, algorithm: str = DEFAULT_HASH_ALGORITHM):
        algorithm = algorithm.strip().lower()
        if algorithm not in _CUSTOM_ALGORITHMS and algorithm not in hashlib.algorithms_available:
            raise ValueError(f"Unknown hash algorithm: {algorithm!r}")
        self.algorithm = algorithm

    def _new(self):
        factory = _CUSTOM_ALGORITHMS.get(self.algorithm)
        return factory() if factory else hashlib.new(self.algorithm)

    def hexdigest(self, text: str) -> str:
        h = self._new()
        h.update(text.encode("utf-8"))
        if self.algorithm.startswith("shake_"):
            return h.hexdigest(8)
        return h.hexdigest()

    __call__ = hexdigest


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "ContentHasher",
    "DEFAULT_HASH_ALGORITHM",
    "format_timestamp",
    "resolve_timezone",
]
