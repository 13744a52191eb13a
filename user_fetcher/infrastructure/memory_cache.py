"""In-Memory TTL Cache: cachetools-backed store with a per-entry time-to-live.

Invariants:
    - Expiry is computed at insertion (now + ttl_seconds) and checked on every read
    - Every read purges all expired entries; an expired key is reported as a miss
    - At most maxsize entries; when full, the least recently used entry is evicted
    - No persistence across restarts
    - Last write wins for concurrent sets of the same key

Design Decisions:
    - TLRUCache over TTLCache: single-user and collection entries carry different TTLs
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cachetools import TLRUCache

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024


@dataclass(frozen=True, slots=True)
class _Entry:
    value: Any
    ttl_seconds: float


def _time_to_use(key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl_seconds


class TTLMemoryCache:
    """Satisfies core.protocols.UserCache on top of cachetools.TLRUCache."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        maxsize: int = DEFAULT_MAX_ENTRIES,
    ):
        self._entries = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=clock)

    def get(self, key: str) -> Any | None:
        expired = self._entries.expire()
        if expired:
            logger.debug(
                f"Purged {len(expired)} expired cache entries",
                extra={"cache_key": key},
            )
        entry = self._entries.get(key)
        return None if entry is None else entry.value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._entries[key] = _Entry(value, ttl_seconds)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        # Counts stored entries, including expired ones not yet purged.
        return len(self._entries)
