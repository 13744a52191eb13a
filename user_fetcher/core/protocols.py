"""Boundary Protocols: contracts the retrieval service expects from its collaborators.

Invariants:
    - UserCache.get never returns an entry whose expiry has elapsed
    - UserCache.get returns None on miss; cached values are never None

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with get/set is a cache
"""

from typing import Any, Protocol


class UserCache(Protocol):
    """Key/value store with per-entry expiry."""
    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any, ttl_seconds: float) -> None: ...

