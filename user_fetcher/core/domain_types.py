"""Domain Types: the normalized user record handed to callers.

Invariants:
    - User is immutable once constructed (frozen dataclass)
    - User is only built by core.mapping from a wire ApiUser
    - UserId wraps int; never pass a bare str id into the service
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class User:
    """Normalized user record, owned by the caller after return."""
    id: UserId
    email: str
    first_name: str
    last_name: str
    avatar_url: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
