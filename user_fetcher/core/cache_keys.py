"""Cache Keys: the two key spaces used by the user retrieval service.

Invariants:
    - Per-user keys always contain the ":" delimiter before the numeric id
    - ALL_USERS_KEY contains no ":" so it can never equal a per-user key
"""

from user_fetcher.core.domain_types import UserId

USER_KEY_PREFIX = "user:"
ALL_USERS_KEY = "all_users"


def user_cache_key(user_id: UserId) -> str:
    """Cache key for a single user, e.g. ``user:2``."""
    return f"{USER_KEY_PREFIX}{int(user_id)}"
