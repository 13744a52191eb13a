"""User Retrieval Service: cache-aside lookup, retried single fetch, paginated bulk fetch.

Invariants:
    - Cache hit returns immediately with no network access
    - fetch_user_by_id runs through RetryPolicy; only TransportError is retried
    - fetch_all_users is never retried: the first failing page aborts the whole call
    - Any non-2xx status raises HttpStatusError; a 404 on single fetch logs a warning first
    - The cache is written only after a fully successful fetch (no partial entries)
    - Every failure is logged at error level with context, then re-raised unchanged,
      including exceptions outside the UserFetcherError hierarchy
    - Bulk pagination stops on an empty/absent page before consulting total_pages

Design Decisions:
    - Retry coverage is asymmetric: single-user fetch retries, bulk fetch does not
    - Bulk snapshot is cached as a tuple and returned as a fresh list per call
"""

import logging

import httpx
from pydantic import ValidationError

from user_fetcher.core.cache_keys import ALL_USERS_KEY, user_cache_key
from user_fetcher.core.domain_types import User, UserId
from user_fetcher.core.errors import (
    ErrorContext, HttpStatusError, ParseError, UserFetcherError,
)
from user_fetcher.core.mapping import to_domain_user, to_domain_users
from user_fetcher.core.protocols import UserCache
from user_fetcher.infrastructure.http_transport import HttpTransport
from user_fetcher.infrastructure.retry import RetryPolicy
from user_fetcher.schemas.wire import PagedUsersEnvelope, SingleUserEnvelope

logger = logging.getLogger(__name__)

USER_TTL_SECONDS = 5 * 60
ALL_USERS_TTL_SECONDS = 10 * 60


class UserService:
    """Fetches users from the API, caching results and retrying transient failures."""

    def __init__(
        self,
        transport: HttpTransport,
        cache: UserCache,
        base_url: str,
        retry_policy: RetryPolicy | None = None,
        user_ttl_seconds: float = USER_TTL_SECONDS,
        all_users_ttl_seconds: float = ALL_USERS_TTL_SECONDS,
    ):
        self.transport = transport
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self.user_ttl_seconds = user_ttl_seconds
        self.all_users_ttl_seconds = all_users_ttl_seconds

    # ─── Single user ────────────────────────────────────────────────

    async def fetch_user_by_id(self, user_id: UserId) -> User:
        """Return one user, from cache or from GET {base_url}/users/{id}."""
        cache_key = user_cache_key(user_id)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit", extra={"cache_key": cache_key})
            return cached

        try:
            user = await self.retry_policy.execute(
                lambda: self._request_user(user_id),
                operation_name="fetch_user_by_id",
            )
        except Exception as e:
            if isinstance(e, UserFetcherError):
                e.context.operation = "fetch_user_by_id"
                e.context.user_id = int(user_id)
            logger.error(
                f"Error fetching user with ID {user_id}: {e}",
                extra={
                    "operation": "fetch_user_by_id",
                    "user_id": int(user_id),
                    "error_code": _error_code(e),
                },
                exc_info=True,
            )
            raise

        self.cache.set(cache_key, user, self.user_ttl_seconds)
        return user

    async def _request_user(self, user_id: UserId) -> User:
        """One attempt: GET, status check, parse, map."""
        url = f"{self.base_url}/users/{int(user_id)}"
        response = await self.transport.get(url)

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.warning(
                f"User with ID {user_id} not found.",
                extra={"user_id": int(user_id), "status_code": 404},
            )
        _ensure_success(response, url)

        envelope = _parse(SingleUserEnvelope, response, url)
        if envelope.data is None:
            raise ParseError(
                "Single user response has no 'data' field",
                context=ErrorContext(url=url),
            )
        return to_domain_user(envelope.data)

    # ─── All users ──────────────────────────────────────────────────

    async def fetch_all_users(self) -> list[User]:
        """Return every user across all pages, from cache or by walking pages from 1."""
        cached = self.cache.get(ALL_USERS_KEY)
        if cached is not None:
            logger.debug("Cache hit", extra={"cache_key": ALL_USERS_KEY})
            return list(cached)

        page = 1
        try:
            users: list[User] = []
            while True:
                envelope = await self._request_page(page)
                if not envelope.data:
                    break
                users.extend(to_domain_users(envelope.data))
                if page >= envelope.total_pages:
                    break
                page += 1
        except Exception as e:
            if isinstance(e, UserFetcherError):
                e.context.operation = "fetch_all_users"
                e.context.page = page
            logger.error(
                f"Error fetching users list (page {page}): {e}",
                extra={
                    "operation": "fetch_all_users",
                    "page": page,
                    "error_code": _error_code(e),
                },
                exc_info=True,
            )
            raise

        snapshot = tuple(users)
        self.cache.set(ALL_USERS_KEY, snapshot, self.all_users_ttl_seconds)
        return list(snapshot)

    async def _request_page(self, page: int) -> PagedUsersEnvelope:
        url = f"{self.base_url}/users"
        response = await self.transport.get(url, params={"page": page})
        _ensure_success(response, url)
        return _parse(PagedUsersEnvelope, response, url)


def _error_code(e: Exception) -> str:
    # Unexpected exceptions (httpx.InvalidURL, bugs) are reported by class name.
    return e.code if isinstance(e, UserFetcherError) else type(e).__name__


def _ensure_success(response: httpx.Response, url: str) -> None:
    if not response.is_success:
        raise HttpStatusError(response.status_code, url)


def _parse(model, response: httpx.Response, url: str):
    """Validate the response body against a wire model or raise ParseError."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise ParseError(
            f"Malformed {model.__name__} from {url}: {e.error_count()} error(s)",
            context=ErrorContext(url=url, debug_info={"errors": e.errors()}),
        ) from e
