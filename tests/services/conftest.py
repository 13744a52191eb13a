"""Service test fixtures: fake clock, patched backoff sleep, service factory.

Invariants:
    - Every test gets a fresh TTLMemoryCache driven by a FakeClock
    - asyncio.sleep is replaced by an AsyncMock so backoff never waits
    - make_service builds a UserService around a MockUsersApi script
"""

from unittest.mock import AsyncMock

import pytest

from user_fetcher.infrastructure.http_transport import HttpTransport
from user_fetcher.infrastructure.memory_cache import TTLMemoryCache
from user_fetcher.infrastructure.retry import RetryPolicy
from user_fetcher.services.user_service import UserService

from tests.mock_users_api import MockUsersApi

BASE_URL = "https://reqres.test/api"


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return TTLMemoryCache(clock=clock)


@pytest.fixture
def sleep_mock(monkeypatch):
    mock = AsyncMock()
    monkeypatch.setattr("asyncio.sleep", mock)
    return mock


@pytest.fixture
def make_service(cache, sleep_mock):
    """Factory: make_service(script) -> (UserService, MockUsersApi)."""
    def _make(script):
        api = MockUsersApi(script)
        service = UserService(
            transport=HttpTransport(client=api.client()),
            cache=cache,
            base_url=BASE_URL,
            retry_policy=RetryPolicy(max_retries=3, base_delay_seconds=1.0),
        )
        return service, api
    return _make
