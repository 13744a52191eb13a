"""Console entry point: wires settings, transport, cache and service, then prints users.

Invariants:
    - Wiring happens here only; the service takes explicit constructor parameters
    - The HTTP client is closed on exit, success or failure
    - UserFetcherError exits with code 1 and a one-line error, never a traceback

Usage:
    python -m user_fetcher.main --user-id 2
    user-fetcher --user-id 2
"""

import asyncio
import logging

import httpx
import typer

from user_fetcher.config import Settings, get_settings
from user_fetcher.core.domain_types import User, UserId
from user_fetcher.core.errors import UserFetcherError
from user_fetcher.infrastructure.http_transport import HttpTransport
from user_fetcher.infrastructure.memory_cache import TTLMemoryCache
from user_fetcher.infrastructure.observability import setup_logging
from user_fetcher.infrastructure.retry import RetryPolicy
from user_fetcher.services.user_service import UserService

logger = logging.getLogger(__name__)

app = typer.Typer(help="Fetch users from the ReqRes users API", add_completion=False)


def build_user_service(
    settings: Settings, client: httpx.AsyncClient | None = None,
) -> UserService:
    """Construct a UserService from settings. Caller owns transport shutdown."""
    transport = HttpTransport(
        client=client, timeout_seconds=settings.http_timeout_seconds,
    )
    return UserService(
        transport=transport,
        cache=TTLMemoryCache(maxsize=settings.cache_max_entries),
        base_url=settings.reqres_base_url,
        retry_policy=RetryPolicy(
            max_retries=settings.retry_max_retries,
            base_delay_seconds=settings.retry_base_delay_seconds,
        ),
        user_ttl_seconds=settings.user_cache_ttl_seconds,
        all_users_ttl_seconds=settings.all_users_cache_ttl_seconds,
    )


def format_report(user: User, users: list[User]) -> list[str]:
    lines = [
        f"User {user.id}: {user.full_name} - {user.email}",
        f"Fetched {len(users)} users.",
        "----",
    ]
    lines.extend(f"- {u.full_name}" for u in users)
    return lines


async def run(
    settings: Settings, user_id: UserId, client: httpx.AsyncClient | None = None,
) -> list[str]:
    service = build_user_service(settings, client)
    try:
        user = await service.fetch_user_by_id(user_id)
        users = await service.fetch_all_users()
    finally:
        await service.transport.aclose()
    return format_report(user, users)


@app.command()
def fetch(
    user_id: int = typer.Option(2, "--user-id", "-u", help="User to look up first"),
) -> None:
    """Print one user, then every user across all pages."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        lines = asyncio.run(run(settings, UserId(user_id)))
    except UserFetcherError as e:
        typer.echo(f"Error [{e.code}]: {e.message}", err=True)
        raise typer.Exit(1)
    for line in lines:
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
