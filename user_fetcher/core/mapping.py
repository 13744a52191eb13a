"""Wire-to-domain mapping. Pure field renaming, no validation beyond the schema's."""

from user_fetcher.core.domain_types import User, UserId
from user_fetcher.schemas.wire import ApiUser


def to_domain_user(api_user: ApiUser) -> User:
    """Map one ApiUser to a User (first_name -> first_name, avatar -> avatar_url)."""
    return User(
        id=UserId(api_user.id),
        email=api_user.email,
        first_name=api_user.first_name,
        last_name=api_user.last_name,
        avatar_url=api_user.avatar,
    )


def to_domain_users(api_users: list[ApiUser]) -> list[User]:
    """Map a page of ApiUsers, preserving API order."""
    return [to_domain_user(u) for u in api_users]
