"""Wire Schemas: the users API response shapes, field names as the API sends them.

Invariants:
    - ApiUser keeps snake_case names (first_name, last_name, avatar)
    - SingleUserEnvelope.data may be None; the service treats that as a ParseError
    - PagedUsersEnvelope.data may be None or empty; the service treats both as end-of-collection
    - Missing page/total/total_pages default to 0
    - Unknown fields (e.g. the API's "support" block) are ignored
"""

from pydantic import BaseModel, ConfigDict


class ApiUser(BaseModel):
    """One user as returned by the API."""
    model_config = ConfigDict(extra="ignore")

    id: int
    email: str
    first_name: str
    last_name: str
    avatar: str


class SingleUserEnvelope(BaseModel):
    """GET /users/{id} response."""
    model_config = ConfigDict(extra="ignore")

    data: ApiUser | None = None


class PagedUsersEnvelope(BaseModel):
    """GET /users?page={n} response."""
    model_config = ConfigDict(extra="ignore")

    page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0
    data: list[ApiUser] | None = None
