"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - reqres_base_url never ends with "/"
    - Retry and TTL values are validated positive at load time
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Users API
    reqres_base_url: str = "https://reqres.in/api"
    http_timeout_seconds: float = Field(30.0, gt=0)

    @field_validator("reqres_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("reqres_base_url cannot be empty")
        return v

    # Retry (single-user fetch only)
    retry_max_retries: int = Field(3, ge=0)
    retry_base_delay_seconds: float = Field(1.0, ge=0)

    # Cache
    user_cache_ttl_seconds: float = Field(300.0, gt=0)
    all_users_cache_ttl_seconds: float = Field(600.0, gt=0)
    cache_max_entries: int = Field(1024, gt=0)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
