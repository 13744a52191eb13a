"""Error Hierarchy: typed, categorized exceptions for every retrieval failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and an ErrorContext
    - TransportError is the only kind the retry policy treats as transient
    - RequestFailedError covers request failures that a retry cannot fix
    - HttpStatusError always carries the response status code
    - to_dict() never includes the raw response body

Design Decisions:
    - Single hierarchy with UserFetcherError base so callers can catch one type
    - ErrorContext is a dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    TRANSPORT = "transport"
    REQUEST = "request"
    HTTP_STATUS = "http_status"
    PARSE = "parse"


@dataclass
class ErrorContext:
    """Where a failure happened: operation, entity and request details."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    user_id: int | None = None
    page: int | None = None
    url: str | None = None
    attempt: int | None = None
    debug_info: dict[str, Any] | None = None


class UserFetcherError(Exception):
    """Base exception for all user retrieval errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Structured representation for logs and console output."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "user_id": self.context.user_id,
                    "page": self.context.page,
                    "url": self.context.url,
                    "attempt": self.context.attempt,
                },
            }
        }


class TransportError(UserFetcherError):
    """Connection-level failure: DNS, refused connection, timeout, reset."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "TRANSPORT_ERROR", ErrorCategory.TRANSPORT, context,
        )


class HttpStatusError(UserFetcherError):
    """Server answered with a non-2xx status."""
    def __init__(
        self, status_code: int, url: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.url = ctx.url or url
        super().__init__(
            f"GET {url} returned HTTP {status_code}",
            "HTTP_STATUS_ERROR", ErrorCategory.HTTP_STATUS, ctx,
        )
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["error"]["status_code"] = self.status_code
        return data


class ParseError(UserFetcherError):
    """Response body is not the expected envelope shape."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PARSE_ERROR", ErrorCategory.PARSE, context,
        )


class RequestFailedError(UserFetcherError):
    """Request could not complete for a deterministic reason (redirect loop, bad scheme)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "REQUEST_ERROR", ErrorCategory.REQUEST, context,
        )
