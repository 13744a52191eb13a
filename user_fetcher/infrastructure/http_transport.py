"""HTTP Transport: thin wrapper over httpx.AsyncClient with error mapping.

Invariants:
    - Timeouts, network failures and remote protocol errors map to TransportError
    - A body that cannot be decoded (httpx.DecodingError) maps to ParseError
    - Every other httpx.RequestError (redirect loop, unsupported scheme, proxy,
      local protocol) maps to RequestFailedError, which is never retried
    - Non-2xx responses are returned as-is; status policy belongs to the caller
    - A client passed in by the caller is never closed here; an owned client is
      closed by aclose() / async context exit
"""

import logging

import httpx

from user_fetcher.core.errors import (
    ErrorContext,
    ParseError,
    RequestFailedError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0

TRANSIENT_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


class HttpTransport:
    """Issues GET requests and surfaces httpx failures as UserFetcherError subclasses."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def get(
        self, url: str, params: dict | None = None,
    ) -> httpx.Response:
        try:
            response = await self.client.get(url, params=params)
        except TRANSIENT_ERRORS as e:
            logger.debug(
                f"Transport failure on GET {url}: {e!r}", extra={"url": url},
            )
            raise TransportError(
                f"GET {url} failed: {type(e).__name__}: {e}",
                context=ErrorContext(url=url),
            ) from e
        except httpx.DecodingError as e:
            raise ParseError(
                f"GET {url} returned an undecodable body: {e}",
                context=ErrorContext(url=url),
            ) from e
        except httpx.RequestError as e:
            raise RequestFailedError(
                f"GET {url} failed: {type(e).__name__}: {e}",
                context=ErrorContext(url=url),
            ) from e
        logger.debug(
            f"GET {url} -> {response.status_code}",
            extra={"url": url, "status_code": response.status_code},
        )
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
