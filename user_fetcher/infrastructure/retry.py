"""Retry Policy: fixed-attempt exponential backoff around an async operation.

Invariants:
    - Only TransportError is retried; every other exception propagates on first raise
    - Delay before retry n (n starting at 1) is base_delay_seconds * 2**n
    - At most max_retries retries (max_retries + 1 attempts in total)
    - No sleep after the final attempt: its failure propagates immediately, unchanged
    - First-attempt success never sleeps
    - Backoff uses asyncio.sleep, so other tasks keep running and cancellation
      during the wait propagates CancelledError
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from user_fetcher.core.errors import TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Retries transient transport failures with exponential backoff."""

    def __init__(self, max_retries: int = 3, base_delay_seconds: float = 1.0):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self.max_retries = max_retries
        self.base_delay_seconds = base_delay_seconds

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        operation_name: str = "operation",
    ) -> T:
        """Run operation, retrying on TransportError until attempts run out."""
        attempt = 1
        while True:
            try:
                result = await operation()
            except TransportError as e:
                e.context.attempt = attempt
                if attempt > self.max_retries:
                    logger.warning(
                        f"{operation_name} failed after {self.max_retries} retries: {e}",
                        extra={"operation": operation_name, "attempt": attempt},
                    )
                    raise
                await self._wait_before_retry(e, attempt, operation_name)
                attempt += 1
                continue
            if attempt > 1:
                logger.info(
                    f"{operation_name} succeeded after retry",
                    extra={"operation": operation_name, "attempt": attempt},
                )
            return result

    async def _wait_before_retry(
        self, e: TransportError, attempt: int, operation_name: str,
    ) -> None:
        delay = self.backoff(attempt)
        logger.warning(
            f"Transient error, retry after {delay}s: {e}",
            extra={
                "operation": operation_name,
                "attempt": attempt,
                "delay_seconds": delay,
            },
        )
        await asyncio.sleep(delay)

    def backoff(self, attempt: int) -> float:
        """Delay in seconds before retry number `attempt` (1-based)."""
        return self.base_delay_seconds * (2 ** attempt)
