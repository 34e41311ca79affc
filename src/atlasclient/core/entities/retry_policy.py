"""Retry policy entity."""

from dataclasses import dataclass
from enum import Enum

from atlasclient.core.entities.request import RequestDescriptor


class BackoffStrategy(Enum):
    """How the delay between attempts grows.

    CONSTANT: every retry waits ``retry_delay_ms``.
    EXPONENTIAL: retry ``n`` (0-based) waits ``retry_delay_ms * 2**n``.
    """

    CONSTANT = "constant"
    EXPONENTIAL = "exponential"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with backoff.

    ``max_retries`` counts extra attempts beyond the first one.
    """

    max_retries: int = 3
    retry_delay_ms: float = 1000.0
    backoff: BackoffStrategy = BackoffStrategy.EXPONENTIAL
    retry_writes: bool = False

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            object.__setattr__(self, "max_retries", 0)
        if self.retry_delay_ms < 0:
            object.__setattr__(self, "retry_delay_ms", 0.0)
        if isinstance(self.backoff, str):
            object.__setattr__(self, "backoff", BackoffStrategy(self.backoff))

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        """Return the backoff delay in seconds after failed ``attempt``.

        Args:
            attempt: 0-based index of the attempt that just failed.

        Returns:
            Seconds to wait before the next attempt.
        """
        if self.backoff is BackoffStrategy.EXPONENTIAL:
            delay_ms = self.retry_delay_ms * (2**attempt)
        else:
            delay_ms = self.retry_delay_ms
        return delay_ms / 1000.0

    def allows_retry(self, request: RequestDescriptor) -> bool:
        """Decide whether a failed ``request`` may be attempted again."""
        if request.retry is not None:
            return request.retry
        return request.is_idempotent or self.retry_writes
