"""Client configuration entity."""

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

from atlasclient.core.entities.retry_policy import BackoffStrategy, RetryPolicy
from atlasclient.errors import AtlasValidationError

DEFAULT_API_URL = "https://api.atlas.example.com"
DEFAULT_TIMEOUT_MS = 10000


@dataclass
class ClientConfig:
    """Client configuration.

    Provides the API address and credentials plus the knobs consumed by
    the request executor and the response cache.

    Caching:
        Responses are cached for ``cache_duration_minutes``. A duration
        of 0 or less stores nothing, which is the same as disabling the
        cache.

    Retries:
        ``retries`` extra attempts with exponential backoff starting at
        ``retry_delay_ms``. Writes are only retried with ``retry_writes``.
    """

    api_url: str
    website_id: str
    api_key: str | None = None

    timeout_ms: float = DEFAULT_TIMEOUT_MS
    retries: int = 3
    retry_delay_ms: float = 1000
    retry_writes: bool = False
    backoff: BackoffStrategy = BackoffStrategy.EXPONENTIAL

    cache_enabled: bool = True
    cache_duration_minutes: float = 5
    cache_max_size: int = 1000

    debug: bool = False

    def __post_init__(self) -> None:
        """Validate required fields and coerce out-of-range values."""
        if not self.api_url:
            raise AtlasValidationError("api_url is required")
        if not self.website_id:
            raise AtlasValidationError("website_id is required")

        self.api_url = self.api_url.rstrip("/")
        if self.timeout_ms is None or self.timeout_ms <= 0:
            self.timeout_ms = DEFAULT_TIMEOUT_MS
        if self.retries is None or self.retries < 0:
            self.retries = 0
        if self.retry_delay_ms is None or self.retry_delay_ms < 0:
            self.retry_delay_ms = 0
        if self.cache_max_size <= 0:
            self.cache_max_size = 1000

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_retries=self.retries,
            retry_delay_ms=self.retry_delay_ms,
            backoff=self.backoff,
            retry_writes=self.retry_writes,
        )

    def headers(self) -> dict[str, str]:
        """Build the default headers sent with every request."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def replace(self, **changes: Any) -> "ClientConfig":
        """Return a copy with ``changes`` applied and validated."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Create a configuration from ``ATLAS_*`` environment variables.

        Args:
            **overrides: Fields that take precedence over the environment.

        Returns:
            A new ClientConfig instance.
        """
        values: dict[str, Any] = {
            "api_url": os.environ.get("ATLAS_API_URL", DEFAULT_API_URL),
            "website_id": os.environ.get("ATLAS_WEBSITE_ID", ""),
            "api_key": os.environ.get("ATLAS_API_KEY") or None,
        }
        values.update(overrides)
        return cls(**values)
