"""Cache entry entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Timestamps are seconds read from the owning backend's timer, so
    ``expires_at`` is only comparable with that same clock.
    """

    key: str
    value: Any
    created_at: float
    expires_at: float

    @property
    def ttl_seconds(self) -> float:
        """Lifetime the entry was stored with."""
        return self.expires_at - self.created_at

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired at ``now``.

        Args:
            now: Current time on the backend's clock.

        Returns:
            True once ``now`` is past the expiry time, or always for
            an entry stored with no lifetime.
        """
        return self.ttl_seconds <= 0 or now > self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        ttl_minutes: float,
        now: float,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl_minutes: Time-to-live in minutes. Non-positive values
                produce an entry that is already expired.
            now: Current time on the backend's clock.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            created_at=now,
            expires_at=now + ttl_minutes * 60.0,
        )
