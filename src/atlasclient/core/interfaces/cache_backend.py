"""Cache backend interface."""

from typing import Any, Protocol


class ICacheBackend(Protocol):
    """Storage for cached responses, keyed by string.

    Backends are plain in-memory bookkeeping: none of these methods
    fail and none of them suspend the caller.
    """

    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``; None if absent or expired."""
        ...

    def set(self, key: str, value: Any, ttl_minutes: float) -> None:
        """Store value, replacing any previous entry for ``key``.

        Args:
            key: Cache key.
            value: Value to keep.
            ttl_minutes: Lifetime in minutes. Non-positive values
                leave nothing retrievable under ``key``.
        """
        ...

    def delete(self, key: str) -> bool:
        """Drop ``key``; True if something was removed."""
        ...

    def exists(self, key: str) -> bool:
        """Check if a live entry exists for ``key``."""
        ...

    def clear(self) -> None:
        ...

    def delete_pattern(self, pattern: str) -> int:
        """Drop every key matching the glob ``pattern``; return the count."""
        ...

    def size(self) -> int:
        """Return the number of live entries."""
        ...
