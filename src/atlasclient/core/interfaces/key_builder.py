"""Key builder interface."""

from collections.abc import Mapping
from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys from a logical operation.

    Key builders must be deterministic: the same operation name and an
    equal parameter bag always yield the same key.
    """

    def build(
        self,
        operation: str,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        """Build the cache key for one call of ``operation``.

        Args:
            operation: Logical operation name (e.g. ``"content"``).
            params: The call's parameter bag (filters, pagination, ids).

        Returns:
            A unique string key for caching the operation result.
        """
        ...

    def family_pattern(self, operation: str) -> str:
        """Return a glob matching every key built for ``operation``."""
        ...
