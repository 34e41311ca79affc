"""Cache service - read-through response cache for API calls."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from atlasclient.core.entities.client_config import ClientConfig
from atlasclient.core.interfaces.cache_backend import ICacheBackend
from atlasclient.core.interfaces.key_builder import IKeyBuilder
from atlasclient.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)

_MISS = object()


class CacheService:
    """Domain service that orchestrates caching of API responses.

    Composes a backend, a key builder and a serializer. Values are stored
    serialized, so every hit returns an independent copy.

    The backend is shared, unsynchronized state: two concurrent misses for
    the same key may both fetch and both populate it.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        enabled: bool = True,
        default_ttl_minutes: float = 5,
    ) -> None:
        """Initialize the cache service.

        Args:
            backend: The cache backend to use for storage.
            key_builder: The key builder for generating cache keys.
            serializer: The serializer for encoding/decoding values.
            enabled: When False, reads always miss and writes are dropped.
            default_ttl_minutes: TTL used when a caller passes none.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self.enabled = enabled
        self.default_ttl_minutes = default_ttl_minutes

        # Statistics
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
    ) -> "CacheService":
        """Build a cache service honouring ``config``'s cache settings."""
        return cls(
            backend=backend,
            key_builder=key_builder,
            serializer=serializer,
            enabled=config.cache_enabled,
            default_ttl_minutes=config.cache_duration_minutes,
        )

    @property
    def backend(self) -> ICacheBackend:
        return self._backend

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, total requests and live entries.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
            "size": self._backend.size(),
        }

    def key(self, operation: str, params: Mapping[str, Any] | None = None) -> str:
        """Return the cache key for one call of ``operation``."""
        return self._key_builder.build(operation, params)

    def get(self, operation: str, params: Mapping[str, Any] | None = None) -> Any | None:
        """Try to get the cached response for a call.

        Args:
            operation: Logical operation name.
            params: The call's parameter bag.

        Returns:
            A fresh copy of the cached response, or None if not found.
            A cached ``null`` body also reads as None; ``get_or_fetch``
            tells the two apart.
        """
        value = self._lookup(operation, params)
        return None if value is _MISS else value

    def _lookup(self, operation: str, params: Mapping[str, Any] | None) -> Any:
        if not self.enabled:
            return _MISS

        key = self.key(operation, params)
        cached_data = self._backend.get(key)

        if cached_data is None:
            self._misses += 1
            logger.debug("cache miss %s", key)
            return _MISS

        self._hits += 1
        logger.debug("cache hit %s", key)
        return self._serializer.deserialize(cached_data)

    def set(
        self,
        operation: str,
        params: Mapping[str, Any] | None,
        value: Any,
        ttl_minutes: float | None = None,
    ) -> None:
        """Cache a response.

        Args:
            operation: Logical operation name.
            params: The call's parameter bag.
            value: The response to cache.
            ttl_minutes: Optional TTL. Uses the default if not provided.
        """
        if not self.enabled:
            return

        key = self.key(operation, params)
        effective_ttl = self.default_ttl_minutes if ttl_minutes is None else ttl_minutes
        self._backend.set(key, self._serializer.serialize(value), effective_ttl)

    async def get_or_fetch(
        self,
        operation: str,
        params: Mapping[str, Any] | None,
        fetch: Callable[[], Awaitable[Any]],
        ttl_minutes: float | None = None,
    ) -> Any:
        """Return the cached response or fetch, cache and return a new one.

        Args:
            operation: Logical operation name.
            params: The call's parameter bag.
            fetch: Coroutine factory producing the response on a miss.
            ttl_minutes: Optional TTL for a freshly fetched response.

        Returns:
            The cached or freshly fetched response.
        """
        cached = self._lookup(operation, params)
        if cached is not _MISS:
            return cached

        value = await fetch()
        self.set(operation, params, value, ttl_minutes)
        return value

    def invalidate(self, operation: str, params: Mapping[str, Any] | None = None) -> bool:
        """Drop the entry cached for exactly this call.

        Returns:
            True if an entry was removed.
        """
        return self._backend.delete(self.key(operation, params))

    def invalidate_operation(self, operation: str) -> int:
        """Drop every entry cached for ``operation``, whatever its parameters.

        Returns:
            Number of entries removed.
        """
        count = self._backend.delete_pattern(self._key_builder.family_pattern(operation))
        if count:
            logger.debug("invalidated %d %s entries", count, operation)
        return count

    def clear(self) -> None:
        """Clear all cached entries."""
        self._backend.clear()
        self._hits = 0
        self._misses = 0
