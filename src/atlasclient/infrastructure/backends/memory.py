"""Process-local cache backend on top of cachetools."""

import fnmatch
import math
import time
from collections.abc import Callable
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from atlasclient.core.entities.cache_entry import CacheEntry


def _entry_expiry(_key: str, entry: CacheEntry, _now: float) -> float:
    # TLRUCache keeps an item while timer() < ttu
    return math.nextafter(entry.expires_at, math.inf)


class InMemoryCacheBackend:
    """Bounded dict of ``CacheEntry`` objects, each with its own TTL.

    Backed by cachetools' TLRUCache. An entry stays live up to and
    including its ``expires_at`` and is dropped on the next access after
    that. Once ``maxsize`` is reached the least recently used entry is
    evicted. Meant for one process and one event loop; there is no locking.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the backend.

        Args:
            maxsize: Entry count at which LRU eviction starts.
            timer: Clock in seconds; tests pass a fake one.
        """
        self._maxsize = maxsize
        self._timer = timer
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_entry_expiry,
            timer=timer,
        )

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None when missing or expired."""
        entry = self.get_entry(key)
        return None if entry is None else entry.value

    def get_entry(self, key: str) -> CacheEntry | None:
        """Return the live entry for ``key`` with its timestamps."""
        self._cache.expire()
        return self._cache.get(key)

    def set(self, key: str, value: Any, ttl_minutes: float) -> None:
        """Store ``value`` under ``key`` for ``ttl_minutes``.

        A TTL of zero or less stores nothing and removes any previous
        value for the key.
        """
        now = self._timer()
        entry = CacheEntry.create(key=key, value=value, ttl_minutes=ttl_minutes, now=now)
        if entry.is_expired(now):
            self._cache.pop(key, None)
            return
        self._cache[key] = entry

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._cache

    def clear(self) -> None:
        self._cache.clear()

    def delete_pattern(self, pattern: str) -> int:
        """Remove every key matching the glob ``pattern``.

        Matching is case-sensitive on every platform.

        Returns:
            How many entries were removed.
        """
        matched = [key for key in list(self._cache.keys()) if fnmatch.fnmatchcase(key, pattern)]
        return sum(1 for key in matched if self.delete(key))

    def size(self) -> int:
        """Number of live entries."""
        return len(self._cache)

    def __len__(self) -> int:
        return self.size()

    @property
    def maxsize(self) -> int:
        return self._maxsize
