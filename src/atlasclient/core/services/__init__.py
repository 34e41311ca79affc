"""Domain services for atlasclient."""

from atlasclient.core.services.cache_service import CacheService

__all__ = ["CacheService"]
