"""Core domain layer for atlasclient."""

from atlasclient.core.entities import (
    CacheEntry,
    ClientConfig,
    PaginationInfo,
    PaginationOptions,
    RequestDescriptor,
    RetryPolicy,
)
from atlasclient.core.interfaces import (
    ICacheBackend,
    IKeyBuilder,
    IRequestExecutor,
    ISerializer,
)
from atlasclient.core.services import CacheService

__all__ = [
    # Entities
    "CacheEntry",
    "ClientConfig",
    "PaginationInfo",
    "PaginationOptions",
    "RequestDescriptor",
    "RetryPolicy",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IRequestExecutor",
    "ISerializer",
    # Services
    "CacheService",
]
