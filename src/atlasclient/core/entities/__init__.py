"""Domain entities for atlasclient."""

from atlasclient.core.entities.cache_entry import CacheEntry
from atlasclient.core.entities.client_config import ClientConfig
from atlasclient.core.entities.pagination import (
    DEFAULT_PAGE_LIMIT,
    PaginationInfo,
    PaginationOptions,
)
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.core.entities.retry_policy import BackoffStrategy, RetryPolicy

__all__ = [
    "CacheEntry",
    "ClientConfig",
    "DEFAULT_PAGE_LIMIT",
    "PaginationInfo",
    "PaginationOptions",
    "RequestDescriptor",
    "BackoffStrategy",
    "RetryPolicy",
]
