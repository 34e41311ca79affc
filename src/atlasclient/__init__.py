"""atlasclient - async Python client for the Atlas content/HR API.

Exposes the API's resources as typed method calls on top of three
shared building blocks: a resilient request executor (timeout, retry
with backoff), a TTL response cache keyed by operation and parameters,
and pagination helpers bridging page and offset based queries.

Example:
    from atlasclient import AtlasClient, ClientConfig, ContentQuery

    config = ClientConfig(
        api_url="https://api.atlas.example.com",
        website_id="my-site",
        api_key="secret",
        cache_duration_minutes=5,
        retries=3,
    )

    async with AtlasClient(config) as atlas:
        page = await atlas.content.list(ContentQuery(page=2, limit=20))
        page["pagination"]["hasMore"]

Process-wide instance:
    from atlasclient import create_atlas_client

    atlas = create_atlas_client()  # reads ATLAS_API_URL, ATLAS_WEBSITE_ID, ATLAS_API_KEY
"""

from atlasclient.client import (
    AtlasClient,
    create_atlas_client,
    get_atlas_client,
    reset_atlas_client,
)
from atlasclient.core.entities import (
    BackoffStrategy,
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
from atlasclient.errors import (
    AtlasCancelledError,
    AtlasError,
    AtlasNetworkError,
    AtlasUnknownError,
    AtlasValidationError,
)
from atlasclient.infrastructure import (
    DefaultKeyBuilder,
    HttpRequestExecutor,
    InMemoryCacheBackend,
    JsonSerializer,
    SerializationError,
)
from atlasclient.services import (
    ContentQuery,
    ContentService,
    LocationQuery,
    LocationService,
    PeopleService,
    PersonQuery,
    PublicationQuery,
    PublicationService,
    WebsiteQuery,
    WebsiteService,
)
from atlasclient.utils.pagination import (
    enrich_pagination,
    normalize_pagination,
    offset_to_page,
    page_to_offset,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "AtlasClient",
    "create_atlas_client",
    "get_atlas_client",
    "reset_atlas_client",
    # Core entities
    "BackoffStrategy",
    "CacheEntry",
    "ClientConfig",
    "PaginationInfo",
    "PaginationOptions",
    "RequestDescriptor",
    "RetryPolicy",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IRequestExecutor",
    "ISerializer",
    # Core services
    "CacheService",
    # Errors
    "AtlasError",
    "AtlasNetworkError",
    "AtlasValidationError",
    "AtlasUnknownError",
    "AtlasCancelledError",
    "SerializationError",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "HttpRequestExecutor",
    # Resource services
    "ContentQuery",
    "ContentService",
    "LocationQuery",
    "LocationService",
    "PeopleService",
    "PersonQuery",
    "PublicationQuery",
    "PublicationService",
    "WebsiteQuery",
    "WebsiteService",
    # Pagination
    "normalize_pagination",
    "enrich_pagination",
    "page_to_offset",
    "offset_to_page",
]
