"""Client facade wiring the cache and executor into the resource services."""

import logging
from typing import Any

import httpx

from atlasclient.core.entities.client_config import ClientConfig
from atlasclient.core.interfaces.cache_backend import ICacheBackend
from atlasclient.core.interfaces.request_executor import IRequestExecutor
from atlasclient.core.services.cache_service import CacheService
from atlasclient.infrastructure.backends.memory import InMemoryCacheBackend
from atlasclient.infrastructure.executors.http import HttpRequestExecutor
from atlasclient.infrastructure.key_builders.default import DefaultKeyBuilder
from atlasclient.infrastructure.serializers.json import JsonSerializer
from atlasclient.services.base import BaseService
from atlasclient.services.content import ContentService
from atlasclient.services.locations import LocationService
from atlasclient.services.people import PeopleService
from atlasclient.services.publications import PublicationService
from atlasclient.services.websites import WebsiteService

logger = logging.getLogger(__name__)


class AtlasClient:
    """Typed entry point to the Atlas API.

    One cache and one executor are shared by every resource service of
    this client. Both can be injected, which keeps tests isolated.

    Example:
        async with AtlasClient(ClientConfig(api_url=..., website_id=...)) as atlas:
            page = await atlas.content.list(ContentQuery(page=2, limit=20))
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        cache: CacheService | None = None,
        executor: IRequestExecutor | None = None,
        backend: ICacheBackend | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration.
            cache: Pre-built cache service; built from ``config`` if omitted.
            executor: Pre-built executor; an ``HttpRequestExecutor`` if omitted.
            backend: Backend for the default cache service.
            http_client: httpx client for the default executor.
        """
        self._config = config
        self._cache = cache or CacheService.from_config(
            config,
            backend=backend or InMemoryCacheBackend(maxsize=config.cache_max_size),
            key_builder=DefaultKeyBuilder(),
            serializer=JsonSerializer(),
        )
        self._executor = executor or HttpRequestExecutor(
            client=http_client,
            timeout_ms=config.timeout_ms,
            policy=config.retry_policy,
            headers=config.headers(),
        )

        self.content = ContentService(config, self._cache, self._executor)
        self.publications = PublicationService(config, self._cache, self._executor)
        self.locations = LocationService(config, self._cache, self._executor)
        self.people = PeopleService(config, self._cache, self._executor)
        self.websites = WebsiteService(config, self._cache, self._executor)

        if config.debug:
            logging.getLogger("atlasclient").setLevel(logging.DEBUG)
        logger.debug("AtlasClient ready for %s (website %s)", config.api_url, config.website_id)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def cache(self) -> CacheService:
        return self._cache

    @property
    def executor(self) -> IRequestExecutor:
        return self._executor

    def clear_cache(self) -> None:
        """Drop every cached response."""
        self._cache.clear()

    def update_config(self, **changes: Any) -> ClientConfig:
        """Apply configuration changes to this client and all its services.

        Cached responses survive unless the API address or website changed.

        Returns:
            The new configuration.
        """
        new_config = self._config.replace(**changes)
        if (new_config.api_url, new_config.website_id) != (
            self._config.api_url,
            self._config.website_id,
        ):
            self._cache.clear()

        self._config = new_config
        self._cache.enabled = new_config.cache_enabled
        self._cache.default_ttl_minutes = new_config.cache_duration_minutes
        if isinstance(self._executor, HttpRequestExecutor):
            self._executor.configure(
                timeout_ms=new_config.timeout_ms,
                policy=new_config.retry_policy,
                headers=new_config.headers(),
            )
        for service in self._services():
            service.config = new_config
        return new_config

    async def aclose(self) -> None:
        """Release the executor's network resources."""
        await self._executor.aclose()

    async def __aenter__(self) -> "AtlasClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _services(self) -> list[BaseService]:
        return [self.content, self.publications, self.locations, self.people, self.websites]
