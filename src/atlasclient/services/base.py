"""Shared plumbing for resource services."""

from collections.abc import Mapping
from dataclasses import fields
from typing import Any
from urllib.parse import quote

from atlasclient.core.entities.client_config import ClientConfig
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.core.interfaces.request_executor import IRequestExecutor
from atlasclient.core.services.cache_service import CacheService
from atlasclient.errors import AtlasError, AtlasValidationError, to_atlas_error
from atlasclient.utils.pagination import enrich_pagination, normalize_pagination

# A query dataclass (e.g. ContentQuery) or a plain mapping
Options = Any


def options_to_params(options: Options | None) -> dict[str, Any]:
    """Turn a query dataclass or mapping into a parameter bag.

    Dataclass fields may rename themselves on the wire with
    ``field(metadata={"param": "apiName"})``. ``None`` values are dropped.
    """
    if options is None:
        return {}
    if isinstance(options, Mapping):
        return {k: v for k, v in options.items() if v is not None}

    params: dict[str, Any] = {}
    for f in fields(options):
        value = getattr(options, f.name)
        if value is not None:
            params[f.metadata.get("param", f.name)] = value
    return params


def require(value: Any, message: str) -> None:
    """Raise ``AtlasValidationError`` when ``value`` is empty."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise AtlasValidationError(message)


class BaseService:
    """Maps one REST resource onto the executor and the response cache."""

    def __init__(
        self,
        config: ClientConfig,
        cache: CacheService,
        executor: IRequestExecutor,
    ) -> None:
        self._config = config
        self._cache = cache
        self._executor = executor

    @property
    def config(self) -> ClientConfig:
        return self._config

    @config.setter
    def config(self, config: ClientConfig) -> None:
        self._config = config

    def _url(self, *segments: Any) -> str:
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self._config.api_url}/{path}"

    async def _call(self, request: RequestDescriptor) -> Any:
        try:
            return await self._executor.execute(request)
        except AtlasError:
            raise
        except Exception as e:
            raise to_atlas_error(e) from e

    async def _cached_get(
        self,
        operation: str,
        key_params: Mapping[str, Any],
        url: str,
        query: Mapping[str, Any] | None = None,
        ttl_minutes: float | None = None,
    ) -> Any:
        async def fetch() -> Any:
            return await self._call(RequestDescriptor.get(url, dict(query or {})))

        return await self._cache.get_or_fetch(operation, key_params, fetch, ttl_minutes)

    async def _paged_get(
        self,
        operation: str,
        key_params: Mapping[str, Any],
        url: str,
        filters: Mapping[str, Any] | None = None,
    ) -> Any:
        """Read-through GET of one page of a list endpoint.

        ``page`` is converted to ``offset`` on the wire and the response's
        pagination block is completed before it is cached.
        """
        info = normalize_pagination(key_params)
        query = {
            **{k: v for k, v in (filters or {}).items() if k not in ("page", "limit", "offset")},
            "limit": info.limit,
            "offset": info.offset,
        }

        async def fetch() -> Any:
            response = await self._call(RequestDescriptor.get(url, query))
            return enrich_pagination(response, info.limit, info.page)

        return await self._cache.get_or_fetch(operation, key_params, fetch)

    async def _upload(self, url: str, file: Any) -> Any:
        """POST ``file`` as the multipart ``file`` field.

        ``file`` is anything httpx accepts for one file: bytes, a binary
        file object or a ``(filename, content, content_type)`` tuple.
        """
        require(file, "File is required")
        return await self._call(RequestDescriptor.upload(url, {"file": file}))

    def _invalidate_families(self, *operations: str) -> None:
        for operation in operations:
            self._cache.invalidate_operation(operation)
