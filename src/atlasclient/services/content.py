"""Content resource service."""

from dataclasses import dataclass, field
from typing import Any

from atlasclient.core.entities.pagination import PaginationOptions
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.services.base import BaseService, Options, options_to_params, require

LIST = "content"
BY_ID = "content-id"
BY_SLUG = "content-slug"


@dataclass
class ContentQuery(PaginationOptions):
    """Filters accepted by ``ContentService.list``."""

    content_type: str | None = field(default=None, metadata={"param": "contentType"})
    categories: list[str] | None = None
    tags: list[str] | None = None
    status: str | None = None
    featured: bool | None = None
    premium: bool | None = None
    sort_by: str | None = field(default=None, metadata={"param": "sortBy"})
    sort_order: str | None = field(default=None, metadata={"param": "sortOrder"})
    search: str | None = None


class ContentService(BaseService):
    """Content items of the configured website."""

    async def list(self, query: Options | None = None) -> Any:
        """List content with optional filtering and pagination.

        Args:
            query: A ``ContentQuery`` or an equivalent mapping.

        Returns:
            The API response with a completed pagination block.
        """
        params = {"website_id": self._config.website_id, **options_to_params(query)}
        return await self._paged_get(LIST, params, self._url("content"), params)

    async def get_by_slug(self, slug: str) -> Any:
        require(slug, "Slug is required")
        url = self._url("content", "website", self._config.website_id, "slug", slug)
        return await self._cached_get(
            BY_SLUG, {"website_id": self._config.website_id, "slug": slug}, url
        )

    async def get_by_id(self, content_id: str) -> Any:
        require(content_id, "Content ID is required")
        return await self._cached_get(
            BY_ID, {"id": content_id}, self._url("content", content_id)
        )

    async def create(self, data: dict[str, Any]) -> Any:
        require(data, "Content data is required")
        response = await self._call(RequestDescriptor.post(self._url("content"), data))
        self._cache.invalidate_operation(LIST)
        return response

    async def update(self, content_id: str, data: dict[str, Any]) -> Any:
        require(content_id, "Content ID is required")
        response = await self._call(
            RequestDescriptor.put(self._url("content", content_id), data)
        )
        self._invalidate_item(content_id)
        return response

    async def delete(self, content_id: str) -> Any:
        require(content_id, "Content ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("content", content_id))
        )
        self._invalidate_item(content_id)
        return response

    def _invalidate_item(self, content_id: str) -> None:
        # The item's old slug is unknown here, so every slug lookup goes
        self._cache.invalidate(BY_ID, {"id": content_id})
        self._cache.invalidate_operation(BY_SLUG)
        self._cache.invalidate_operation(LIST)
