"""Website resource service."""

from dataclasses import dataclass
from typing import Any

from atlasclient.core.entities.pagination import PaginationOptions
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.services.base import BaseService, Options, options_to_params, require

BY_ID = "website-id"
LIST = "websites"
CONTENT = "website-content"
FILES = "website-files"

FILE_TYPES = ("public", "private", "all")


@dataclass
class WebsiteQuery(PaginationOptions):
    """Filters accepted by ``WebsiteService.list``."""

    status: str | None = None
    created_by: str | None = None
    search: str | None = None


class WebsiteService(BaseService):
    """Websites managed on the platform, their content and files."""

    async def create(self, data: dict[str, Any]) -> Any:
        require(data, "Website data is required")
        response = await self._call(
            RequestDescriptor.post(self._url("website", "create"), data)
        )
        self._invalidate_families(LIST)
        return response

    async def get_by_id(self, website_id: str) -> Any:
        require(website_id, "Website ID is required")
        return await self._cached_get(
            BY_ID, {"id": website_id}, self._url("website", website_id)
        )

    async def list(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(LIST, params, self._url("website"), params)

    async def update(self, website_id: str, data: dict[str, Any]) -> Any:
        require(website_id, "Website ID is required")
        response = await self._call(
            RequestDescriptor.put(self._url("website", website_id), data)
        )
        self._cache.invalidate(BY_ID, {"id": website_id})
        self._invalidate_families(LIST)
        return response

    async def delete(self, website_id: str) -> Any:
        require(website_id, "Website ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("website", website_id))
        )
        self._cache.invalidate(BY_ID, {"id": website_id})
        self._invalidate_families(LIST, CONTENT, FILES)
        return response

    async def get_content(self, website_id: str, options: Options | None = None) -> Any:
        """Content of any website, not just the configured one."""
        require(website_id, "Website ID is required")
        filters = options_to_params(options)
        url = self._url("website", website_id, "content")
        return await self._paged_get(
            CONTENT, {"website_id": website_id, **filters}, url, filters
        )

    async def get_files(self, website_id: str, file_type: str = "all") -> Any:
        """Files of a website; ``file_type`` is public, private or all."""
        require(website_id, "Website ID is required")
        if file_type not in FILE_TYPES:
            file_type = "all"
        return await self._cached_get(
            FILES,
            {"website_id": website_id, "type": file_type},
            self._url("website", website_id, "files"),
            {"type": file_type},
        )

    async def upload_file(self, website_id: str, file: Any) -> Any:
        require(website_id, "Website ID is required")
        response = await self._upload(self._url("website", website_id, "files"), file)
        self._invalidate_families(FILES)
        return response

    async def delete_file(self, website_id: str, file_id: str) -> Any:
        require(website_id, "Website ID is required")
        require(file_id, "File ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("website", website_id, "files", file_id))
        )
        self._invalidate_families(FILES)
        return response

    async def set_logo(self, website_id: str, file_id: str) -> Any:
        return await self._set_asset(website_id, file_id, "logo")

    async def set_favicon(self, website_id: str, file_id: str) -> Any:
        return await self._set_asset(website_id, file_id, "favicon")

    async def _set_asset(self, website_id: str, file_id: str, slot: str) -> Any:
        require(website_id, "Website ID is required")
        require(file_id, "File ID is required")
        response = await self._call(
            RequestDescriptor.post(self._url("website", website_id, slot), {"file_id": file_id})
        )
        self._cache.invalidate(BY_ID, {"id": website_id})
        return response
