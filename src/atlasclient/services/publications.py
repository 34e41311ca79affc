"""Publication (vacancy) resource service."""

from dataclasses import dataclass
from typing import Any

from atlasclient.core.entities.pagination import PaginationOptions
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.errors import AtlasValidationError
from atlasclient.services.base import BaseService, Options, options_to_params, require

BY_ID = "publication-id"
BY_CARERIX_ID = "publication-carerix"
BY_LOCATION = "publications-location"
SEARCH = "publications-search"
ACTIVE = "publications-active"
BY_AGENCY = "publications-agency"
EXPIRED = "publications-expired"
STALE = "publications-stale"
STATISTICS = "publications-statistics"

LIST_OPERATIONS = (BY_LOCATION, SEARCH, ACTIVE, BY_AGENCY, EXPIRED, STALE, STATISTICS)


@dataclass
class PublicationQuery(PaginationOptions):
    """Filters accepted by ``PublicationService.search``."""

    agency_name: str | None = None
    owner_id: str | None = None
    company_id: str | None = None
    start_date_from: str | None = None
    start_date_to: str | None = None
    end_date_from: str | None = None
    end_date_to: str | None = None
    salary_min: float | None = None
    salary_max: float | None = None
    hours_per_week_min: float | None = None
    hours_per_week_max: float | None = None
    sync_job_id: str | None = None
    search_term: str | None = None
    carerix_location_id: str | None = None


class PublicationService(BaseService):
    """Job publications synchronised from Carerix."""

    async def create(self, data: dict[str, Any]) -> Any:
        require(data, "Publication data is required")
        response = await self._call(
            RequestDescriptor.post(self._url("publications"), data)
        )
        self._invalidate_lists()
        return response

    async def bulk_create(self, publications: list[dict[str, Any]]) -> Any:
        if not publications:
            raise AtlasValidationError("At least one publication is required")
        response = await self._call(
            RequestDescriptor.post(
                self._url("publications", "bulk"), {"publications": publications}
            )
        )
        self._invalidate_lists()
        return response

    async def get_by_id(self, publication_id: str) -> Any:
        require(publication_id, "Publication ID is required")
        return await self._cached_get(
            BY_ID, {"id": publication_id}, self._url("publications", publication_id)
        )

    async def get_by_carerix_id(self, carerix_id: str) -> Any:
        require(carerix_id, "Carerix ID is required")
        return await self._cached_get(
            BY_CARERIX_ID,
            {"carerix_id": carerix_id},
            self._url("publications", "carerix", carerix_id),
        )

    async def get_by_carerix_location_id(
        self, carerix_location_id: str, options: Options | None = None
    ) -> Any:
        require(carerix_location_id, "Carerix location ID is required")
        params = {"carerix_location_id": carerix_location_id, **options_to_params(options)}
        url = self._url("publications", "carerix", "location", carerix_location_id)
        return await self._paged_get(BY_LOCATION, params, url)

    async def update(self, publication_id: str, data: dict[str, Any]) -> Any:
        require(publication_id, "Publication ID is required")
        response = await self._call(
            RequestDescriptor.put(self._url("publications", publication_id), data)
        )
        self._invalidate_item(publication_id)
        return response

    async def delete(self, publication_id: str) -> Any:
        require(publication_id, "Publication ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("publications", publication_id))
        )
        self._invalidate_item(publication_id)
        return response

    async def search(self, query: Options | None = None) -> Any:
        """Search publications by any ``PublicationQuery`` filter."""
        params = options_to_params(query)
        return await self._paged_get(
            SEARCH, params, self._url("publications", "search"), params
        )

    async def get_active(self, options: Options | None = None) -> Any:
        return await self._paged_get(
            ACTIVE, options_to_params(options), self._url("publications", "active")
        )

    async def get_active_by_agency(self, agency: str, options: Options | None = None) -> Any:
        require(agency, "Agency is required")
        params = {"agency": agency, **options_to_params(options)}
        url = self._url("publications", "active", "agency", agency)
        return await self._paged_get(BY_AGENCY, params, url)

    async def get_expired(self, options: Options | None = None) -> Any:
        return await self._paged_get(
            EXPIRED, options_to_params(options), self._url("publications", "expired")
        )

    async def get_stale(self, options: Options | None = None) -> Any:
        return await self._paged_get(
            STALE, options_to_params(options), self._url("publications", "stale")
        )

    async def get_statistics(self) -> Any:
        """Aggregate counters; cached for twice the usual duration."""
        return await self._cached_get(
            STATISTICS,
            {},
            self._url("publications", "statistics"),
            ttl_minutes=self._config.cache_duration_minutes * 2,
        )

    async def sync_from_carerix(self) -> Any:
        """Start a Carerix sync job; any cached read may be stale afterwards."""
        response = await self._call(
            RequestDescriptor.post(self._url("publications", "sync"))
        )
        self._cache.clear()
        return response

    async def cleanup_expired(self) -> Any:
        response = await self._call(
            RequestDescriptor.delete(self._url("publications", "cleanup", "expired"))
        )
        self._cache.clear()
        return response

    async def transform_to_carerix_format(self, publication_id: str) -> Any:
        require(publication_id, "Publication ID is required")
        return await self._call(
            RequestDescriptor.get(self._url("publications", publication_id, "carerix-format"))
        )

    def _invalidate_item(self, publication_id: str) -> None:
        self._cache.invalidate(BY_ID, {"id": publication_id})
        self._cache.invalidate_operation(BY_CARERIX_ID)
        self._invalidate_lists()

    def _invalidate_lists(self) -> None:
        for operation in LIST_OPERATIONS:
            self._cache.invalidate_operation(operation)
