"""Location resource service."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from atlasclient.core.entities.pagination import PaginationOptions
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.errors import AtlasValidationError
from atlasclient.services.base import BaseService, Options, options_to_params, require

BY_ID = "location-id"
BY_CARERIX_ID = "location-carerix"
LIST = "locations"
SEARCH = "locations-search"
ACTIVE = "locations-active"
BY_AGENCY = "locations-agency"
DEBTOR = "locations-debtor"
MISSING_COORDINATES = "locations-missing-coords"
STALE = "locations-stale"
BY_SYNC_JOB = "locations-sync-job"
STATISTICS = "locations-statistics"

LIST_OPERATIONS = (
    LIST,
    SEARCH,
    ACTIVE,
    BY_AGENCY,
    DEBTOR,
    MISSING_COORDINATES,
    STALE,
    BY_SYNC_JOB,
    STATISTICS,
)


@dataclass
class LocationQuery(PaginationOptions):
    """Filters accepted by ``LocationService.list`` and ``search``."""

    agency_name: str | None = None
    is_active: bool | None = None
    is_debtor: bool | None = None
    city: str | None = None
    country: str | None = None
    sync_job_id: str | None = None
    missing_coordinates: bool | None = None
    is_stale: bool | None = None
    search: str | None = None


class LocationService(BaseService):
    """Client and agency locations synchronised from Carerix."""

    async def create(self, data: dict[str, Any]) -> Any:
        require(data, "Location data is required")
        response = await self._call(RequestDescriptor.post(self._url("locations"), data))
        self._invalidate_families(*LIST_OPERATIONS)
        return response

    async def bulk_create(self, locations: Sequence[dict[str, Any]]) -> Any:
        if not locations:
            raise AtlasValidationError("At least one location is required")
        response = await self._call(
            RequestDescriptor.post(self._url("locations", "bulk"), {"locations": list(locations)})
        )
        self._cache.clear()
        return response

    async def get_by_id(self, location_id: str) -> Any:
        require(location_id, "Location ID is required")
        return await self._cached_get(
            BY_ID, {"id": location_id}, self._url("locations", location_id)
        )

    async def get_by_carerix_id(self, carerix_id: str) -> Any:
        require(carerix_id, "Carerix ID is required")
        return await self._cached_get(
            BY_CARERIX_ID,
            {"carerix_id": carerix_id},
            self._url("locations", "carerix", carerix_id),
        )

    async def list(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(LIST, params, self._url("locations"), params)

    async def search(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(
            SEARCH, params, self._url("locations", "search"), params
        )

    async def get_active(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(
            ACTIVE, params, self._url("locations", "active"), params
        )

    async def get_by_agency(self, agency_name: str, options: Options | None = None) -> Any:
        """Locations of one agency; only pagination is sent to the API."""
        require(agency_name, "Agency name is required")
        params = {"agency_name": agency_name, **options_to_params(options)}
        url = self._url("locations", "agency", agency_name)
        return await self._paged_get(BY_AGENCY, params, url)

    async def get_debtor_locations(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(
            DEBTOR, params, self._url("locations", "debtor"), params
        )

    async def get_missing_coordinates(self, query: Options | None = None) -> Any:
        """Locations that still need geocoding."""
        params = options_to_params(query)
        return await self._paged_get(
            MISSING_COORDINATES, params, self._url("locations", "missing-coordinates"), params
        )

    async def get_stale(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(
            STALE, params, self._url("locations", "stale"), params
        )

    async def get_by_sync_job(self, sync_job_id: str, options: Options | None = None) -> Any:
        require(sync_job_id, "Sync job ID is required")
        params = {"sync_job_id": sync_job_id, **options_to_params(options)}
        url = self._url("locations", "sync-job", sync_job_id)
        return await self._paged_get(BY_SYNC_JOB, params, url)

    async def update(self, location_id: str, data: dict[str, Any]) -> Any:
        require(location_id, "Location ID is required")
        response = await self._call(
            RequestDescriptor.put(self._url("locations", location_id), data)
        )
        self._invalidate_item(location_id)
        return response

    async def delete(self, location_id: str) -> Any:
        require(location_id, "Location ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("locations", location_id))
        )
        self._invalidate_item(location_id)
        return response

    async def sync_from_carerix(self, force: bool | None = None) -> Any:
        """Start a Carerix location sync; any cached read may be stale afterwards."""
        body = None if force is None else {"force": force}
        response = await self._call(RequestDescriptor.post(self._url("locations", "sync"), body))
        self._cache.clear()
        return response

    async def enrich(self, location_id: str, force: bool = False) -> Any:
        """Fill in coordinates and contact details from external sources."""
        require(location_id, "Location ID is required")
        response = await self._call(
            RequestDescriptor.post(
                self._url("locations", location_id, "enrich"), {"force": force}
            )
        )
        self._cache.invalidate(BY_ID, {"id": location_id})
        return response

    async def bulk_enrich(self, location_ids: Sequence[str], force: bool = False) -> Any:
        if not location_ids:
            raise AtlasValidationError("Location IDs are required")
        response = await self._call(
            RequestDescriptor.post(
                self._url("locations", "bulk", "enrich"),
                {"location_ids": list(location_ids), "force": force},
            )
        )
        self._cache.clear()
        return response

    async def get_statistics(self) -> Any:
        """Aggregate counters; cached for twice the usual duration."""
        return await self._cached_get(
            STATISTICS,
            {},
            self._url("locations", "statistics"),
            ttl_minutes=self._config.cache_duration_minutes * 2,
        )

    async def cleanup_inactive(self) -> Any:
        response = await self._call(
            RequestDescriptor.delete(self._url("locations", "cleanup", "inactive"))
        )
        self._cache.clear()
        return response

    async def upload_file(self, location_id: str, file: Any) -> Any:
        require(location_id, "Location ID is required")
        return await self._upload(self._url("locations", location_id, "files"), file)

    async def get_files(self, location_id: str) -> Any:
        require(location_id, "Location ID is required")
        return await self._call(
            RequestDescriptor.get(self._url("locations", location_id, "files"))
        )

    async def delete_file(self, location_id: str, file_id: str) -> Any:
        require(location_id, "Location ID is required")
        require(file_id, "File ID is required")
        return await self._call(
            RequestDescriptor.delete(self._url("locations", location_id, "files", file_id))
        )

    async def set_featured_image(self, location_id: str, file_id: str) -> Any:
        require(location_id, "Location ID is required")
        require(file_id, "File ID is required")
        response = await self._call(
            RequestDescriptor.post(
                self._url("locations", location_id, "featured-image"), {"file_id": file_id}
            )
        )
        self._cache.invalidate(BY_ID, {"id": location_id})
        return response

    def _invalidate_item(self, location_id: str) -> None:
        self._cache.invalidate(BY_ID, {"id": location_id})
        self._invalidate_families(BY_CARERIX_ID, *LIST_OPERATIONS)
