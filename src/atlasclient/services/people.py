"""People resource service: candidates, team members and applications."""

from dataclasses import dataclass, field
from typing import Any

from atlasclient.core.entities.pagination import PaginationOptions
from atlasclient.core.entities.request import RequestDescriptor
from atlasclient.services.base import BaseService, Options, options_to_params, require

BY_ID = "person-id"
BY_EMAIL = "person-email"
LIST = "people"
TEAM_MEMBERS = "team-members"
APPLICATIONS = "applications"
EMAIL_MARKETING_LIST = "email-marketing-list"


@dataclass
class PersonQuery(PaginationOptions):
    """Filters accepted by ``PeopleService.list`` and ``get_team_members``."""

    person_status: str | None = None
    is_team_member: bool | None = None
    email: str | None = None
    search: str | None = None
    order_by: str | None = field(default=None, metadata={"param": "orderBy"})
    order_direction: str | None = field(default=None, metadata={"param": "orderDirection"})


class PeopleService(BaseService):
    """People known to the platform and their links to websites."""

    async def create(self, data: dict[str, Any]) -> Any:
        require(data, "Person data is required")
        response = await self._call(
            RequestDescriptor.post(self._url("people", "create"), data)
        )
        self._invalidate_families(LIST, EMAIL_MARKETING_LIST)
        return response

    async def get_by_id(self, person_id: str) -> Any:
        require(person_id, "Person ID is required")
        return await self._cached_get(
            BY_ID, {"id": person_id}, self._url("people", person_id)
        )

    async def get_by_email(self, email: str) -> Any:
        require(email, "Email is required")
        return await self._cached_get(
            BY_EMAIL, {"email": email}, self._url("people", "email"), {"email": email}
        )

    async def list(self, query: Options | None = None) -> Any:
        params = options_to_params(query)
        return await self._paged_get(LIST, params, self._url("people"), params)

    async def update(self, person_id: str, data: dict[str, Any]) -> Any:
        require(person_id, "Person ID is required")
        response = await self._call(
            RequestDescriptor.put(self._url("people", person_id), data)
        )
        self._invalidate_person(person_id)
        return response

    async def delete(self, person_id: str) -> Any:
        require(person_id, "Person ID is required")
        response = await self._call(
            RequestDescriptor.delete(self._url("people", person_id))
        )
        self._invalidate_person(person_id)
        return response

    async def submit_application(self, data: dict[str, Any]) -> Any:
        """Apply to a publication on behalf of a (possibly new) person."""
        require(data, "Application data is required")
        response = await self._call(
            RequestDescriptor.post(self._url("people", "application"), data)
        )
        self._invalidate_families(APPLICATIONS)
        return response

    async def get_team_members(self, website_id: str, query: Options | None = None) -> Any:
        require(website_id, "Website ID is required")
        filters = options_to_params(query)
        url = self._url("people", website_id, "team-members")
        return await self._paged_get(
            TEAM_MEMBERS, {"website_id": website_id, **filters}, url, filters
        )

    async def get_applications(self, website_id: str, query: Options | None = None) -> Any:
        require(website_id, "Website ID is required")
        filters = options_to_params(query)
        url = self._url("people", website_id, "applications")
        return await self._paged_get(
            APPLICATIONS, {"website_id": website_id, **filters}, url, filters
        )

    async def get_email_marketing_list(self) -> Any:
        """People who opted in to marketing mail; cached twice as long."""
        return await self._cached_get(
            EMAIL_MARKETING_LIST,
            {},
            self._url("people", "marketing", "email-list"),
            ttl_minutes=self._config.cache_duration_minutes * 2,
        )

    async def upsert_website_relationship(self, data: dict[str, Any]) -> Any:
        """Create or update how a person appears on a website's team page."""
        require(data, "Relationship data is required")
        response = await self._call(
            RequestDescriptor.post(self._url("people", "website-relationship"), data)
        )
        self._invalidate_families(TEAM_MEMBERS)
        return response

    async def sync_from_carerix(self, carerix_id: str) -> Any:
        require(carerix_id, "Carerix ID is required")
        response = await self._call(
            RequestDescriptor.post(
                self._url("people", "sync", "carerix"), {"carerix_id": carerix_id}
            )
        )
        self._cache.clear()
        return response

    async def upload_file(self, person_id: str, file: Any) -> Any:
        require(person_id, "Person ID is required")
        return await self._upload(self._url("people", person_id, "files"), file)

    async def get_files(self, person_id: str) -> Any:
        require(person_id, "Person ID is required")
        return await self._call(RequestDescriptor.get(self._url("people", person_id, "files")))

    async def delete_file(self, person_id: str, file_id: str) -> Any:
        require(person_id, "Person ID is required")
        require(file_id, "File ID is required")
        return await self._call(
            RequestDescriptor.delete(self._url("people", person_id, "files", file_id))
        )

    async def set_profile_photo(self, person_id: str, file_id: str) -> Any:
        return await self._attach_file(person_id, file_id, "profile-photo")

    async def set_resume(self, person_id: str, file_id: str) -> Any:
        return await self._attach_file(person_id, file_id, "resume")

    async def _attach_file(self, person_id: str, file_id: str, slot: str) -> Any:
        require(person_id, "Person ID is required")
        require(file_id, "File ID is required")
        response = await self._call(
            RequestDescriptor.post(self._url("people", person_id, slot), {"file_id": file_id})
        )
        self._cache.invalidate(BY_ID, {"id": person_id})
        return response

    def _invalidate_person(self, person_id: str) -> None:
        # Email lookups are keyed by address, which an update may change
        self._cache.invalidate(BY_ID, {"id": person_id})
        self._invalidate_families(BY_EMAIL, LIST, TEAM_MEMBERS, EMAIL_MARKETING_LIST)
