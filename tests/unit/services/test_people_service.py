"""Tests for PeopleService."""

import json

import httpx
import pytest

from atlasclient import (
    AtlasClient,
    AtlasValidationError,
    ClientConfig,
    InMemoryCacheBackend,
    PersonQuery,
)


class Api:
    """Fake Atlas API answering every people endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        params = request.url.params
        if request.method == "GET" and "limit" in params:
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "data": [],
                    "pagination": {
                        "total": 3,
                        "limit": int(params["limit"]),
                        "offset": int(params["offset"]),
                    },
                },
            )
        return httpx.Response(200, json={"success": True, "data": {"path": request.url.path}})

    def gets(self) -> list[str]:
        return [r.url.path for r in self.requests if r.method == "GET"]


@pytest.fixture
def api() -> Api:
    """Create the fake API."""
    return Api()


@pytest.fixture
def client(api: Api, clock) -> AtlasClient:
    """Create a client talking to the fake API."""
    config = ClientConfig(api_url="https://api.test", website_id="site-1", retries=0)
    return AtlasClient(
        config,
        backend=InMemoryCacheBackend(timer=clock),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(api)),
    )


class TestPeopleReads:
    """Tests for cached people lookups."""

    @pytest.mark.asyncio
    async def test_list_sends_api_param_names(self, client: AtlasClient, api: Api) -> None:
        """Test ordering options use the API's parameter names."""
        response = await client.people.list(
            PersonQuery(is_team_member=True, order_by="lastname", order_direction="asc")
        )

        params = api.requests[0].url.params
        assert params["is_team_member"] == "true"
        assert params["orderBy"] == "lastname"
        assert params["orderDirection"] == "asc"
        assert params["limit"] == "10"
        assert params["offset"] == "0"
        assert response["pagination"]["totalPages"] == 1
        assert response["pagination"]["hasMore"] is False

    @pytest.mark.asyncio
    async def test_get_by_email(self, client: AtlasClient, api: Api) -> None:
        """Test email lookups pass the address as a query parameter."""
        await client.people.get_by_email("jan+test@example.com")
        await client.people.get_by_email("jan+test@example.com")

        assert len(api.requests) == 1
        assert api.requests[0].url.path == "/people/email"
        assert api.requests[0].url.params["email"] == "jan+test@example.com"

    @pytest.mark.asyncio
    async def test_website_scoped_lists(self, client: AtlasClient, api: Api) -> None:
        """Test team members and applications are read per website."""
        await client.people.get_team_members("site-2", {"page": 2})
        await client.people.get_applications("site-2")
        await client.people.get_team_members("site-2", {"page": 2})

        assert api.gets() == ["/people/site-2/team-members", "/people/site-2/applications"]
        assert api.requests[0].url.params["offset"] == "10"

    @pytest.mark.asyncio
    async def test_email_marketing_list_cached_twice_as_long(
        self, client: AtlasClient, api: Api, clock
    ) -> None:
        """Test the marketing list outlives the usual cache duration."""
        await client.people.get_email_marketing_list()
        clock.advance(9 * 60)
        await client.people.get_email_marketing_list()
        clock.advance(2 * 60)
        await client.people.get_email_marketing_list()

        assert api.gets() == ["/people/marketing/email-list"] * 2

    @pytest.mark.asyncio
    async def test_validation_before_network(self, client: AtlasClient, api: Api) -> None:
        """Test missing arguments fail without any request."""
        with pytest.raises(AtlasValidationError):
            await client.people.get_by_id("")
        with pytest.raises(AtlasValidationError):
            await client.people.get_by_email("")
        with pytest.raises(AtlasValidationError):
            await client.people.get_team_members("")
        with pytest.raises(AtlasValidationError):
            await client.people.sync_from_carerix("")
        with pytest.raises(AtlasValidationError):
            await client.people.set_resume("p1", "")

        assert api.requests == []


class TestPeopleWrites:
    """Tests for people mutations and cache invalidation."""

    @pytest.mark.asyncio
    async def test_create_posts_to_create_endpoint(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test a create drops cached lists."""
        await client.people.list()

        await client.people.create({"firstname": "Jan", "email": "jan@example.com"})
        await client.people.list()

        post = [r for r in api.requests if r.method == "POST"][0]
        assert post.url.path == "/people/create"
        assert api.gets() == ["/people", "/people"]

    @pytest.mark.asyncio
    async def test_update_invalidates_person(self, client: AtlasClient, api: Api) -> None:
        """Test an update drops the person, email lookups and team lists."""
        await client.people.get_by_id("p1")
        await client.people.get_by_id("p2")
        await client.people.get_by_email("jan@example.com")
        await client.people.get_team_members("site-1")

        await client.people.update("p1", {"email": "new@example.com"})

        await client.people.get_by_id("p1")
        await client.people.get_by_id("p2")
        await client.people.get_by_email("jan@example.com")
        await client.people.get_team_members("site-1")

        assert api.gets() == [
            "/people/p1",
            "/people/p2",
            "/people/email",
            "/people/site-1/team-members",
            "/people/p1",
            "/people/email",
            "/people/site-1/team-members",
        ]

    @pytest.mark.asyncio
    async def test_application_invalidates_applications(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test a new application drops cached application lists."""
        await client.people.get_applications("site-1")
        await client.people.get_team_members("site-1")

        await client.people.submit_application({"email": "a@example.com", "publication_id": "x"})

        await client.people.get_applications("site-1")
        await client.people.get_team_members("site-1")

        assert api.gets() == [
            "/people/site-1/applications",
            "/people/site-1/team-members",
            "/people/site-1/applications",
        ]

    @pytest.mark.asyncio
    async def test_relationship_invalidates_team_members(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test relationship changes drop every team member list."""
        await client.people.get_team_members("site-1")
        await client.people.get_team_members("site-1", {"page": 2})

        await client.people.upsert_website_relationship({"person_id": "p1", "website_id": "site-1"})

        await client.people.get_team_members("site-1")
        await client.people.get_team_members("site-1", {"page": 2})

        assert len(api.gets()) == 4

    @pytest.mark.asyncio
    async def test_sync_clears_cache(self, client: AtlasClient, api: Api) -> None:
        """Test a Carerix sync drops every cached response."""
        await client.people.get_by_id("p1")

        await client.people.sync_from_carerix("cx-1")

        assert client.cache.stats["size"] == 0
        post = api.requests[-1]
        assert post.url.path == "/people/sync/carerix"
        assert json.loads(post.content) == {"carerix_id": "cx-1"}

    @pytest.mark.asyncio
    async def test_profile_photo_and_resume(self, client: AtlasClient, api: Api) -> None:
        """Test attaching files posts the file id and refreshes the person."""
        await client.people.get_by_id("p1")
        await client.people.set_profile_photo("p1", "f1")
        await client.people.get_by_id("p1")
        await client.people.set_resume("p1", "f2")
        await client.people.get_by_id("p1")

        posts = [(r.url.path, json.loads(r.content)) for r in api.requests if r.method == "POST"]
        assert posts == [
            ("/people/p1/profile-photo", {"file_id": "f1"}),
            ("/people/p1/resume", {"file_id": "f2"}),
        ]
        assert api.gets() == ["/people/p1"] * 3

    @pytest.mark.asyncio
    async def test_file_endpoints(self, client: AtlasClient, api: Api) -> None:
        """Test uploading, listing and deleting person files."""
        await client.people.upload_file("p1", b"resume text")
        await client.people.get_files("p1")
        await client.people.delete_file("p1", "f1")

        assert [(r.method, r.url.path) for r in api.requests] == [
            ("POST", "/people/p1/files"),
            ("GET", "/people/p1/files"),
            ("DELETE", "/people/p1/files/f1"),
        ]
        assert api.requests[0].headers["Content-Type"].startswith("multipart/form-data")
