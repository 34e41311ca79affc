"""Tests for WebsiteService."""

import json

import httpx
import pytest

from atlasclient import (
    AtlasClient,
    AtlasValidationError,
    ClientConfig,
    InMemoryCacheBackend,
    WebsiteQuery,
)


class Api:
    """Fake Atlas API answering every website endpoint."""

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
                        "total": 25,
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


class TestWebsiteReads:
    """Tests for cached website lookups."""

    @pytest.mark.asyncio
    async def test_list_and_get(self, client: AtlasClient, api: Api) -> None:
        """Test list and detail reads hit the website endpoints once."""
        await client.websites.list(WebsiteQuery(status="published", limit=5))
        await client.websites.list(WebsiteQuery(status="published", limit=5))
        await client.websites.get_by_id("site-2")
        await client.websites.get_by_id("site-2")

        assert api.gets() == ["/website", "/website/site-2"]
        assert api.requests[0].url.params["status"] == "published"
        assert api.requests[0].url.params["limit"] == "5"

    @pytest.mark.asyncio
    async def test_get_content_of_other_website(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test content can be paged for any website id."""
        response = await client.websites.get_content("site-9", {"page": 3})

        request = api.requests[0]
        assert request.url.path == "/website/site-9/content"
        assert request.url.params["offset"] == "20"
        assert response["pagination"]["page"] == 3
        assert response["pagination"]["totalPages"] == 3
        assert response["pagination"]["hasMore"] is False

    @pytest.mark.asyncio
    async def test_files_cached_per_type(self, client: AtlasClient, api: Api) -> None:
        """Test file lists are cached separately for each visibility."""
        await client.websites.get_files("site-1", "public")
        await client.websites.get_files("site-1", "public")
        await client.websites.get_files("site-1")

        assert [r.url.params["type"] for r in api.requests] == ["public", "all"]

    @pytest.mark.asyncio
    async def test_unknown_file_type_reads_all(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test an unrecognised file type falls back to all files."""
        await client.websites.get_files("site-1", "secret")
        await client.websites.get_files("site-1", "all")

        assert len(api.requests) == 1
        assert api.requests[0].url.params["type"] == "all"

    @pytest.mark.asyncio
    async def test_validation_before_network(self, client: AtlasClient, api: Api) -> None:
        """Test missing arguments fail without any request."""
        with pytest.raises(AtlasValidationError):
            await client.websites.get_by_id("")
        with pytest.raises(AtlasValidationError):
            await client.websites.create(None)
        with pytest.raises(AtlasValidationError):
            await client.websites.get_files(" ")
        with pytest.raises(AtlasValidationError):
            await client.websites.set_logo("site-1", "")

        assert api.requests == []


class TestWebsiteWrites:
    """Tests for website mutations and cache invalidation."""

    @pytest.mark.asyncio
    async def test_update_invalidates_website_and_lists(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test an update drops the website and every website list."""
        await client.websites.get_by_id("site-1")
        await client.websites.get_by_id("site-2")
        await client.websites.list()

        await client.websites.update("site-1", {"name": "Renamed"})

        await client.websites.get_by_id("site-1")
        await client.websites.get_by_id("site-2")
        await client.websites.list()

        assert api.gets() == [
            "/website/site-1",
            "/website/site-2",
            "/website",
            "/website/site-1",
            "/website",
        ]

    @pytest.mark.asyncio
    async def test_delete_invalidates_content_and_files(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test deleting a website drops its content and file lists."""
        await client.websites.get_content("site-1")
        await client.websites.get_files("site-1")

        await client.websites.delete("site-1")

        await client.websites.get_content("site-1")
        await client.websites.get_files("site-1")

        assert len(api.gets()) == 4
        assert [r.method for r in api.requests].count("DELETE") == 1

    @pytest.mark.asyncio
    async def test_file_changes_invalidate_file_lists(
        self, client: AtlasClient, api: Api
    ) -> None:
        """Test uploads and deletions refresh cached file lists."""
        await client.websites.get_files("site-1")
        await client.websites.upload_file("site-1", ("logo.png", b"\x89PNG", "image/png"))
        await client.websites.get_files("site-1")
        await client.websites.delete_file("site-1", "f1")
        await client.websites.get_files("site-1")

        assert [(r.method, r.url.path) for r in api.requests] == [
            ("GET", "/website/site-1/files"),
            ("POST", "/website/site-1/files"),
            ("GET", "/website/site-1/files"),
            ("DELETE", "/website/site-1/files/f1"),
            ("GET", "/website/site-1/files"),
        ]
        upload = api.requests[1]
        assert upload.headers["Content-Type"].startswith("multipart/form-data")
        assert b'filename="logo.png"' in upload.content

    @pytest.mark.asyncio
    async def test_logo_and_favicon(self, client: AtlasClient, api: Api) -> None:
        """Test branding assets post the file id and refresh the website."""
        await client.websites.get_by_id("site-1")
        await client.websites.set_logo("site-1", "f1")
        await client.websites.get_by_id("site-1")
        await client.websites.set_favicon("site-1", "f2")

        posts = [r.url.path for r in api.requests if r.method == "POST"]
        assert posts == ["/website/site-1/logo", "/website/site-1/favicon"]
        assert json.loads(api.requests[1].content) == {"file_id": "f1"}
        assert api.gets() == ["/website/site-1"] * 2
