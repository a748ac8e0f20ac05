"""Integration tests for AlbumsAPI against mocked HTTP.

Uses pytest-httpx to intercept the real httpx transport, so requests go
through the full client stack (RequestSpec, httpx, status classification,
JSON parsing, mapping).

Tests cover:
- list_albums / list_albums_by_user / get_album / create_album happy paths
- Exact request shape (method, URL, single userId query, JSON body)
- Non-2xx responses become HTTP failures with the status code
- Malformed or mis-shaped 2xx bodies become DECODE failures
- Transport errors become NETWORK failures
- Invalid arguments fail locally without any request
"""

import asyncio
import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from src.core.enums import ErrorKind
from src.core.result import Failure, Success
from src.domain.entities.album import Album
from src.infrastructure.albums.api.albums_api import AlbumsAPI
from tests.utils.payloads import album_payload


@pytest.fixture
def api(base_url) -> AlbumsAPI:
    return AlbumsAPI(base_url=base_url, timeout=5.0)


@pytest.mark.integration
class TestListAlbums:
    """Test AlbumsAPI.list_albums."""

    @pytest.mark.asyncio
    async def test_returns_albums_in_server_order(
        self, api, base_url, albums_payload, httpx_mock: HTTPXMock
    ):
        """Test a JSON array maps to albums in order."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums", json=albums_payload
        )

        result = await api.list_albums()

        assert isinstance(result, Success)
        assert result.status_code == 200
        assert result.value == [
            Album(id=1, title="quidem molestiae enim", user_id=1),
            Album(id=2, title="sunt qui excepturi placeat culpa", user_id=1),
        ]

        request = httpx_mock.get_request()
        assert request.url.params == httpx.QueryParams()
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_empty_array(self, api, base_url, httpx_mock: HTTPXMock):
        """Test [] is a successful empty collection."""
        httpx_mock.add_response(method="GET", url=f"{base_url}/albums", json=[])

        result = await api.list_albums()

        assert isinstance(result, Success)
        assert result.value == []
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_empty_body(self, api, base_url, httpx_mock: HTTPXMock):
        """Test an empty 2xx body is an empty collection."""
        httpx_mock.add_response(method="GET", url=f"{base_url}/albums", content=b"")

        result = await api.list_albums()

        assert isinstance(result, Success)
        assert result.value == []

    @pytest.mark.asyncio
    async def test_object_instead_of_array(self, api, base_url, httpx_mock: HTTPXMock):
        """Test an object body for a collection is a DECODE failure."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums", json=album_payload()
        )

        result = await api.list_albums()

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.DECODE
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_element_missing_field(self, api, base_url, httpx_mock: HTTPXMock):
        """Test one incomplete element fails the whole collection."""
        httpx_mock.add_response(
            method="GET",
            url=f"{base_url}/albums",
            json=[album_payload(1), {"id": 2, "title": "no owner"}],
        )

        result = await api.list_albums()

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.DECODE
        assert "userId" in result.message

    @pytest.mark.asyncio
    async def test_server_error(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a 500 is an HTTP failure carrying 500."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums", status_code=500, text="oops"
        )

        result = await api.list_albums()

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.HTTP
        assert result.status_code == 500
        assert result.error.response_body == "oops"
        assert result.error.operation == "list_albums"

    @pytest.mark.asyncio
    async def test_rate_limited(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a 429 reports Retry-After without retrying."""
        httpx_mock.add_response(
            method="GET",
            url=f"{base_url}/albums",
            status_code=429,
            headers={"Retry-After": "30"},
        )

        result = await api.list_albums()

        assert isinstance(result, Failure)
        assert result.status_code == 429
        assert result.error.retry_after == 30
        assert len(httpx_mock.get_requests()) == 1


@pytest.mark.integration
class TestListAlbumsByUser:
    """Test AlbumsAPI.list_albums_by_user."""

    @pytest.mark.asyncio
    async def test_sends_single_user_id_param(
        self, api, base_url, albums_payload, httpx_mock: HTTPXMock
    ):
        """Test the request carries exactly userId=<id>."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums?userId=1", json=albums_payload
        )

        result = await api.list_albums_by_user(1)

        assert isinstance(result, Success)
        assert all(album.user_id == 1 for album in result.value)

        request = httpx_mock.get_request()
        assert request.url.path == "/albums"
        assert list(request.url.params.multi_items()) == [("userId", "1")]

    @pytest.mark.asyncio
    async def test_user_with_no_albums(self, api, base_url, httpx_mock: HTTPXMock):
        """Test an unknown user yields an empty collection."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums?userId=0", json=[]
        )

        result = await api.list_albums_by_user(0)

        assert isinstance(result, Success)
        assert result.value == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [-1, True, "1", 1.0, None])
    async def test_invalid_user_id_sends_nothing(
        self, api, user_id, httpx_mock: HTTPXMock
    ):
        """Test invalid ids fail locally with INVALID_ARGUMENT."""
        result = await api.list_albums_by_user(user_id)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.INVALID_ARGUMENT
        assert result.status_code is None
        assert result.error.field == "user_id"
        assert httpx_mock.get_requests() == []


@pytest.mark.integration
class TestGetAlbum:
    """Test AlbumsAPI.get_album."""

    @pytest.mark.asyncio
    async def test_returns_album(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a JSON object maps to the album."""
        httpx_mock.add_response(
            method="GET",
            url=f"{base_url}/albums/3",
            json=album_payload(3, "omnis laborum odio", 1),
        )

        result = await api.get_album(3)

        assert isinstance(result, Success)
        assert result.value == Album(id=3, title="omnis laborum odio", user_id=1)
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_not_found(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a 404 with an empty object body is an HTTP failure."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums/999", status_code=404, json={}
        )

        result = await api.get_album(999)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.HTTP
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_json(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a 200 with malformed JSON is a DECODE failure carrying 200."""
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums/3", content=b'{"id": 3, "title":'
        )

        result = await api.get_album(3)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.DECODE
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_empty_body(self, api, base_url, httpx_mock: HTTPXMock):
        """Test an empty 2xx body for a single album is a DECODE failure."""
        httpx_mock.add_response(method="GET", url=f"{base_url}/albums/3", content=b"")

        result = await api.get_album(3)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.DECODE

    @pytest.mark.asyncio
    async def test_wrong_type(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a string id is not coerced."""
        httpx_mock.add_response(
            method="GET",
            url=f"{base_url}/albums/3",
            json={"id": "3", "title": "t", "userId": 1},
        )

        result = await api.get_album(3)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.DECODE
        assert result.error.operation == "get_album"

    @pytest.mark.asyncio
    async def test_timeout(self, api, httpx_mock: HTTPXMock):
        """Test a timeout is a NETWORK failure without a status code."""
        httpx_mock.add_exception(httpx.ReadTimeout("Read timed out"))

        result = await api.get_album(3)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.NETWORK
        assert result.status_code is None
        assert result.error.is_timeout is True

    @pytest.mark.asyncio
    async def test_connection_refused(self, api, httpx_mock: HTTPXMock):
        """Test a connection error is a NETWORK failure."""
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        result = await api.get_album(3)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.NETWORK
        assert result.error.is_timeout is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("album_id", [-3, False, "3"])
    async def test_invalid_album_id_sends_nothing(
        self, api, album_id, httpx_mock: HTTPXMock
    ):
        """Test invalid ids fail locally with INVALID_ARGUMENT."""
        result = await api.get_album(album_id)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.INVALID_ARGUMENT
        assert httpx_mock.get_requests() == []


@pytest.mark.integration
class TestCreateAlbum:
    """Test AlbumsAPI.create_album."""

    @pytest.mark.asyncio
    async def test_returns_created_album(self, api, base_url, httpx_mock: HTTPXMock):
        """Test the server's album, with its id, is returned with 201."""
        httpx_mock.add_response(
            method="POST",
            url=f"{base_url}/albums",
            status_code=201,
            json=album_payload(101, "My Title", 5),
        )

        result = await api.create_album(Album(id=0, title="My Title", user_id=5))

        assert isinstance(result, Success)
        assert result.status_code == 201
        assert result.value == Album(id=101, title="My Title", user_id=5)

        request = httpx_mock.get_request()
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"id": 0, "title": "My Title", "userId": 5}

    @pytest.mark.asyncio
    async def test_server_rejects(self, api, base_url, httpx_mock: HTTPXMock):
        """Test a 400 is an HTTP failure."""
        httpx_mock.add_response(
            method="POST", url=f"{base_url}/albums", status_code=400, json={}
        )

        result = await api.create_album(Album(id=0, title="My Title", user_id=5))

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.HTTP
        assert result.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   "])
    async def test_blank_title_is_sent(
        self, api, base_url, title, httpx_mock: HTTPXMock
    ):
        """Test a blank title is a valid string and goes to the server."""
        httpx_mock.add_response(
            method="POST",
            url=f"{base_url}/albums",
            status_code=201,
            json=album_payload(101, title, 5),
        )

        result = await api.create_album(Album(id=0, title=title, user_id=5))

        assert isinstance(result, Success)
        assert result.value == Album(id=101, title=title, user_id=5)
        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"id": 0, "title": title, "userId": 5}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("draft", "field"),
        [
            (Album(id=0, title=5, user_id=5), "title"),
            (Album(id=0, title="t", user_id=-5), "user_id"),
            (Album(id="0", title="t", user_id=5), "id"),
            ({"id": 0, "title": "t", "userId": 5}, "draft"),
        ],
    )
    async def test_invalid_draft_sends_nothing(
        self, api, draft, field, httpx_mock: HTTPXMock
    ):
        """Test invalid drafts fail locally with INVALID_ARGUMENT."""
        result = await api.create_album(draft)

        assert isinstance(result, Failure)
        assert result.kind is ErrorKind.INVALID_ARGUMENT
        assert result.error.field == field
        assert httpx_mock.get_requests() == []


@pytest.mark.integration
class TestConcurrentCalls:
    """Test one client shared by concurrent operations."""

    @pytest.mark.asyncio
    async def test_gather_on_shared_client(
        self, api, base_url, albums_payload, httpx_mock: HTTPXMock
    ):
        """Test concurrent calls each get their own response."""
        httpx_mock.add_response(
            method="POST",
            url=f"{base_url}/albums",
            status_code=201,
            json=album_payload(101, "My Title", 5),
        )
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums", json=albums_payload
        )
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums?userId=1", json=albums_payload[:1]
        )
        httpx_mock.add_response(
            method="GET", url=f"{base_url}/albums/3", status_code=404, json={}
        )

        created, all_albums, user_albums, single = await asyncio.gather(
            api.create_album(Album(id=0, title="My Title", user_id=5)),
            api.list_albums(),
            api.list_albums_by_user(1),
            api.get_album(3),
        )

        assert created.value.id == 101
        assert len(all_albums.value) == 2
        assert len(user_albums.value) == 1
        assert isinstance(single, Failure)
        assert single.status_code == 404
        assert len(httpx_mock.get_requests()) == 4
