"""Tests for the page and API fetchers."""

import httpx
import pytest

from linkmeta.errors import IdentifierNotFound, NotFound, TransportFailure
from linkmeta.fetchers import GithubApiFetcher, PageFetcher, YoutubeApiFetcher

from .conftest import html_response, json_response


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_page_fetch_sends_browser_user_agent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return html_response("<title>ok</title>")

    async with _client(handler) as client:
        body = await PageFetcher("Mozilla/5.0 test").fetch("https://example.org/page", client)

    assert body == "<title>ok</title>"
    assert str(seen[0].url) == "https://example.org/page"
    assert seen[0].headers["User-Agent"] == "Mozilla/5.0 test"


@pytest.mark.asyncio
async def test_page_fetch_404_is_not_found() -> None:
    async with _client(lambda request: html_response("gone", 404)) as client:
        with pytest.raises(NotFound):
            await PageFetcher().fetch("https://example.org/page", client)


@pytest.mark.asyncio
async def test_page_fetch_other_errors_are_lenient() -> None:
    async with _client(lambda request: html_response("<title>Oops</title>", 503)) as client:
        body = await PageFetcher().fetch("https://example.org/page", client)
    assert body == "<title>Oops</title>"


@pytest.mark.asyncio
async def test_page_fetch_follows_redirects() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.org/new"})
        return html_response("<title>new</title>")

    async with _client(handler) as client:
        body = await PageFetcher().fetch("https://example.org/old", client)
    assert body == "<title>new</title>"


@pytest.mark.asyncio
async def test_page_fetch_connection_error_is_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(TransportFailure):
            await PageFetcher().fetch("https://example.org/page", client)


@pytest.mark.asyncio
async def test_github_fetch_templates_owner_and_repo() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response({"name": "httpx"})

    async with _client(handler) as client:
        body = await GithubApiFetcher("secret").fetch("https://github.com/encode/httpx/pulls", client)

    assert '"httpx"' in body
    assert str(seen[0].url) == "https://api.github.com/repos/encode/httpx"
    assert seen[0].headers["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_github_fetch_without_token_sends_no_auth_header() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response({})

    async with _client(handler) as client:
        await GithubApiFetcher("").fetch("https://github.com/encode/httpx", client)
    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_github_fetch_auth_error_is_transport_failure() -> None:
    async with _client(lambda request: json_response({"message": "Bad credentials"}, 401)) as client:
        with pytest.raises(TransportFailure):
            await GithubApiFetcher("wrong").fetch("https://github.com/encode/httpx", client)


@pytest.mark.asyncio
async def test_github_fetch_needs_identifier_before_any_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    async with _client(handler) as client:
        with pytest.raises(IdentifierNotFound):
            await GithubApiFetcher("secret").fetch("https://github.com/encode", client)


@pytest.mark.asyncio
async def test_youtube_fetch_passes_id_and_key() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response({"items": []})

    async with _client(handler) as client:
        await YoutubeApiFetcher("yt-key").fetch("https://www.youtube.com/watch?v=abc123", client)

    url = seen[0].url
    assert url.host == "www.googleapis.com"
    assert url.path == "/youtube/v3/videos"
    assert url.params["id"] == "abc123"
    assert url.params["key"] == "yt-key"
    assert url.params["part"] == "statistics,contentDetails,snippet"


@pytest.mark.asyncio
async def test_youtube_fetch_missing_id() -> None:
    async with _client(lambda request: json_response({})) as client:
        with pytest.raises(IdentifierNotFound):
            await YoutubeApiFetcher("yt-key").fetch("https://www.youtube.com/feed/trending", client)
