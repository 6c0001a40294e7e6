"""
Tests for repository archive downloads.
"""

import asyncio

import httpx
import pytest

from repo_palette.config import Settings
from repo_palette.exceptions import FetchError
from repo_palette.fetcher import RepositoryFetcher
from repo_palette.types.request import RequestOptions


def fetch(settings: Settings, options: RequestOptions, transport: httpx.MockTransport) -> bytes:
    async def run() -> bytes:
        async with RepositoryFetcher(settings, transport=transport) as fetcher:
            return await fetcher.fetch(options)

    return asyncio.run(run())


def test_archive_url(palette_settings: Settings, options: RequestOptions) -> None:
    fetcher = RepositoryFetcher(palette_settings)

    assert fetcher.archive_url(options) == "https://api.github.test/repos/octo/site/zipball/main"
    asyncio.run(fetcher.close())


def test_default_settings_target_github() -> None:
    fetcher = RepositoryFetcher()

    assert fetcher.archive_url(RequestOptions("o", "r", "b")) == (
        "https://api.github.com/repos/o/r/zipball/b"
    )
    asyncio.run(fetcher.close())


def test_fetch_returns_body(palette_settings, options, github) -> None:
    transport = github(body=b"PK\x05\x06zip-bytes")

    assert fetch(palette_settings, options, transport) == b"PK\x05\x06zip-bytes"
    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/repos/octo/site/zipball/main"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert "Authorization" not in request.headers


def test_token_sent_as_bearer(options, github) -> None:
    transport = github(body=b"zip")
    settings = Settings(api_url="https://api.github.test", token="ghp_secret")

    fetch(settings, options, transport)

    assert transport.requests[0].headers["Authorization"] == "Bearer ghp_secret"


def test_redirect_is_followed(palette_settings, options) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.github.test":
            return httpx.Response(
                302, headers={"Location": "https://codeload.github.test/octo/site/legacy.zip/main"}
            )
        return httpx.Response(200, content=b"archive")

    assert fetch(palette_settings, options, httpx.MockTransport(handler)) == b"archive"


@pytest.mark.parametrize("status_code", [404, 403, 500, 502])
def test_error_status_raises_fetch_error(palette_settings, options, github, status_code: int) -> None:
    with pytest.raises(FetchError) as exc_info:
        fetch(palette_settings, options, github(status_code=status_code, body=b'{"message": "Not Found"}'))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.code == f"HTTP_{status_code}"


def test_network_failure_raises_fetch_error_without_retry(palette_settings, options, github) -> None:
    transport = github(error=httpx.ConnectError("connection refused"))

    with pytest.raises(FetchError) as exc_info:
        fetch(palette_settings, options, transport)

    assert exc_info.value.code == "FETCH_ERROR"
    assert exc_info.value.status_code is None
    assert len(transport.requests) == 1
