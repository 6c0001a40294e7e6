"""
Repository archive download.

Fetches the zip snapshot of a repository branch from the GitHub REST API
using an httpx async client.
"""

import time
from typing import Any

import httpx

from repo_palette.config import Settings
from repo_palette.exceptions import FetchError
from repo_palette.logging import log_http_request, log_http_response
from repo_palette.types.request import RequestOptions

USER_AGENT = "repo-palette"


class RepositoryFetcher:
    """
    Async downloader for repository archives.

    Handles:
    - Building the "download a repository archive (zip)" URL
    - Following the redirect to the archive host
    - Mapping transport failures and error statuses to FetchError

    Requests are never retried.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            settings: Service settings (API URL, token, timeout)
            transport: Custom httpx transport, e.g. httpx.MockTransport in tests
        """
        self.settings = settings or Settings()

        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if self.settings.token:
            headers["Authorization"] = f"Bearer {self.settings.token}"

        self._client = httpx.AsyncClient(
            timeout=self.settings.timeout,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "RepositoryFetcher":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def archive_url(self, options: RequestOptions) -> str:
        """Build the zipball URL for a repository branch."""
        return (
            f"{self.settings.api_url}/repos/"
            f"{options.owner}/{options.repo}/zipball/{options.branch}"
        )

    async def fetch(self, options: RequestOptions) -> bytes:
        """
        Download the archive of a repository branch.

        The body is returned as-is; format problems surface when the
        archive is opened.

        Args:
            options: Owner, repository and branch to download

        Returns:
            Archive bytes

        Raises:
            FetchError: On network failure or a non-success response
        """
        url = self.archive_url(options)
        log_http_request("GET", url, dict(self._client.headers))

        start = time.monotonic()
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as e:
            raise FetchError("FETCH_ERROR", f"GET {url} failed: {e}") from e

        log_http_response(
            response.status_code,
            str(response.url),
            content_length=len(response.content),
            elapsed_ms=(time.monotonic() - start) * 1000,
        )

        if response.status_code >= 400:
            raise FetchError(
                f"HTTP_{response.status_code}",
                f"GET {url} returned {response.status_code}",
                status_code=response.status_code,
            )

        return response.content
