"""Shared fixtures for repository palette tests."""

import io
import zipfile
from collections.abc import Callable

import httpx
import pytest

from repo_palette.config import Settings
from repo_palette.types.request import RequestOptions


def build_zip(files: dict[str, str], directories: list[str] | None = None) -> bytes:
    """Build an in-memory zip archive laid out like a GitHub zipball."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for directory in directories or []:
            zf.writestr(directory.rstrip("/") + "/", "")
        for path, content in files.items():
            zf.writestr(path, content)
    return buffer.getvalue()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def palette_settings() -> Settings:
    return Settings(api_url="https://api.github.test", token=None, timeout=5.0)


@pytest.fixture
def options() -> RequestOptions:
    return RequestOptions(owner="octo", repo="site", branch="main")


@pytest.fixture
def make_zip() -> Callable[..., bytes]:
    return build_zip


@pytest.fixture
def github() -> Callable[..., RecordingTransport]:
    """Factory for a fake archive host answering every request the same way."""

    def factory(
        body: bytes = b"",
        status_code: int = 200,
        error: Exception | None = None,
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise error
            return httpx.Response(status_code, content=body)

        return RecordingTransport(handler)

    return factory
