"""
End-to-end palette pipeline.

Download, open, extract, render. Each stage raises its own error kind;
nothing here catches them.
"""

import httpx

from repo_palette.archive import open_archive
from repo_palette.config import Settings
from repo_palette.extract import extract_colors
from repo_palette.fetcher import RepositoryFetcher
from repo_palette.logging import get_logger
from repo_palette.render import render_palette
from repo_palette.types.request import RequestOptions

logger = get_logger()


async def build_palette(
    options: RequestOptions,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Render the palette of a repository branch.

    Args:
        options: Owner, repository and branch
        settings: Service settings (default: built-in defaults)
        transport: Custom httpx transport for the download

    Returns:
        SVG document with one tile per distinct color

    Raises:
        FetchError: If the download fails
        ArchiveFormatError: If the download is not a zip archive
        StyleParseError: If any stylesheet fails to parse
    """
    async with RepositoryFetcher(settings, transport=transport) as fetcher:
        data = await fetcher.fetch(options)

    with await open_archive(data) as archive:
        colors = await extract_colors(archive.entries)

    logger.info(
        f"{options.owner}/{options.repo}@{options.branch}: "
        f"{len(archive.entries)} files, {len(colors)} colors"
    )
    return render_palette(colors)
