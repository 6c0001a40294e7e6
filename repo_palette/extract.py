"""
Color extraction across an archive.

Selects the stylesheets of a repository snapshot and merges the colors
they declare into one ordered set.
"""

import re
from collections.abc import Iterable

from repo_palette.archive import ArchiveEntry
from repo_palette.logging import log_stylesheet
from repo_palette.stylesheet import parse_stylesheet
from repo_palette.types.colors import ColorSet
from repo_palette.walker import collect_colors

STYLESHEET_PATTERN = re.compile(r"\.(css)($|\?)")


def is_stylesheet_path(path: str) -> bool:
    """Return True for ``.css`` paths, optionally followed by a query string."""
    return STYLESHEET_PATTERN.search(path) is not None


async def extract_colors(entries: Iterable[ArchiveEntry]) -> ColorSet:
    """
    Collect the distinct colors of every stylesheet in an archive.

    Stylesheets are read one at a time in archive order. Colors keep the
    position of their first appearance: earlier files first, and document
    order within a file.

    Args:
        entries: Archive entries in archive order

    Returns:
        ColorSet shared by all stylesheets

    Raises:
        StyleParseError: If any stylesheet fails to parse; no partial result is kept
        ArchiveFormatError: If a stylesheet cannot be decompressed
    """
    colors = ColorSet()

    for entry in entries:
        if not is_stylesheet_path(entry.path):
            continue

        text = await entry.read_text()
        found = collect_colors(parse_stylesheet(text, path=entry.path))

        seen = len(colors)
        colors.update(found)
        log_stylesheet(entry.path, len(found), len(colors) - seen)

    return colors
