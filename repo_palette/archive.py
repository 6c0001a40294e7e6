"""
Zip archive reading.

Opens a repository snapshot held in memory and exposes its files as
entries whose content is only decompressed on demand.
"""

import asyncio
import io
import zipfile
import zlib
from typing import Any

from repo_palette.exceptions import ArchiveFormatError

# Unsupported compression and encrypted members surface as the last two
_ZIP_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError)


class ArchiveEntry:
    """A file inside an archive, decompressed lazily."""

    def __init__(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> None:
        self._archive = archive
        self._info = info

    @property
    def path(self) -> str:
        """Path of the file inside the archive."""
        return self._info.filename

    @property
    def size(self) -> int:
        """Uncompressed size in bytes."""
        return self._info.file_size

    async def read_bytes(self) -> bytes:
        """
        Decompress the entry.

        Returns:
            Raw file content

        Raises:
            ArchiveFormatError: If the member is corrupt
        """
        try:
            return await asyncio.to_thread(self._archive.read, self._info)
        except _ZIP_ERRORS as e:
            raise ArchiveFormatError(f"Cannot read {self.path}: {e}") from e

    async def read_text(self) -> str:
        """Decompress the entry and decode it as UTF-8."""
        data = await self.read_bytes()
        return data.decode("utf-8-sig", errors="replace")

    def __repr__(self) -> str:
        return f"ArchiveEntry(path={self.path!r}, size={self.size})"


class Archive:
    """An opened zip archive."""

    def __init__(self, archive: zipfile.ZipFile) -> None:
        self._archive = archive
        self.entries = [
            ArchiveEntry(archive, info)
            for info in archive.infolist()
            if not info.is_dir()
        ]

    def close(self) -> None:
        """Release the underlying zip file."""
        self._archive.close()

    def __enter__(self) -> "Archive":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


async def open_archive(data: bytes) -> Archive:
    """
    Open a zip archive held in memory.

    Only the central directory is read here; member content stays
    compressed until an entry is read.

    Args:
        data: Archive bytes as downloaded

    Returns:
        Archive with entries in archive order, directories skipped

    Raises:
        ArchiveFormatError: If the bytes are not a zip archive
    """
    try:
        archive = await asyncio.to_thread(zipfile.ZipFile, io.BytesIO(data))
    except _ZIP_ERRORS as e:
        raise ArchiveFormatError(f"Not a zip archive: {e}") from e

    return Archive(archive)
