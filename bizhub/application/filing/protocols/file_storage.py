"""Protocol for the media file store in the filing context."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class ReadableStream(Protocol):
    """Anything with an async read(size), e.g. starlette's UploadFile."""

    async def read(self, size: int = -1) -> bytes: ...


@dataclass(frozen=True)
class StoredFile:
    """A file written to the static files directory."""

    file_name: str
    relative_path: str
    size: int


@dataclass(frozen=True)
class FileInfo:
    """Metadata of a stored file."""

    name: str
    length: int
    created_utc: datetime


class FileStorageProtocol(Protocol):
    """Protocol for writing, inspecting and deleting uploaded files."""

    async def save_stream_async(
        self, source: ReadableStream, folder: str, extension: str, max_bytes: int
    ) -> StoredFile:
        """
        Copy a stream to a uniquely named file.

        Args:
            source: Stream to copy
            folder: Folder below the static files directory
            extension: File extension including the dot, may be empty
            max_bytes: Largest accepted size

        Returns:
            The stored file

        Raises:
            UploadTooLargeError: If the stream is longer than max_bytes
        """
        ...

    async def save_bytes_async(self, content: bytes, folder: str, extension: str) -> StoredFile:
        """Write an in-memory payload to a uniquely named file."""
        ...

    def info(self, folder: str, file_name: str) -> FileInfo | None:
        """Return file metadata, or None when the file does not exist."""
        ...

    def delete(self, relative_path: str) -> bool:
        """Best-effort delete. Returns False when nothing was removed."""
        ...
