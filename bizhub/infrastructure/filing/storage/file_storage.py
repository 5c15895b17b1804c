"""Local disk storage for uploaded media."""

import logging
import uuid
from datetime import UTC, datetime
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from bizhub.application.filing.protocols import FileInfo, ReadableStream, StoredFile
from bizhub.config import UPLOAD_CHUNK_SIZE
from bizhub.exceptions import UploadTooLargeError

logger = logging.getLogger(__name__)


class FileStorage:
    """Stores uploaded files below the static files directory."""

    def __init__(self, root: Path, chunk_size: int = UPLOAD_CHUNK_SIZE) -> None:
        self.root = root
        self.chunk_size = chunk_size

    def _folder(self, folder: str) -> Path:
        path = self.root / folder
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _unique_name(extension: str) -> str:
        return f"{uuid.uuid4()}{extension.lower()}"

    async def save_stream_async(
        self, source: ReadableStream, folder: str, extension: str, max_bytes: int
    ) -> StoredFile:
        """
        Copy a stream to disk in fixed-size chunks.

        Args:
            source: Stream to copy
            folder: Folder below the storage root
            extension: File extension including the dot, may be empty
            max_bytes: Largest accepted size, inclusive

        Returns:
            The stored file

        Raises:
            UploadTooLargeError: If the stream is longer than max_bytes. The
                partial file is removed first.
        """
        file_name = self._unique_name(extension)
        file_path = self._folder(folder) / file_name
        written = 0

        handle = await run_in_threadpool(file_path.open, "wb")
        try:
            while chunk := await source.read(self.chunk_size):
                written += len(chunk)
                if written > max_bytes:
                    raise UploadTooLargeError(max_bytes)
                await run_in_threadpool(handle.write, chunk)
        except BaseException:
            handle.close()
            file_path.unlink(missing_ok=True)
            raise
        handle.close()

        logger.info(f"Saved upload: {file_path} ({written} bytes)")
        return StoredFile(file_name=file_name, relative_path=f"{folder}/{file_name}", size=written)

    async def save_bytes_async(self, content: bytes, folder: str, extension: str) -> StoredFile:
        """Write an in-memory payload to a uniquely named file."""
        file_name = self._unique_name(extension)
        file_path = self._folder(folder) / file_name
        await run_in_threadpool(file_path.write_bytes, content)
        logger.info(f"Saved file: {file_path}")
        return StoredFile(
            file_name=file_name, relative_path=f"{folder}/{file_name}", size=len(content)
        )

    def info(self, folder: str, file_name: str) -> FileInfo | None:
        """
        Get metadata of a stored file.

        Args:
            folder: Folder below the storage root
            file_name: Stored file name, path components are ignored

        Returns:
            FileInfo, or None if the file does not exist
        """
        file_path = self.root / folder / Path(file_name).name
        if not file_path.is_file():
            return None

        stat = file_path.stat()
        return FileInfo(
            name=file_path.name,
            length=stat.st_size,
            created_utc=datetime.fromtimestamp(stat.st_ctime, tz=UTC),
        )

    def delete(self, relative_path: str) -> bool:
        """
        Delete a stored file.

        Failures are logged and swallowed.

        Returns:
            True if file was deleted, False if not found or not deletable
        """
        file_path = self.root / relative_path
        if not file_path.is_file():
            logger.info(f"No file found at {file_path}")
            return False

        try:
            file_path.unlink()
            logger.info(f"Deleted file: {file_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to delete file {file_path}: {e!s}")
            return False
