"""
Bulk uploads with bounded concurrency and byte-level progress.

Each file is uploaded in its own unit of work (own session, own repository
and service), so one file failing never affects its siblings.

Example:
    uploader = ParallelUploader(
        session_factory,
        video_service_factory(storage, settings),
        max_bytes=settings.MAX_VIDEO_STREAM_BYTES,
        max_concurrency=settings.UPLOAD_CONCURRENCY,
    )
    outcomes = await uploader.upload_all_async(
        uploads, on_progress=lambda p: print(p.file_name, p.percent)
    )
"""

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Protocol

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bizhub.application.common.result import Result
from bizhub.application.filing.protocols import ReadableStream
from bizhub.application.filing.uploads import FileUpload
from bizhub.exceptions import BizhubError, UploadTooLargeError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UploadProgress:
    """Progress of one file, reported after every chunk read."""

    file_name: str
    bytes_read: int
    total_bytes: int | None

    @property
    def percent(self) -> int | None:
        if not self.total_bytes:
            return None
        return min(100, self.bytes_read * 100 // self.total_bytes)


ProgressCallback = Callable[[UploadProgress], None]


class ProgressStream:
    """Wraps a stream, counting bytes, enforcing a limit and reporting progress."""

    def __init__(
        self,
        inner: ReadableStream,
        file_name: str,
        max_bytes: int,
        total_bytes: int | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.inner = inner
        self.file_name = file_name
        self.max_bytes = max_bytes
        self.total_bytes = total_bytes
        self.on_progress = on_progress
        self.bytes_read = 0

    async def read(self, size: int = -1) -> bytes:
        chunk = await self.inner.read(size)
        if not chunk:
            return chunk

        self.bytes_read += len(chunk)
        if self.bytes_read > self.max_bytes:
            raise UploadTooLargeError(self.max_bytes)
        if self.on_progress is not None:
            self.on_progress(UploadProgress(self.file_name, self.bytes_read, self.total_bytes))
        return chunk


class StreamUploadService(Protocol):
    """A service that can store one upload within a byte limit."""

    async def upload_stream_async(self, upload: FileUpload, max_bytes: int) -> Result[Any]: ...


ServiceFactory = Callable[[AsyncSession], StreamUploadService]


@dataclass(frozen=True)
class UploadOutcome:
    """Result of one file in a bulk upload."""

    file_name: str
    result: Result[Any]

    @property
    def succeeded(self) -> bool:
        return self.result.succeeded


class ParallelUploader:
    """Uploads many files concurrently, at most max_concurrency at a time."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        service_factory: ServiceFactory,
        max_bytes: int,
        max_concurrency: int = 4,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("Concurrency must be at least 1")
        self.session_factory = session_factory
        self.service_factory = service_factory
        self.max_bytes = max_bytes
        self.max_concurrency = max_concurrency

    async def upload_all_async(
        self, uploads: Sequence[FileUpload], on_progress: ProgressCallback | None = None
    ) -> list[UploadOutcome]:
        """
        Upload every file and report each outcome.

        Args:
            uploads: Files to upload
            on_progress: Called with byte-level progress of each file

        Returns:
            One outcome per upload, in input order
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(upload: FileUpload) -> UploadOutcome:
            async with semaphore:
                return await self._upload_one_async(upload, on_progress)

        outcomes = await asyncio.gather(*(run(upload) for upload in uploads))

        logger.info(
            "bulk_upload_finished",
            total=len(outcomes),
            failed=sum(1 for outcome in outcomes if not outcome.succeeded),
        )
        return list(outcomes)

    async def _upload_one_async(
        self, upload: FileUpload, on_progress: ProgressCallback | None
    ) -> UploadOutcome:
        if upload.size is not None and upload.size > self.max_bytes:
            return UploadOutcome(
                upload.file_name, Result.fail(UploadTooLargeError(self.max_bytes).message)
            )

        tracked = replace(
            upload,
            stream=ProgressStream(
                upload.stream, upload.file_name, self.max_bytes, upload.size, on_progress
            ),
        )
        try:
            async with self.session_factory() as session:
                result = await self.service_factory(session).upload_stream_async(
                    tracked, self.max_bytes
                )
        except BizhubError as e:
            result = Result.fail(e.message)
        except Exception as e:
            logger.error("upload_failed", file_name=upload.file_name, error=str(e), exc_info=True)
            result = Result.fail(f"Upload of {upload.file_name} failed: {e!s}")

        if not result.succeeded:
            logger.warning("upload_rejected", file_name=upload.file_name, messages=result.messages)
        return UploadOutcome(upload.file_name, result)
