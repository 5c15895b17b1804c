"""Tests for bulk uploads."""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import pytest

from bizhub.application.common.result import Result
from bizhub.application.filing.services import ParallelUploader, ProgressStream, UploadProgress
from bizhub.application.filing.uploads import FileUpload
from bizhub.exceptions import UploadTooLargeError


class ChunkedStream:
    """In-memory stream that hands out fixed-size chunks."""

    def __init__(self, content: bytes, chunk_size: int = 4) -> None:
        self.content = content
        self.chunk_size = chunk_size
        self.position = 0

    async def read(self, size: int = -1) -> bytes:
        await asyncio.sleep(0)
        end = self.position + self.chunk_size
        chunk = self.content[self.position : end]
        self.position = end
        return chunk


class ReadingService:
    """Reads the whole stream, failing for names it was told to reject."""

    def __init__(self, fail_names: set[str] | None = None) -> None:
        self.fail_names = fail_names or set()

    async def upload_stream_async(self, upload: FileUpload, max_bytes: int) -> Result[Any]:
        if upload.file_name in self.fail_names:
            raise RuntimeError("disk full")
        total = 0
        while chunk := await upload.stream.read(1024):
            total += len(chunk)
        return Result.success({"file_name": upload.file_name, "size": total})


@asynccontextmanager
async def fake_session():
    yield object()


def make_uploader(service: ReadingService, max_bytes: int = 100, concurrency: int = 2):
    return ParallelUploader(
        session_factory=fake_session,  # type: ignore[arg-type]
        service_factory=lambda session: service,
        max_bytes=max_bytes,
        max_concurrency=concurrency,
    )


def upload(name: str, content: bytes, declared: bool = True) -> FileUpload:
    return FileUpload(name, None, ChunkedStream(content), len(content) if declared else None)


class TestProgressStream:
    @pytest.mark.asyncio
    async def test_reports_progress_after_each_chunk(self) -> None:
        reported: list[UploadProgress] = []
        stream = ProgressStream(ChunkedStream(b"x" * 10), "a.bin", 100, 10, reported.append)

        while await stream.read(4):
            pass

        assert [progress.bytes_read for progress in reported] == [4, 8, 10]
        assert reported[-1].percent == 100

    @pytest.mark.asyncio
    async def test_exact_limit_passes_and_one_more_byte_fails(self) -> None:
        exact = ProgressStream(ChunkedStream(b"x" * 8), "exact.bin", 8)
        while await exact.read():
            pass
        assert exact.bytes_read == 8

        over = ProgressStream(ChunkedStream(b"x" * 9), "over.bin", 8)
        with pytest.raises(UploadTooLargeError):
            while await over.read():
                pass

    def test_percent_is_unknown_without_total(self) -> None:
        assert UploadProgress("a.bin", 10, None).percent is None


class TestParallelUploader:
    def test_rejects_zero_concurrency(self) -> None:
        with pytest.raises(ValueError):
            make_uploader(ReadingService(), concurrency=0)

    @pytest.mark.asyncio
    async def test_outcomes_follow_input_order(self) -> None:
        uploader = make_uploader(ReadingService())
        uploads = [upload(f"file{i}.bin", b"y" * (i + 1)) for i in range(5)]

        outcomes = await uploader.upload_all_async(uploads)

        assert [outcome.file_name for outcome in outcomes] == [u.file_name for u in uploads]
        assert all(outcome.succeeded for outcome in outcomes)
        assert outcomes[4].result.data == {"file_name": "file4.bin", "size": 5}

    @pytest.mark.asyncio
    async def test_one_failure_does_not_abort_siblings(self) -> None:
        uploader = make_uploader(ReadingService(fail_names={"bad.bin"}))

        outcomes = await uploader.upload_all_async(
            [upload("good1.bin", b"a"), upload("bad.bin", b"b"), upload("good2.bin", b"c")]
        )

        assert [outcome.succeeded for outcome in outcomes] == [True, False, True]
        assert "disk full" in outcomes[1].result.messages[0]

    @pytest.mark.asyncio
    async def test_declared_oversize_is_rejected_before_reading(self) -> None:
        uploader = make_uploader(ReadingService(), max_bytes=4)
        too_big = upload("big.bin", b"z" * 5)

        outcomes = await uploader.upload_all_async([too_big])

        assert not outcomes[0].succeeded
        assert outcomes[0].result.messages == ["File too large (max 4 bytes)"]
        assert too_big.stream.position == 0  # type: ignore[attr-defined]

    @pytest.mark.asyncio
    async def test_undeclared_oversize_is_caught_while_streaming(self) -> None:
        uploader = make_uploader(ReadingService(), max_bytes=4)

        outcomes = await uploader.upload_all_async([upload("big.bin", b"z" * 9, declared=False)])

        assert not outcomes[0].succeeded
        assert outcomes[0].result.messages == ["File too large (max 4 bytes)"]

    @pytest.mark.asyncio
    async def test_progress_is_reported_per_file(self) -> None:
        reported: list[UploadProgress] = []
        uploader = make_uploader(ReadingService())

        await uploader.upload_all_async(
            [upload("a.bin", b"a" * 6), upload("b.bin", b"b" * 3)], on_progress=reported.append
        )

        finals = {p.file_name: p.bytes_read for p in reported if p.percent == 100}
        assert finals == {"a.bin": 6, "b.bin": 3}
