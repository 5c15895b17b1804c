"""Tests for the local disk file store."""

from pathlib import Path

import pytest

from bizhub.exceptions import UploadTooLargeError
from bizhub.infrastructure.filing.storage import FileStorage


class BytesStream:
    def __init__(self, content: bytes) -> None:
        self.content = content
        self.position = 0

    async def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self.content)
        chunk = self.content[self.position : self.position + size]
        self.position += len(chunk)
        return chunk


class TestFileStorage:
    @pytest.fixture
    def storage(self, tmp_path: Path) -> FileStorage:
        return FileStorage(tmp_path, chunk_size=3)

    @pytest.mark.asyncio
    async def test_saves_stream_under_unique_name(self, storage: FileStorage) -> None:
        stored = await storage.save_stream_async(BytesStream(b"hello"), "Videos", ".MP4", 10)

        assert stored.size == 5
        assert stored.file_name.endswith(".mp4")
        assert stored.relative_path == f"Videos/{stored.file_name}"
        assert (storage.root / stored.relative_path).read_bytes() == b"hello"

    @pytest.mark.asyncio
    async def test_file_exactly_at_limit_is_accepted(self, storage: FileStorage) -> None:
        stored = await storage.save_stream_async(BytesStream(b"x" * 6), "Videos", ".bin", 6)

        assert stored.size == 6

    @pytest.mark.asyncio
    async def test_oversize_stream_leaves_no_partial_file(self, storage: FileStorage) -> None:
        with pytest.raises(UploadTooLargeError):
            await storage.save_stream_async(BytesStream(b"x" * 7), "Videos", ".bin", 6)

        assert list((storage.root / "Videos").iterdir()) == []

    @pytest.mark.asyncio
    async def test_info_reports_name_and_length(self, storage: FileStorage) -> None:
        stored = await storage.save_bytes_async(b"abcd", "Images", ".png")

        info = storage.info("Images", stored.file_name)

        assert info is not None
        assert info.name == stored.file_name
        assert info.length == 4

    def test_info_for_missing_file_is_none(self, storage: FileStorage) -> None:
        assert storage.info("Images", "missing.png") is None

    def test_info_ignores_path_components(self, storage: FileStorage, tmp_path: Path) -> None:
        (tmp_path / "secret.txt").write_text("x")

        assert storage.info("Images", "../secret.txt") is None

    @pytest.mark.asyncio
    async def test_delete_is_best_effort(self, storage: FileStorage) -> None:
        stored = await storage.save_bytes_async(b"abcd", "Images", ".png")

        assert storage.delete(stored.relative_path) is True
        assert storage.delete(stored.relative_path) is False
