"""Tests for the image service against the database and a temporary static root."""

from sqlalchemy.ext.asyncio import AsyncSession

from bizhub.application.filing.services import ImageProcessingService
from bizhub.application.filing.uploads import FileUpload
from bizhub.config import Settings
from bizhub.infrastructure.common.repository import Repository
from bizhub.infrastructure.filing.storage import FileStorage
from bizhub.models import Image


class BytesStream:
    def __init__(self, content: bytes) -> None:
        self.content = content

    async def read(self, size: int = -1) -> bytes:
        chunk, self.content = self.content, b""
        return chunk


def build_service(db_session: AsyncSession, settings: Settings) -> ImageProcessingService:
    return ImageProcessingService(
        Repository(db_session, Image), FileStorage(settings.STATIC_FILES_DIR), settings
    )


class TestImageContentType:
    async def test_unknown_type_falls_back_to_octet_stream(
        self, db_session: AsyncSession, settings: Settings
    ) -> None:
        service = build_service(db_session, settings)
        upload = FileUpload(
            file_name="scan.unknownext", content_type=None, stream=BytesStream(b"raw bytes")
        )

        result = await service.upload_stream_async(upload, settings.MAX_FILE_UPLOAD_BYTES)

        assert result.succeeded
        assert result.data.content_type == "application/octet-stream"

    async def test_declared_type_is_kept(
        self, db_session: AsyncSession, settings: Settings
    ) -> None:
        service = build_service(db_session, settings)
        upload = FileUpload(
            file_name="logo.png", content_type="image/png", stream=BytesStream(b"\x89PNG")
        )

        result = await service.upload_stream_async(upload, settings.MAX_FILE_UPLOAD_BYTES)

        assert result.data.content_type == "image/png"
