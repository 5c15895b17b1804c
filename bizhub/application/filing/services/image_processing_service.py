"""Application service for uploaded images."""

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import LambdaSpec
from bizhub.application.filing.dtos import Base64ImageUploadRequest, FileInfoResponse, ImageDto
from bizhub.application.filing.image_signatures import detect_image_format
from bizhub.application.filing.mappers import ImageMapper
from bizhub.application.filing.protocols import FileStorageProtocol, StoredFile
from bizhub.application.filing.uploads import FileUpload, decode_base64_image
from bizhub.config import IMAGE_UPLOADS_FOLDER, Settings
from bizhub.domain.filing import UploadType
from bizhub.exceptions import InvalidImageError, UploadTooLargeError
from bizhub.models import Image

logger = structlog.get_logger(__name__)


class ImageProcessingService:
    """Stores uploaded images on disk and keeps their metadata rows."""

    def __init__(
        self,
        image_repository: RepositoryProtocol[Image, str],
        storage: FileStorageProtocol,
        settings: Settings,
    ) -> None:
        self.image_repository = image_repository
        self.storage = storage
        self.max_upload_bytes = settings.MAX_FILE_UPLOAD_BYTES
        self.mapper = ImageMapper(settings.API_BASE_ADDRESS)

    async def all_images_async(self) -> Result[list[ImageDto]]:
        result = await self.image_repository.list_async()
        return result.map(
            lambda images: [
                self.mapper.to_dto(image)
                for image in sorted(images, key=lambda image: image.created_on, reverse=True)
            ]
        )

    async def image_async(self, image_id: str) -> Result[ImageDto]:
        result = await self.image_repository.find_by_id_async(image_id)
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("Image not found.")
        return Result.success(self.mapper.to_dto(result.data))

    async def upload_base64_image_async(
        self, request: Base64ImageUploadRequest
    ) -> Result[ImageDto]:
        """
        Store an inline base64 image.

        The format is taken from the payload's magic bytes, never from the
        client, and decides the stored file's extension and content type.

        Args:
            request: Display name, payload and usage of the image

        Returns:
            Result with the stored image's metadata
        """
        try:
            content = decode_base64_image(request.base64_string)
        except InvalidImageError as e:
            logger.warning("base64_image_rejected", name=request.name, reason=e.message)
            return Result.fail(e.message)

        image_format = detect_image_format(content)
        if image_format is None:
            return Result.fail("Unsupported image format.")
        if len(content) > self.max_upload_bytes:
            return Result.fail(UploadTooLargeError(self.max_upload_bytes).message)

        try:
            stored = await self.storage.save_bytes_async(
                content, IMAGE_UPLOADS_FOLDER, image_format.extension
            )
        except OSError as e:
            logger.error("image_store_failed", name=request.name, error=str(e))
            return Result.fail(f"Failed to store image: {e!s}")

        return await self._persist_async(
            stored, request.name, image_format.content_type, request.image_type
        )

    async def upload_image_async(
        self, upload: FileUpload, image_type: UploadType = UploadType.IMAGE
    ) -> Result[ImageDto]:
        """Store a raw image upload, rejecting anything over the upload limit."""
        return await self.upload_stream_async(upload, self.max_upload_bytes, image_type)

    async def upload_stream_async(
        self,
        upload: FileUpload,
        max_bytes: int,
        image_type: UploadType = UploadType.IMAGE,
    ) -> Result[ImageDto]:
        if upload.size is not None and upload.size > max_bytes:
            return Result.fail(UploadTooLargeError(max_bytes).message)

        try:
            stored = await self.storage.save_stream_async(
                upload.stream, IMAGE_UPLOADS_FOLDER, upload.extension, max_bytes
            )
        except UploadTooLargeError as e:
            logger.warning("image_upload_too_large", file_name=upload.file_name)
            return Result.fail(e.message)
        except OSError as e:
            logger.error("image_store_failed", file_name=upload.file_name, error=str(e))
            return Result.fail(f"Failed to store image: {e!s}")

        return await self._persist_async(
            stored,
            upload.display_name,
            upload.resolved_content_type(),
            image_type,
        )

    async def _persist_async(
        self, stored: StoredFile, display_name: str, content_type: str, image_type: UploadType
    ) -> Result[ImageDto]:
        image = Image(
            display_name=display_name,
            file_name=stored.file_name,
            content_type=content_type,
            size=stored.size,
            relative_path=stored.relative_path,
            image_type=image_type,
        )

        created = await self.image_repository.create_async(image)
        if not created.succeeded:
            self.storage.delete(stored.relative_path)
            return created.cast()

        saved = await self.image_repository.save_async()
        if not saved.succeeded:
            self.storage.delete(stored.relative_path)
            return saved.cast()

        logger.info("image_uploaded", image_id=image.id, size=image.size)
        return Result.success(self.mapper.to_dto(image))

    async def get_info_async(self, file_name: str) -> Result[FileInfoResponse]:
        info = self.storage.info(IMAGE_UPLOADS_FOLDER, file_name)
        if info is None:
            return Result.fail("File not found")
        return Result.success(
            FileInfoResponse(name=info.name, length=info.length, created_utc=info.created_utc)
        )

    async def delete_image_async(self, image_id: str) -> Result[None]:
        """
        Delete an image row, then its file.

        The file is removed only after the row deletion was committed, and a
        failure to remove it does not fail the operation.
        """
        found = await self.image_repository.first_or_default_async(LambdaSpec(Image.id == image_id))
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail("Image not found.")

        relative_path = found.data.relative_path
        deleted = await self.image_repository.delete_async(image_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.image_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        self.storage.delete(relative_path)
        logger.info("image_deleted", image_id=image_id)
        return Result.success(message="Image was successfully removed")
