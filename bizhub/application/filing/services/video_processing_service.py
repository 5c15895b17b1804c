"""Application service for uploaded videos."""

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import LambdaSpec
from bizhub.application.filing.dtos import FileInfoResponse, VideoDto, VideoUploadResponse
from bizhub.application.filing.mappers import VideoMapper
from bizhub.application.filing.protocols import FileStorageProtocol
from bizhub.application.filing.uploads import FileUpload
from bizhub.config import VIDEO_UPLOADS_FOLDER, Settings
from bizhub.exceptions import UploadTooLargeError
from bizhub.models import Video

logger = structlog.get_logger(__name__)


class VideoProcessingService:
    """Stores uploaded videos on disk and keeps their metadata rows."""

    def __init__(
        self,
        video_repository: RepositoryProtocol[Video, str],
        storage: FileStorageProtocol,
        settings: Settings,
    ) -> None:
        self.video_repository = video_repository
        self.storage = storage
        self.max_upload_bytes = settings.MAX_FILE_UPLOAD_BYTES
        self.mapper = VideoMapper(settings.API_BASE_ADDRESS)

    async def all_videos_async(self) -> Result[list[VideoDto]]:
        result = await self.video_repository.list_async()
        return result.map(
            lambda videos: [
                self.mapper.to_dto(video)
                for video in sorted(videos, key=lambda video: video.created_on, reverse=True)
            ]
        )

    async def video_async(self, video_id: str) -> Result[VideoDto]:
        result = await self.video_repository.find_by_id_async(video_id)
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("Video not found.")
        return Result.success(self.mapper.to_dto(result.data))

    async def upload_video_async(self, upload: FileUpload | None) -> Result[VideoUploadResponse]:
        """Store a single video upload, rejecting anything over the upload limit."""
        return await self.upload_stream_async(upload, self.max_upload_bytes)

    async def upload_stream_async(
        self, upload: FileUpload | None, max_bytes: int
    ) -> Result[VideoUploadResponse]:
        """
        Copy a video stream to disk and record it.

        Args:
            upload: The received file
            max_bytes: Largest accepted size, inclusive

        Returns:
            Result with the new row's id, stored name, size and path
        """
        if upload is None or not upload.file_name or upload.size == 0:
            return Result.fail("No video found")
        if upload.size is not None and upload.size > max_bytes:
            return Result.fail(UploadTooLargeError(max_bytes).message)

        try:
            stored = await self.storage.save_stream_async(
                upload.stream, VIDEO_UPLOADS_FOLDER, upload.extension, max_bytes
            )
        except UploadTooLargeError as e:
            logger.warning("video_upload_too_large", file_name=upload.file_name)
            return Result.fail(e.message)
        except OSError as e:
            logger.error("video_store_failed", file_name=upload.file_name, error=str(e))
            return Result.fail(f"Failed to store video: {e!s}")

        if stored.size == 0:
            self.storage.delete(stored.relative_path)
            return Result.fail("No video found")

        video = Video(
            display_name=upload.display_name,
            file_name=stored.file_name,
            content_type=upload.resolved_content_type("video/mp4"),
            size=stored.size,
            relative_path=stored.relative_path,
        )

        created = await self.video_repository.create_async(video)
        if not created.succeeded:
            self.storage.delete(stored.relative_path)
            return created.cast()

        saved = await self.video_repository.save_async()
        if not saved.succeeded:
            self.storage.delete(stored.relative_path)
            return saved.cast()

        logger.info("video_uploaded", video_id=video.id, size=video.size)
        return Result.success(
            VideoUploadResponse(
                id=video.id,
                file_name=video.file_name,
                size=video.size,
                path=video.relative_path,
            )
        )

    async def get_info_async(self, file_name: str) -> Result[FileInfoResponse]:
        info = self.storage.info(VIDEO_UPLOADS_FOLDER, file_name)
        if info is None:
            return Result.fail("File not Found")
        return Result.success(
            FileInfoResponse(name=info.name, length=info.length, created_utc=info.created_utc)
        )

    async def delete_video_async(self, video_id: str) -> Result[None]:
        found = await self.video_repository.first_or_default_async(LambdaSpec(Video.id == video_id))
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail("Video not found.")

        relative_path = found.data.relative_path
        deleted = await self.video_repository.delete_async(video_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.video_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        self.storage.delete(relative_path)
        logger.info("video_deleted", video_id=video_id)
        return Result.success(message="Video was successfully removed")
