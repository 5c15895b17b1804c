"""API routes for uploaded videos."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from bizhub.application.filing.dtos import (
    BulkUploadItemResponse,
    FileInfoResponse,
    VideoDto,
    VideoUploadResponse,
)
from bizhub.application.filing.services import ParallelUploader, VideoProcessingService
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import ResultResponse
from bizhub.infrastructure.filing.routers.uploads import log_progress, to_bulk_items, to_file_upload

router = APIRouter(prefix="/videos", tags=["videos"])

VideoService = Annotated[
    VideoProcessingService, Depends(inject_service(container.video_processing_service))
]
BulkUploader = Annotated[ParallelUploader, Depends(inject_service(container.video_bulk_uploader))]


@router.get("", response_model=ResultResponse[list[VideoDto]])
async def get_videos(service: VideoService) -> ResultResponse[list[VideoDto]]:
    try:
        result = await service.all_videos_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list videos", e) from e
    return ResultResponse[list[VideoDto]].from_result(result)


@router.get("/info/{file_name}", response_model=ResultResponse[FileInfoResponse])
async def get_video_info(file_name: str, service: VideoService) -> ResultResponse[FileInfoResponse]:
    try:
        result = await service.get_info_async(file_name)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get info of video file {file_name}", e) from e
    return ResultResponse[FileInfoResponse].from_result(result)


@router.get("/{video_id}", response_model=ResultResponse[VideoDto])
async def get_video(video_id: str, service: VideoService) -> ResultResponse[VideoDto]:
    try:
        result = await service.video_async(video_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get video {video_id}", e) from e
    return ResultResponse[VideoDto].from_result(result)


@router.post("/upload", response_model=ResultResponse[VideoUploadResponse])
async def upload_video(
    file: Annotated[UploadFile, File(...)], service: VideoService
) -> ResultResponse[VideoUploadResponse]:
    """
    Upload one video, streamed to disk in chunks.

    Args:
        file: Video file to upload
        service: VideoProcessingService injected via dependency container

    Returns:
        Id, stored name, size and path of the video, or the failure messages
    """
    try:
        result = await service.upload_video_async(to_file_upload(file))
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to upload video {file.filename}", e) from e
    return ResultResponse[VideoUploadResponse].from_result(result)


@router.post("/upload/bulk", response_model=list[BulkUploadItemResponse[VideoUploadResponse]])
async def upload_videos(
    files: Annotated[list[UploadFile], File(...)], uploader: BulkUploader
) -> list[BulkUploadItemResponse[VideoUploadResponse]]:
    """Upload several videos concurrently, each within the streaming limit."""
    try:
        outcomes = await uploader.upload_all_async(
            [to_file_upload(file) for file in files], on_progress=log_progress
        )
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to upload videos", e) from e
    return to_bulk_items(outcomes)


@router.delete("/{video_id}", response_model=ResultResponse[None])
async def delete_video(video_id: str, service: VideoService) -> ResultResponse[None]:
    try:
        result = await service.delete_video_async(video_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete video {video_id}", e) from e
    return ResultResponse[None].from_result(result)
