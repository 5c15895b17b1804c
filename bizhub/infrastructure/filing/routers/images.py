"""API routes for uploaded images."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile

from bizhub.application.filing.dtos import (
    Base64ImageUploadRequest,
    BulkUploadItemResponse,
    FileInfoResponse,
    ImageDto,
)
from bizhub.application.filing.services import ImageProcessingService, ParallelUploader
from bizhub.core import container
from bizhub.domain.filing import UploadType
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import ResultResponse
from bizhub.infrastructure.filing.routers.uploads import log_progress, to_bulk_items, to_file_upload

router = APIRouter(prefix="/images", tags=["images"])

ImageService = Annotated[
    ImageProcessingService, Depends(inject_service(container.image_processing_service))
]
BulkUploader = Annotated[ParallelUploader, Depends(inject_service(container.image_bulk_uploader))]


@router.get("", response_model=ResultResponse[list[ImageDto]])
async def get_images(service: ImageService) -> ResultResponse[list[ImageDto]]:
    """Get every uploaded image, newest first."""
    try:
        result = await service.all_images_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list images", e) from e
    return ResultResponse[list[ImageDto]].from_result(result)


@router.get("/info/{file_name}", response_model=ResultResponse[FileInfoResponse])
async def get_image_info(file_name: str, service: ImageService) -> ResultResponse[FileInfoResponse]:
    """Get name, size and creation time of a stored image file."""
    try:
        result = await service.get_info_async(file_name)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get info of image file {file_name}", e) from e
    return ResultResponse[FileInfoResponse].from_result(result)


@router.get("/{image_id}", response_model=ResultResponse[ImageDto])
async def get_image(image_id: str, service: ImageService) -> ResultResponse[ImageDto]:
    try:
        result = await service.image_async(image_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get image {image_id}", e) from e
    return ResultResponse[ImageDto].from_result(result)


@router.post("/upload", response_model=ResultResponse[ImageDto])
async def upload_image(
    file: Annotated[UploadFile, File(...)],
    service: ImageService,
    image_type: Annotated[UploadType, Form()] = UploadType.IMAGE,
) -> ResultResponse[ImageDto]:
    """
    Upload one image file.

    Args:
        file: Image file to upload
        service: ImageProcessingService injected via dependency container
        image_type: Where the image will be used

    Returns:
        The stored image with its public URL, or the failure messages
    """
    try:
        result = await service.upload_image_async(to_file_upload(file), image_type)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to upload image {file.filename}", e) from e
    return ResultResponse[ImageDto].from_result(result)


@router.post("/upload/base64", response_model=ResultResponse[ImageDto])
async def upload_base64_image(
    request: Base64ImageUploadRequest, service: ImageService
) -> ResultResponse[ImageDto]:
    """Upload an image sent inline as base64, optionally as a data URL."""
    try:
        result = await service.upload_base64_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to upload base64 image {request.name}", e) from e
    return ResultResponse[ImageDto].from_result(result)


@router.post("/upload/bulk", response_model=list[BulkUploadItemResponse[ImageDto]])
async def upload_images(
    files: Annotated[list[UploadFile], File(...)], uploader: BulkUploader
) -> list[BulkUploadItemResponse[ImageDto]]:
    """Upload several images concurrently. One file failing does not stop the others."""
    try:
        outcomes = await uploader.upload_all_async(
            [to_file_upload(file) for file in files], on_progress=log_progress
        )
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to upload images", e) from e
    return to_bulk_items(outcomes)


@router.delete("/{image_id}", response_model=ResultResponse[None])
async def delete_image(image_id: str, service: ImageService) -> ResultResponse[None]:
    """Delete an image row and then its file."""
    try:
        result = await service.delete_image_async(image_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete image {image_id}", e) from e
    return ResultResponse[None].from_result(result)
