"""API routes for vacations."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.accommodation.dtos import VacationDto, VacationPageParameters
from bizhub.application.accommodation.services import VacationService
from bizhub.application.filing.dtos import (
    AddEntityImageRequest,
    AddEntityVideoRequest,
    EntityImageDto,
    EntityVideoDto,
)
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/vacations", tags=["vacations"])

Service = Annotated[VacationService, Depends(inject_service(container.vacation_service))]


@router.get("/paged", response_model=PaginatedResponse[VacationDto])
async def get_paged_vacations(
    params: Annotated[VacationPageParameters, Query()], service: Service
) -> PaginatedResponse[VacationDto]:
    try:
        page = await service.paged_vacations_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page vacations", e) from e
    return PaginatedResponse[VacationDto].from_page(page)


@router.get("", response_model=ResultResponse[list[VacationDto]])
async def get_vacations(service: Service) -> ResultResponse[list[VacationDto]]:
    try:
        result = await service.all_vacations_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list vacations", e) from e
    return ResultResponse[list[VacationDto]].from_result(result)


@router.get("/extensions", response_model=ResultResponse[list[VacationDto]])
async def get_vacation_extensions(service: Service) -> ResultResponse[list[VacationDto]]:
    try:
        result = await service.all_extensions_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list vacation extensions", e) from e
    return ResultResponse[list[VacationDto]].from_result(result)


@router.get("/slug/{slug}", response_model=ResultResponse[VacationDto])
async def get_vacation_by_slug(slug: str, service: Service) -> ResultResponse[VacationDto]:
    try:
        result = await service.vacation_from_slug_async(slug)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get vacation {slug}", e) from e
    return ResultResponse[VacationDto].from_result(result)


@router.get("/{vacation_id}", response_model=ResultResponse[VacationDto])
async def get_vacation(vacation_id: str, service: Service) -> ResultResponse[VacationDto]:
    try:
        result = await service.vacation_async(vacation_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get vacation {vacation_id}", e) from e
    return ResultResponse[VacationDto].from_result(result)


@router.get("/{vacation_id}/images", response_model=ResultResponse[list[EntityImageDto]])
async def get_vacation_images(
    vacation_id: str, service: Service
) -> ResultResponse[list[EntityImageDto]]:
    try:
        result = await service.images_async(vacation_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list images of vacation {vacation_id}", e) from e
    return ResultResponse[list[EntityImageDto]].from_result(result)


@router.get("/{vacation_id}/videos", response_model=ResultResponse[list[EntityVideoDto]])
async def get_vacation_videos(
    vacation_id: str, service: Service
) -> ResultResponse[list[EntityVideoDto]]:
    try:
        result = await service.videos_async(vacation_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list videos of vacation {vacation_id}", e) from e
    return ResultResponse[list[EntityVideoDto]].from_result(result)


@router.put("", response_model=ResultResponse[VacationDto])
async def create_vacation(dto: VacationDto, service: Service) -> ResultResponse[VacationDto]:
    """Create a vacation under a unique slug derived from its name."""
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create vacation", e) from e
    return ResultResponse[VacationDto].from_result(result)


@router.post("", response_model=ResultResponse[VacationDto])
async def update_vacation(dto: VacationDto, service: Service) -> ResultResponse[VacationDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update vacation {dto.id}", e) from e
    return ResultResponse[VacationDto].from_result(result)


@router.post("/{vacation_id}/duplicate", response_model=ResultResponse[VacationDto])
async def duplicate_vacation(vacation_id: str, service: Service) -> ResultResponse[VacationDto]:
    """Copy a vacation as an unpublished draft with the same media."""
    try:
        result = await service.duplicate_async(vacation_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to duplicate vacation {vacation_id}", e) from e
    return ResultResponse[VacationDto].from_result(result)


@router.delete("/{vacation_id}", response_model=ResultResponse[None])
async def delete_vacation(vacation_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_async(vacation_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete vacation {vacation_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_vacation_image(
    request: AddEntityImageRequest, service: Service
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add vacation image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_vacation_image(link_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove vacation image {link_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addVideo", response_model=ResultResponse[EntityVideoDto])
async def add_vacation_video(
    request: AddEntityVideoRequest, service: Service
) -> ResultResponse[EntityVideoDto]:
    try:
        result = await service.add_video_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add vacation video", e) from e
    return ResultResponse[EntityVideoDto].from_result(result)


@router.delete("/deleteVideo/{link_id}", response_model=ResultResponse[None])
async def remove_vacation_video(link_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_video_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove vacation video {link_id}", e) from e
    return ResultResponse[None].from_result(result)
