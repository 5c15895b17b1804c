"""API routes for lodgings."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.accommodation.dtos import LodgingDto, LodgingPageParameters, RoomDto
from bizhub.application.accommodation.services import LodgingService, RoomService
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

router = APIRouter(prefix="/lodgings", tags=["lodgings"])

Service = Annotated[LodgingService, Depends(inject_service(container.lodging_service))]
Rooms = Annotated[RoomService, Depends(inject_service(container.room_service))]


@router.get("/paged", response_model=PaginatedResponse[LodgingDto])
async def get_paged_lodgings(
    params: Annotated[LodgingPageParameters, Query()], service: Service
) -> PaginatedResponse[LodgingDto]:
    """
    Get one page of lodgings.

    Args:
        params: Paging, ordering, search and active or booking filters
        service: LodgingService injected via dependency container

    Returns:
        The page with totals, ordered by name unless told otherwise
    """
    try:
        page = await service.paged_lodgings_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page lodgings", e) from e
    return PaginatedResponse[LodgingDto].from_page(page)


@router.get("", response_model=ResultResponse[list[LodgingDto]])
async def get_lodgings(service: Service) -> ResultResponse[list[LodgingDto]]:
    try:
        result = await service.all_lodgings_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list lodgings", e) from e
    return ResultResponse[list[LodgingDto]].from_result(result)


@router.get("/count", response_model=ResultResponse[int])
async def get_lodging_count(service: Service) -> ResultResponse[int]:
    try:
        result = await service.lodging_count_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to count lodgings", e) from e
    return ResultResponse[int].from_result(result)


@router.get("/{lodging_id}", response_model=ResultResponse[LodgingDto])
async def get_lodging(lodging_id: str, service: Service) -> ResultResponse[LodgingDto]:
    """Get one lodging with its rooms and media."""
    try:
        result = await service.lodging_async(lodging_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get lodging {lodging_id}", e) from e
    return ResultResponse[LodgingDto].from_result(result)


@router.get("/{lodging_id}/rooms", response_model=ResultResponse[list[RoomDto]])
async def get_lodging_rooms(lodging_id: str, rooms: Rooms) -> ResultResponse[list[RoomDto]]:
    try:
        result = await rooms.rooms_async(lodging_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list rooms of lodging {lodging_id}", e) from e
    return ResultResponse[list[RoomDto]].from_result(result)


@router.get("/{lodging_id}/images", response_model=ResultResponse[list[EntityImageDto]])
async def get_lodging_images(
    lodging_id: str, service: Service
) -> ResultResponse[list[EntityImageDto]]:
    try:
        result = await service.images_async(lodging_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list images of lodging {lodging_id}", e) from e
    return ResultResponse[list[EntityImageDto]].from_result(result)


@router.get("/{lodging_id}/videos", response_model=ResultResponse[list[EntityVideoDto]])
async def get_lodging_videos(
    lodging_id: str, service: Service
) -> ResultResponse[list[EntityVideoDto]]:
    try:
        result = await service.videos_async(lodging_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list videos of lodging {lodging_id}", e) from e
    return ResultResponse[list[EntityVideoDto]].from_result(result)


@router.put("", response_model=ResultResponse[LodgingDto])
async def create_lodging(dto: LodgingDto, service: Service) -> ResultResponse[LodgingDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create lodging", e) from e
    return ResultResponse[LodgingDto].from_result(result)


@router.post("", response_model=ResultResponse[LodgingDto])
async def update_lodging(dto: LodgingDto, service: Service) -> ResultResponse[LodgingDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update lodging {dto.id}", e) from e
    return ResultResponse[LodgingDto].from_result(result)


@router.delete("/{lodging_id}", response_model=ResultResponse[None])
async def delete_lodging(lodging_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_async(lodging_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete lodging {lodging_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_lodging_image(
    request: AddEntityImageRequest, service: Service
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add lodging image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_lodging_image(link_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove lodging image {link_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addVideo", response_model=ResultResponse[EntityVideoDto])
async def add_lodging_video(
    request: AddEntityVideoRequest, service: Service
) -> ResultResponse[EntityVideoDto]:
    try:
        result = await service.add_video_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add lodging video", e) from e
    return ResultResponse[EntityVideoDto].from_result(result)


@router.delete("/deleteVideo/{link_id}", response_model=ResultResponse[None])
async def remove_lodging_video(link_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_video_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove lodging video {link_id}", e) from e
    return ResultResponse[None].from_result(result)
