"""API routes for advertisements."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from bizhub.application.advertising.dtos import (
    AdvertisementDto,
    AdvertisementListingPageParameters,
)
from bizhub.application.advertising.services import (
    AdvertisementCommandService,
    AdvertisementQueryService,
)
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/advertisements", tags=["advertisements"])

QueryService = Annotated[
    AdvertisementQueryService, Depends(inject_service(container.advertisement_query_service))
]
CommandService = Annotated[
    AdvertisementCommandService, Depends(inject_service(container.advertisement_command_service))
]


@router.get("", response_model=ResultResponse[list[AdvertisementDto]])
async def get_advertisements(service: QueryService) -> ResultResponse[list[AdvertisementDto]]:
    """Get every advertisement, newest first."""
    try:
        result = await service.all_advertisements_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list advertisements", e) from e
    return ResultResponse[list[AdvertisementDto]].from_result(result)


@router.get("/active", response_model=ResultResponse[list[AdvertisementDto]])
async def get_active_advertisements(
    service: QueryService,
    now: Annotated[datetime | None, Query(description="Point in time, defaults to now")] = None,
) -> ResultResponse[list[AdvertisementDto]]:
    """Get advertisements that are approved, set up and currently running."""
    try:
        result = await service.active_advertisements_async(now)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list active advertisements", e) from e
    return ResultResponse[list[AdvertisementDto]].from_result(result)


@router.get("/paged", response_model=PaginatedResponse[AdvertisementDto])
async def get_paged_advertisements(
    params: Annotated[AdvertisementListingPageParameters, Query()],
    service: QueryService,
) -> PaginatedResponse[AdvertisementDto]:
    """
    Get one page of advertisements.

    Args:
        params: Paging, ordering, search, status and owner filters
        service: AdvertisementQueryService injected via dependency container

    Returns:
        The page with totals
    """
    try:
        page = await service.paged_listings_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page advertisements", e) from e
    return PaginatedResponse[AdvertisementDto].from_page(page)


@router.get("/{advertisement_id}", response_model=ResultResponse[AdvertisementDto])
async def get_advertisement(
    advertisement_id: str, service: QueryService
) -> ResultResponse[AdvertisementDto]:
    """Get one advertisement with its tier and images."""
    try:
        result = await service.advertisement_async(advertisement_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get advertisement {advertisement_id}", e) from e
    return ResultResponse[AdvertisementDto].from_result(result)


@router.get("/{advertisement_id}/images", response_model=ResultResponse[list[EntityImageDto]])
async def get_advertisement_images(
    advertisement_id: str, service: QueryService
) -> ResultResponse[list[EntityImageDto]]:
    try:
        result = await service.images_async(advertisement_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list images of advertisement {advertisement_id}", e) from e
    return ResultResponse[list[EntityImageDto]].from_result(result)


@router.put(
    "", response_model=ResultResponse[AdvertisementDto], status_code=status.HTTP_200_OK
)
async def create_advertisement(
    dto: AdvertisementDto, service: CommandService
) -> ResultResponse[AdvertisementDto]:
    """
    Create an advertisement.

    Args:
        dto: Advertisement to create
        service: AdvertisementCommandService injected via dependency container

    Returns:
        The created advertisement, or the failure messages
    """
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create advertisement", e) from e
    return ResultResponse[AdvertisementDto].from_result(result)


@router.post("", response_model=ResultResponse[AdvertisementDto])
async def update_advertisement(
    dto: AdvertisementDto, service: CommandService
) -> ResultResponse[AdvertisementDto]:
    """Update an advertisement identified by dto.id."""
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update advertisement {dto.id}", e) from e
    return ResultResponse[AdvertisementDto].from_result(result)


@router.delete("/{advertisement_id}", response_model=ResultResponse[None])
async def delete_advertisement(
    advertisement_id: str, service: CommandService
) -> ResultResponse[None]:
    try:
        result = await service.remove_async(advertisement_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete advertisement {advertisement_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/approve/{advertisement_id}", response_model=ResultResponse[None])
async def approve_advertisement(
    advertisement_id: str, service: CommandService
) -> ResultResponse[None]:
    """Mark an advertisement as approved."""
    try:
        result = await service.approve_async(advertisement_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to approve advertisement {advertisement_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/reject/{advertisement_id}", response_model=ResultResponse[None])
async def reject_advertisement(
    advertisement_id: str, service: CommandService
) -> ResultResponse[None]:
    """Mark an advertisement as rejected."""
    try:
        result = await service.reject_async(advertisement_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to reject advertisement {advertisement_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_advertisement_image(
    request: AddEntityImageRequest, service: CommandService
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add advertisement image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_advertisement_image(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove advertisement image {link_id}", e) from e
    return ResultResponse[None].from_result(result)
