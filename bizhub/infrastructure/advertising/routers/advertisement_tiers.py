"""API routes for advertisement tiers."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bizhub.application.advertising.dtos import AdvertisementTierDto
from bizhub.application.advertising.services import (
    AdvertisementTierCommandService,
    AdvertisementTierQueryService,
)
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import ResultResponse

router = APIRouter(prefix="/advertisement-tiers", tags=["advertisement-tiers"])

QueryService = Annotated[
    AdvertisementTierQueryService,
    Depends(inject_service(container.advertisement_tier_query_service)),
]
CommandService = Annotated[
    AdvertisementTierCommandService,
    Depends(inject_service(container.advertisement_tier_command_service)),
]


@router.get("", response_model=ResultResponse[list[AdvertisementTierDto]])
async def get_tiers(service: QueryService) -> ResultResponse[list[AdvertisementTierDto]]:
    """Get every tier in display order."""
    try:
        result = await service.all_tiers_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list advertisement tiers", e) from e
    return ResultResponse[list[AdvertisementTierDto]].from_result(result)


@router.get("/{tier_id}", response_model=ResultResponse[AdvertisementTierDto])
async def get_tier(tier_id: str, service: QueryService) -> ResultResponse[AdvertisementTierDto]:
    try:
        result = await service.tier_async(tier_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get advertisement tier {tier_id}", e) from e
    return ResultResponse[AdvertisementTierDto].from_result(result)


@router.put("", response_model=ResultResponse[AdvertisementTierDto])
async def create_tier(
    dto: AdvertisementTierDto, service: CommandService
) -> ResultResponse[AdvertisementTierDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create advertisement tier", e) from e
    return ResultResponse[AdvertisementTierDto].from_result(result)


@router.post("", response_model=ResultResponse[AdvertisementTierDto])
async def update_tier(
    dto: AdvertisementTierDto, service: CommandService
) -> ResultResponse[AdvertisementTierDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update advertisement tier {dto.id}", e) from e
    return ResultResponse[AdvertisementTierDto].from_result(result)


@router.delete("/{tier_id}", response_model=ResultResponse[None])
async def delete_tier(tier_id: str, service: CommandService) -> ResultResponse[None]:
    """Delete a tier. Advertisements on it keep running without a tier."""
    try:
        result = await service.remove_async(tier_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete advertisement tier {tier_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_tier_image(
    request: AddEntityImageRequest, service: CommandService
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add advertisement tier image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_tier_image(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove advertisement tier image {link_id}", e) from e
    return ResultResponse[None].from_result(result)
