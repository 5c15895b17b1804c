"""API routes for affiliates."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.advertising.dtos import AffiliateDto, AffiliateOrderUpdateRequest
from bizhub.application.advertising.services import (
    AffiliateCommandService,
    AffiliateQueryService,
)
from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/affiliates", tags=["affiliates"])

QueryService = Annotated[
    AffiliateQueryService, Depends(inject_service(container.affiliate_query_service))
]
CommandService = Annotated[
    AffiliateCommandService, Depends(inject_service(container.affiliate_command_service))
]


@router.get("", response_model=ResultResponse[list[AffiliateDto]])
async def get_affiliates(service: QueryService) -> ResultResponse[list[AffiliateDto]]:
    """Get every affiliate in display order."""
    try:
        result = await service.all_affiliates_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list affiliates", e) from e
    return ResultResponse[list[AffiliateDto]].from_result(result)


@router.get("/paged", response_model=PaginatedResponse[AffiliateDto])
async def get_paged_affiliates(
    params: Annotated[RequestParameters, Query()], service: QueryService
) -> PaginatedResponse[AffiliateDto]:
    try:
        page = await service.paged_affiliates_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page affiliates", e) from e
    return PaginatedResponse[AffiliateDto].from_page(page)


@router.get("/{affiliate_id}", response_model=ResultResponse[AffiliateDto])
async def get_affiliate(affiliate_id: str, service: QueryService) -> ResultResponse[AffiliateDto]:
    try:
        result = await service.affiliate_async(affiliate_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get affiliate {affiliate_id}", e) from e
    return ResultResponse[AffiliateDto].from_result(result)


@router.put("", response_model=ResultResponse[AffiliateDto])
async def create_affiliate(
    dto: AffiliateDto, service: CommandService
) -> ResultResponse[AffiliateDto]:
    """Create an affiliate, placed after the existing ones."""
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create affiliate", e) from e
    return ResultResponse[AffiliateDto].from_result(result)


@router.post("", response_model=ResultResponse[AffiliateDto])
async def update_affiliate(
    dto: AffiliateDto, service: CommandService
) -> ResultResponse[AffiliateDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update affiliate {dto.id}", e) from e
    return ResultResponse[AffiliateDto].from_result(result)


@router.post("/order", response_model=ResultResponse[None])
async def update_affiliate_order(
    request: AffiliateOrderUpdateRequest, service: CommandService
) -> ResultResponse[None]:
    """
    Reorder affiliates.

    Args:
        request: New display position for each listed affiliate
        service: AffiliateCommandService injected via dependency container

    Returns:
        Success message, or the failure messages when an affiliate is unknown
    """
    try:
        result = await service.update_display_order_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to reorder affiliates", e) from e
    return ResultResponse[None].from_result(result)


@router.delete("/{affiliate_id}", response_model=ResultResponse[None])
async def delete_affiliate(affiliate_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_async(affiliate_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete affiliate {affiliate_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_affiliate_image(
    request: AddEntityImageRequest, service: CommandService
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add affiliate image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_affiliate_image(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove affiliate image {link_id}", e) from e
    return ResultResponse[None].from_result(result)
