"""API routes for products."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.filing.dtos import (
    AddEntityImageRequest,
    AddEntityVideoRequest,
    EntityImageDto,
    EntityVideoDto,
)
from bizhub.application.products.dtos import ProductDto, ProductPageParameters
from bizhub.application.products.services import ProductCommandService, ProductQueryService
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/products", tags=["products"])

QueryService = Annotated[
    ProductQueryService, Depends(inject_service(container.product_query_service))
]
CommandService = Annotated[
    ProductCommandService, Depends(inject_service(container.product_command_service))
]


@router.get("/paged", response_model=PaginatedResponse[ProductDto])
async def get_paged_products(
    params: Annotated[ProductPageParameters, Query()], service: QueryService
) -> PaginatedResponse[ProductDto]:
    """
    Get one page of products.

    Defaults to twelve products per page ordered by name.

    Args:
        params: Paging, ordering, search and catalogue filters
        service: ProductQueryService injected via dependency container

    Returns:
        The page with totals
    """
    try:
        page = await service.paged_products_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page products", e) from e
    return PaginatedResponse[ProductDto].from_page(page)


@router.get("", response_model=ResultResponse[list[ProductDto]])
async def get_products(service: QueryService) -> ResultResponse[list[ProductDto]]:
    try:
        result = await service.all_products_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list products", e) from e
    return ResultResponse[list[ProductDto]].from_result(result)


@router.get("/{product_id}", response_model=ResultResponse[ProductDto])
async def get_product(product_id: str, service: QueryService) -> ResultResponse[ProductDto]:
    """Get one product with its pricing, media and variants."""
    try:
        result = await service.product_async(product_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get product {product_id}", e) from e
    return ResultResponse[ProductDto].from_result(result)


@router.get("/{product_id}/variants", response_model=ResultResponse[list[ProductDto]])
async def get_product_variants(
    product_id: str, service: QueryService
) -> ResultResponse[list[ProductDto]]:
    try:
        result = await service.variants_async(product_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list variants of product {product_id}", e) from e
    return ResultResponse[list[ProductDto]].from_result(result)


@router.get("/{product_id}/images", response_model=ResultResponse[list[EntityImageDto]])
async def get_product_images(
    product_id: str, service: QueryService
) -> ResultResponse[list[EntityImageDto]]:
    try:
        result = await service.images_async(product_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list images of product {product_id}", e) from e
    return ResultResponse[list[EntityImageDto]].from_result(result)


@router.get("/{product_id}/videos", response_model=ResultResponse[list[EntityVideoDto]])
async def get_product_videos(
    product_id: str, service: QueryService
) -> ResultResponse[list[EntityVideoDto]]:
    try:
        result = await service.videos_async(product_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list videos of product {product_id}", e) from e
    return ResultResponse[list[EntityVideoDto]].from_result(result)


@router.put("", response_model=ResultResponse[ProductDto])
async def create_product(dto: ProductDto, service: CommandService) -> ResultResponse[ProductDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create product", e) from e
    return ResultResponse[ProductDto].from_result(result)


@router.post("", response_model=ResultResponse[ProductDto])
async def update_product(dto: ProductDto, service: CommandService) -> ResultResponse[ProductDto]:
    """Update a product and create or update its pricing."""
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update product {dto.id}", e) from e
    return ResultResponse[ProductDto].from_result(result)


@router.delete("/{product_id}", response_model=ResultResponse[None])
async def delete_product(product_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_async(product_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete product {product_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_product_image(
    request: AddEntityImageRequest, service: CommandService
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add product image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_product_image(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove product image {link_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addVideo", response_model=ResultResponse[EntityVideoDto])
async def add_product_video(
    request: AddEntityVideoRequest, service: CommandService
) -> ResultResponse[EntityVideoDto]:
    try:
        result = await service.add_video_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add product video", e) from e
    return ResultResponse[EntityVideoDto].from_result(result)


@router.delete("/deleteVideo/{link_id}", response_model=ResultResponse[None])
async def remove_product_video(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_video_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove product video {link_id}", e) from e
    return ResultResponse[None].from_result(result)
