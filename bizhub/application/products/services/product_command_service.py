"""Write side of the product module."""

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include
from bizhub.application.filing.dtos import (
    AddEntityImageRequest,
    AddEntityVideoRequest,
    EntityImageDto,
    EntityVideoDto,
)
from bizhub.application.filing.entity_links import EntityImageLinker, EntityVideoLinker
from bizhub.application.filing.mappers import ImageMapper, VideoMapper
from bizhub.application.products.dtos import ProductDto
from bizhub.application.products.mappers import ProductMapper
from bizhub.application.products.services.product_query_service import product_not_found
from bizhub.config import Settings
from bizhub.models import Product, ProductImage, ProductVideo

logger = structlog.get_logger(__name__)


class ProductCommandService:
    """Creates, edits and removes products and their media links."""

    def __init__(
        self,
        product_repository: RepositoryProtocol[Product, str],
        product_image_repository: RepositoryProtocol[ProductImage, str],
        product_video_repository: RepositoryProtocol[ProductVideo, str],
        settings: Settings,
    ) -> None:
        self.product_repository = product_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        video_mapper = VideoMapper(settings.API_BASE_ADDRESS)
        self.mapper = ProductMapper(image_mapper, video_mapper)
        self.image_links = EntityImageLinker(product_image_repository, ProductImage, image_mapper)
        self.video_links = EntityVideoLinker(product_video_repository, ProductVideo, video_mapper)

    async def create_async(self, dto: ProductDto) -> Result[ProductDto]:
        product = self.mapper.to_entity(dto)

        created = await self.product_repository.create_async(product)
        if not created.succeeded:
            return created.cast()

        saved = await self.product_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("product_created", product_id=product.id, slug=product.slug)
        return Result.success(self.mapper.to_dto(product))

    async def update_async(self, dto: ProductDto) -> Result[ProductDto]:
        """
        Update a product and its pricing.

        Pricing is created when the product had none, and left untouched
        when the DTO carries none.
        """
        if not dto.id:
            return Result.fail(product_not_found(""))

        found = await self.product_repository.find_by_id_async(
            dto.id, True, Include(Product.pricing)
        )
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(product_not_found(dto.id))

        product = self.mapper.apply(dto, found.data)
        if dto.pricing is not None:
            product.pricing = self.mapper.apply_price(dto.pricing, product.pricing)

        updated = self.product_repository.update(product)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.product_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("product_updated", product_id=product.id)
        return Result.success(self.mapper.to_dto(product))

    async def remove_async(self, product_id: str) -> Result[None]:
        deleted = await self.product_repository.delete_async(product_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.product_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("product_removed", product_id=product_id)
        return Result.success(message="Product was successfully removed")

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)

    async def add_video_async(self, request: AddEntityVideoRequest) -> Result[EntityVideoDto]:
        return await self.video_links.add_async(request)

    async def remove_video_async(self, link_id: str) -> Result[None]:
        return await self.video_links.remove_async(link_id)
