"""Write side of the affiliate module."""

import structlog

from bizhub.application.advertising.dtos import AffiliateDto, AffiliateOrderUpdateRequest
from bizhub.application.advertising.mappers import AffiliateMapper
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import LambdaSpec
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.config import Settings
from bizhub.models import Affiliate, AffiliateImage

logger = structlog.get_logger(__name__)

AFFILIATE_NOT_FOUND = "Affiliate not found."


class AffiliateCommandService:
    """Creates, edits, reorders and removes affiliates."""

    def __init__(
        self,
        affiliate_repository: RepositoryProtocol[Affiliate, str],
        affiliate_image_repository: RepositoryProtocol[AffiliateImage, str],
        settings: Settings,
    ) -> None:
        self.affiliate_repository = affiliate_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        self.mapper = AffiliateMapper(image_mapper)
        self.image_links = EntityImageLinker(
            affiliate_image_repository, AffiliateImage, image_mapper
        )

    async def create_async(self, dto: AffiliateDto) -> Result[AffiliateDto]:
        """
        Create an affiliate at the end of the display order.

        The new affiliate's display order is the number of affiliates that
        existed before it, plus one.
        """
        counted = await self.affiliate_repository.count_async()
        if not counted.succeeded:
            return counted.cast()

        affiliate = self.mapper.to_entity(dto)
        affiliate.display_order = counted.unwrap() + 1

        created = await self.affiliate_repository.create_async(affiliate)
        if not created.succeeded:
            return created.cast()

        saved = await self.affiliate_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "affiliate_created", affiliate_id=affiliate.id, display_order=affiliate.display_order
        )
        return Result.success(self.mapper.to_dto(affiliate))

    async def update_async(self, dto: AffiliateDto) -> Result[AffiliateDto]:
        if not dto.id:
            return Result.fail(AFFILIATE_NOT_FOUND)

        found = await self.affiliate_repository.find_by_id_async(dto.id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(AFFILIATE_NOT_FOUND)

        affiliate = self.mapper.to_entity(dto, found.data)
        updated = self.affiliate_repository.update(affiliate)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.affiliate_repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(self.mapper.to_dto(affiliate))

    async def update_display_order_async(
        self, request: AffiliateOrderUpdateRequest
    ) -> Result[None]:
        """Apply new display positions to every listed affiliate in one save."""
        positions = {item.id: item.display_order for item in request.items}
        found = await self.affiliate_repository.list_async(
            LambdaSpec(Affiliate.id.in_(list(positions))), track_changes=True
        )
        if not found.succeeded:
            return found.cast()

        affiliates = found.unwrap()
        missing = set(positions) - {affiliate.id for affiliate in affiliates}
        if missing:
            return Result.fail(
                [f"{AFFILIATE_NOT_FOUND} ({affiliate_id})" for affiliate_id in sorted(missing)]
            )

        for affiliate in affiliates:
            affiliate.display_order = positions[affiliate.id]
        updated = self.affiliate_repository.update_range(affiliates)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.affiliate_repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(message="Affiliates display order was updated successfully")

    async def remove_async(self, affiliate_id: str) -> Result[None]:
        deleted = await self.affiliate_repository.delete_async(affiliate_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.affiliate_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("affiliate_removed", affiliate_id=affiliate_id)
        return Result.success(message="Affiliate was successfully removed")

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)
