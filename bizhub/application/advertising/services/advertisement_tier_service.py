"""Query and command services for advertisement tiers."""

import structlog

from bizhub.application.advertising.dtos import AdvertisementTierDto
from bizhub.application.advertising.mappers import AdvertisementTierMapper
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.config import Settings
from bizhub.models import AdvertisementTier, AdvertisementTierImage

logger = structlog.get_logger(__name__)

TIER_NOT_FOUND = "Advertisement tier not found."

_IMAGES = Include(AdvertisementTier.images).then(AdvertisementTierImage.image)


class AdvertisementTierQueryService:
    def __init__(
        self, tier_repository: RepositoryProtocol[AdvertisementTier, str], settings: Settings
    ) -> None:
        self.tier_repository = tier_repository
        self.mapper = AdvertisementTierMapper(ImageMapper(settings.API_BASE_ADDRESS))

    async def all_tiers_async(self) -> Result[list[AdvertisementTierDto]]:
        result = await self.tier_repository.list_async(LambdaSpec(None, _IMAGES))
        return result.map(
            lambda tiers: [
                self.mapper.to_dto(tier)
                for tier in sorted(tiers, key=lambda tier: (tier.order, tier.name))
            ]
        )

    async def tier_async(self, tier_id: str) -> Result[AdvertisementTierDto]:
        result = await self.tier_repository.first_or_default_async(
            LambdaSpec(AdvertisementTier.id == tier_id, _IMAGES)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(TIER_NOT_FOUND)
        return Result.success(self.mapper.to_dto(result.data))


class AdvertisementTierCommandService:
    def __init__(
        self,
        tier_repository: RepositoryProtocol[AdvertisementTier, str],
        tier_image_repository: RepositoryProtocol[AdvertisementTierImage, str],
        settings: Settings,
    ) -> None:
        self.tier_repository = tier_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        self.mapper = AdvertisementTierMapper(image_mapper)
        self.image_links = EntityImageLinker(
            tier_image_repository, AdvertisementTierImage, image_mapper
        )

    async def create_async(self, dto: AdvertisementTierDto) -> Result[AdvertisementTierDto]:
        tier = self.mapper.to_entity(dto)

        created = await self.tier_repository.create_async(tier)
        if not created.succeeded:
            return created.cast()

        saved = await self.tier_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("advertisement_tier_created", tier_id=tier.id)
        return Result.success(self.mapper.to_dto(tier))

    async def update_async(self, dto: AdvertisementTierDto) -> Result[AdvertisementTierDto]:
        if not dto.id:
            return Result.fail(TIER_NOT_FOUND)

        found = await self.tier_repository.find_by_id_async(dto.id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(TIER_NOT_FOUND)

        tier = self.mapper.to_entity(dto, found.data)
        updated = self.tier_repository.update(tier)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.tier_repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(self.mapper.to_dto(tier))

    async def remove_async(self, tier_id: str) -> Result[None]:
        deleted = await self.tier_repository.delete_async(tier_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.tier_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("advertisement_tier_removed", tier_id=tier_id)
        return Result.success(message="Advertisement tier was successfully removed")

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)
