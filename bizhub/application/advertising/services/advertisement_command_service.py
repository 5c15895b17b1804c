"""Write side of the advertisement module."""

import structlog

from bizhub.application.advertising.dtos import AdvertisementDto
from bizhub.application.advertising.mappers import AdvertisementMapper
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.config import Settings
from bizhub.domain.advertising import ReviewStatus
from bizhub.models import Advertisement, AdvertisementImage

logger = structlog.get_logger(__name__)

ADVERTISEMENT_NOT_FOUND = "Advertisement not found."


class AdvertisementCommandService:
    """Creates, edits, moderates and removes advertisements."""

    def __init__(
        self,
        advertisement_repository: RepositoryProtocol[Advertisement, str],
        advertisement_image_repository: RepositoryProtocol[AdvertisementImage, str],
        settings: Settings,
    ) -> None:
        self.advertisement_repository = advertisement_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        self.mapper = AdvertisementMapper(image_mapper)
        self.image_links = EntityImageLinker(
            advertisement_image_repository, AdvertisementImage, image_mapper
        )

    async def create_async(self, dto: AdvertisementDto) -> Result[AdvertisementDto]:
        """
        Create an advertisement.

        Args:
            dto: Advertisement to create

        Returns:
            Result with the persisted advertisement
        """
        advertisement = self.mapper.to_entity(dto)

        created = await self.advertisement_repository.create_async(advertisement)
        if not created.succeeded:
            return created.cast()

        saved = await self.advertisement_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("advertisement_created", advertisement_id=advertisement.id)
        return Result.success(self.mapper.to_dto(advertisement))

    async def update_async(self, dto: AdvertisementDto) -> Result[AdvertisementDto]:
        if not dto.id:
            return Result.fail(ADVERTISEMENT_NOT_FOUND)

        found = await self.advertisement_repository.find_by_id_async(dto.id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(ADVERTISEMENT_NOT_FOUND)

        advertisement = self.mapper.apply(dto, found.data)
        updated = self.advertisement_repository.update(advertisement)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.advertisement_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("advertisement_updated", advertisement_id=advertisement.id)
        return Result.success(self.mapper.to_dto(advertisement))

    async def remove_async(self, advertisement_id: str) -> Result[None]:
        deleted = await self.advertisement_repository.delete_async(advertisement_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.advertisement_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("advertisement_removed", advertisement_id=advertisement_id)
        return Result.success(message="Advertisement was successfully removed")

    async def approve_async(self, advertisement_id: str) -> Result[None]:
        return await self._set_status_async(advertisement_id, ReviewStatus.APPROVED)

    async def reject_async(self, advertisement_id: str) -> Result[None]:
        return await self._set_status_async(advertisement_id, ReviewStatus.REJECTED)

    async def _set_status_async(self, advertisement_id: str, status: ReviewStatus) -> Result[None]:
        # A missing advertisement fails before anything is staged or saved
        found = await self.advertisement_repository.find_by_id_async(advertisement_id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(ADVERTISEMENT_NOT_FOUND)

        advertisement = found.data
        advertisement.status = status
        updated = self.advertisement_repository.update(advertisement)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.advertisement_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "advertisement_reviewed", advertisement_id=advertisement_id, status=status.value
        )
        return Result.success(message=f"Advertisement was {status.value}")

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)
