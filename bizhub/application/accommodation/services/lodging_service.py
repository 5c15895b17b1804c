"""Lodgings and their media."""

import structlog
from sqlalchemy import or_

from bizhub.application.accommodation.dtos import LodgingDto, LodgingPageParameters
from bizhub.application.accommodation.mappers import LodgingMapper
from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.filing.dtos import (
    AddEntityImageRequest,
    AddEntityVideoRequest,
    EntityImageDto,
    EntityVideoDto,
)
from bizhub.application.filing.entity_links import EntityImageLinker, EntityVideoLinker
from bizhub.application.filing.mappers import ImageMapper, VideoMapper
from bizhub.config import Settings
from bizhub.models import Lodging, LodgingImage, LodgingVideo

logger = structlog.get_logger(__name__)

LODGING_ORDER_FIELDS = ("name", "city", "grading", "rating", "rate", "created_on")

_ROOMS = Include(Lodging.rooms)
_IMAGES = Include(Lodging.images).then(LodgingImage.image)
_VIDEOS = Include(Lodging.videos).then(LodgingVideo.video)


class LodgingService:
    """Lists, looks up and maintains lodgings."""

    def __init__(
        self,
        lodging_repository: RepositoryProtocol[Lodging, str],
        lodging_image_repository: RepositoryProtocol[LodgingImage, str],
        lodging_video_repository: RepositoryProtocol[LodgingVideo, str],
        settings: Settings,
    ) -> None:
        self.lodging_repository = lodging_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        video_mapper = VideoMapper(settings.API_BASE_ADDRESS)
        self.mapper = LodgingMapper(image_mapper, video_mapper)
        self.image_links = EntityImageLinker(lodging_image_repository, LodgingImage, image_mapper)
        self.video_links = EntityVideoLinker(lodging_video_repository, LodgingVideo, video_mapper)

    async def lodging_count_async(self) -> Result[int]:
        return await self.lodging_repository.count_async()

    async def paged_lodgings_async(
        self, params: LodgingPageParameters
    ) -> PaginatedResult[LodgingDto]:
        """
        One page of lodgings.

        Active and booking filters are only applied when supplied. Search
        matches the name, suburb or city.
        """
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(params.active, lambda active: Lodging.active.is_(active))
            .and_if(params.allow_bookings, lambda allow: Lodging.allow_bookings.is_(allow))
            .and_if(
                search or None,
                lambda text: or_(
                    Lodging.name.icontains(text, autoescape=True),
                    Lodging.suburb.icontains(text, autoescape=True),
                    Lodging.city.icontains(text, autoescape=True),
                ),
            )
        )
        page = await self.lodging_repository.paged_list_async(
            LambdaSpec(predicate.build(), _IMAGES),
            params.to_pagination(),
            params.order_by,
            LODGING_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(lodging) for lodging in page.data)

    async def all_lodgings_async(self) -> Result[list[LodgingDto]]:
        result = await self.lodging_repository.list_async()
        return result.map(
            lambda lodgings: [
                self.mapper.to_dto(lodging)
                for lodging in sorted(lodgings, key=lambda lodging: lodging.name.lower())
            ]
        )

    async def lodging_async(self, lodging_id: str) -> Result[LodgingDto]:
        result = await self.lodging_repository.first_or_default_async(
            LambdaSpec(Lodging.id == lodging_id, _ROOMS, _IMAGES, _VIDEOS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(f"No lodging matching '{lodging_id}' could be found in the database")
        return Result.success(self.mapper.to_dto(result.data))

    async def create_async(self, dto: LodgingDto) -> Result[LodgingDto]:
        lodging = self.mapper.to_entity(dto)

        created = await self.lodging_repository.create_async(lodging)
        if not created.succeeded:
            return created.cast()

        saved = await self.lodging_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("lodging_created", lodging_id=lodging.id)
        return Result.success(self.mapper.to_dto(lodging))

    async def update_async(self, dto: LodgingDto) -> Result[LodgingDto]:
        found = await self.lodging_repository.find_by_id_async(dto.id or "", True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(f"No lodging matching id {dto.id} found in the database")

        lodging = self.mapper.to_entity(dto, found.data)
        updated = self.lodging_repository.update(lodging)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.lodging_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("lodging_updated", lodging_id=lodging.id)
        return Result.success(
            self.mapper.to_dto(lodging), message=f"{lodging.name} was successfully updated"
        )

    async def remove_async(self, lodging_id: str) -> Result[None]:
        """Remove a lodging with its rooms; vacations hosted there keep running unhosted."""
        deleted = await self.lodging_repository.delete_async(lodging_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.lodging_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("lodging_removed", lodging_id=lodging_id)
        return Result.success(message=f"Lodging with id '{lodging_id}' was successfully removed")

    async def images_async(self, lodging_id: str) -> Result[list[EntityImageDto]]:
        return await self.image_links.images_async(lodging_id)

    async def videos_async(self, lodging_id: str) -> Result[list[EntityVideoDto]]:
        return await self.video_links.videos_async(lodging_id)

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)

    async def add_video_async(self, request: AddEntityVideoRequest) -> Result[EntityVideoDto]:
        return await self.video_links.add_async(request)

    async def remove_video_async(self, link_id: str) -> Result[None]:
        return await self.video_links.remove_async(link_id)
