"""Vacations, their slugs and their media."""

import structlog
from sqlalchemy import or_

from bizhub.application.accommodation.dtos import VacationDto, VacationPageParameters
from bizhub.application.accommodation.mappers import LodgingMapper, VacationMapper
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
from bizhub.domain.accommodation import unique_slug
from bizhub.domain.products import generate_slug
from bizhub.models import Vacation, VacationImage, VacationVideo

logger = structlog.get_logger(__name__)

VACATION_ORDER_FIELDS = ("name", "start_date", "nights", "reference_nr", "created_on")

_LODGING = Include(Vacation.lodging)
_IMAGES = Include(Vacation.images).then(VacationImage.image)
_VIDEOS = Include(Vacation.videos).then(VacationVideo.video)


def vacation_not_found(vacation_id: str) -> str:
    return f"Vacation '{vacation_id}' not found."


class VacationService:
    """Lists, looks up and maintains vacations."""

    def __init__(
        self,
        vacation_repository: RepositoryProtocol[Vacation, str],
        vacation_image_repository: RepositoryProtocol[VacationImage, str],
        vacation_video_repository: RepositoryProtocol[VacationVideo, str],
        settings: Settings,
    ) -> None:
        self.vacation_repository = vacation_repository
        self.vacation_image_repository = vacation_image_repository
        self.vacation_video_repository = vacation_video_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        video_mapper = VideoMapper(settings.API_BASE_ADDRESS)
        self.mapper = VacationMapper(LodgingMapper(image_mapper, video_mapper))
        self.image_links = EntityImageLinker(
            vacation_image_repository, VacationImage, image_mapper
        )
        self.video_links = EntityVideoLinker(
            vacation_video_repository, VacationVideo, video_mapper
        )

    async def _free_slug(self, name: str, own_id: str | None = None) -> Result[str]:
        """A slug for the name that no other vacation uses."""
        base = generate_slug(name) or "vacation"
        result = await self.vacation_repository.list_async(
            LambdaSpec(Vacation.slug.startswith(base, autoescape=True))
        )
        return result.map(
            lambda vacations: unique_slug(
                name, {vacation.slug for vacation in vacations if vacation.id != own_id}
            )
        )

    async def paged_vacations_async(
        self, params: VacationPageParameters
    ) -> PaginatedResult[VacationDto]:
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(params.published, lambda published: Vacation.published.is_(published))
            .and_if(params.lodging_id, lambda lodging_id: Vacation.lodging_id == lodging_id)
            .and_if(
                search or None,
                lambda text: or_(
                    Vacation.name.icontains(text, autoescape=True),
                    Vacation.reference_nr.icontains(text, autoescape=True),
                ),
            )
        )
        page = await self.vacation_repository.paged_list_async(
            LambdaSpec(predicate.build(), _LODGING, _IMAGES),
            params.to_pagination(),
            params.order_by,
            VACATION_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(vacation) for vacation in page.data)

    async def all_vacations_async(self) -> Result[list[VacationDto]]:
        result = await self.vacation_repository.list_async(LambdaSpec(None, _IMAGES))
        return result.map(
            lambda vacations: [
                self.mapper.to_dto(vacation)
                for vacation in sorted(vacations, key=lambda vacation: vacation.name.lower())
            ]
        )

    async def all_extensions_async(self) -> Result[list[VacationDto]]:
        """Vacations sold only as add-ons to another vacation."""
        result = await self.vacation_repository.list_async(
            LambdaSpec(Vacation.is_extension.is_(True), _IMAGES)
        )
        return result.map(
            lambda vacations: [
                self.mapper.to_dto(vacation)
                for vacation in sorted(vacations, key=lambda vacation: vacation.name.lower())
            ]
        )

    async def vacation_async(self, vacation_id: str) -> Result[VacationDto]:
        result = await self.vacation_repository.first_or_default_async(
            LambdaSpec(Vacation.id == vacation_id, _LODGING, _IMAGES, _VIDEOS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(vacation_not_found(vacation_id))
        return Result.success(self.mapper.to_dto(result.data))

    async def vacation_from_slug_async(self, slug: str) -> Result[VacationDto]:
        result = await self.vacation_repository.first_or_default_async(
            LambdaSpec(Vacation.slug == slug, _LODGING, _IMAGES, _VIDEOS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(f"No vacation with slug '{slug}' was found.")
        return Result.success(self.mapper.to_dto(result.data))

    async def create_async(self, dto: VacationDto) -> Result[VacationDto]:
        slug = await self._free_slug(dto.slug or dto.name)
        if not slug.succeeded:
            return slug.cast()

        vacation = self.mapper.apply(dto, Vacation(id=dto.id) if dto.id else Vacation())
        vacation.slug = slug.data

        created = await self.vacation_repository.create_async(vacation)
        if not created.succeeded:
            return created.cast()

        saved = await self.vacation_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("vacation_created", vacation_id=vacation.id, slug=vacation.slug)
        return Result.success(self.mapper.to_dto(vacation))

    async def update_async(self, dto: VacationDto) -> Result[VacationDto]:
        """Update a vacation; a changed slug is made unique again."""
        found = await self.vacation_repository.find_by_id_async(dto.id or "", True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(vacation_not_found(dto.id or ""))

        vacation = self.mapper.apply(dto, found.data)
        if dto.slug and generate_slug(dto.slug) != vacation.slug:
            slug = await self._free_slug(dto.slug, vacation.id)
            if not slug.succeeded:
                return slug.cast()
            vacation.slug = slug.data

        updated = self.vacation_repository.update(vacation)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.vacation_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("vacation_updated", vacation_id=vacation.id)
        return Result.success(self.mapper.to_dto(vacation))

    async def duplicate_async(self, vacation_id: str) -> Result[VacationDto]:
        """
        Copy a vacation as an unpublished draft.

        The copy gets its own slug and links to the same images and videos.
        """
        found = await self.vacation_repository.first_or_default_async(
            LambdaSpec(Vacation.id == vacation_id, _IMAGES, _VIDEOS)
        )
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(f"Vacation '{vacation_id}' not found for duplication.")
        source = found.data

        slug = await self._free_slug(f"{source.name} copy")
        if not slug.succeeded:
            return slug.cast()

        copy = self.mapper.apply(self.mapper.to_dto(source), Vacation())
        copy.slug = slug.data
        copy.published = False
        copy.images = [
            VacationImage(image_id=link.image_id, selector=link.selector, order=link.order)
            for link in source.images
        ]
        copy.videos = [
            VacationVideo(video_id=link.video_id, order=link.order) for link in source.videos
        ]

        created = await self.vacation_repository.create_async(copy)
        if not created.succeeded:
            return created.cast()

        saved = await self.vacation_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("vacation_duplicated", source_id=vacation_id, vacation_id=copy.id)
        return Result.success(self.mapper.to_dto(copy))

    async def remove_async(self, vacation_id: str) -> Result[None]:
        deleted = await self.vacation_repository.delete_async(vacation_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.vacation_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("vacation_removed", vacation_id=vacation_id)
        return Result.success(message=f"Vacation '{vacation_id}' was removed.")

    async def images_async(self, vacation_id: str) -> Result[list[EntityImageDto]]:
        return await self.image_links.images_async(vacation_id)

    async def videos_async(self, vacation_id: str) -> Result[list[EntityVideoDto]]:
        return await self.video_links.videos_async(vacation_id)

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)

    async def add_video_async(self, request: AddEntityVideoRequest) -> Result[EntityVideoDto]:
        return await self.video_links.add_async(request)

    async def remove_video_async(self, link_id: str) -> Result[None]:
        return await self.video_links.remove_async(link_id)
