"""Read side of the advertisement module."""

from datetime import UTC, datetime

from bizhub.application.advertising.dtos import (
    AdvertisementDto,
    AdvertisementListingPageParameters,
)
from bizhub.application.advertising.mappers import AdvertisementMapper
from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.filing.dtos import EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.config import Settings
from bizhub.domain.advertising import ReviewStatus
from bizhub.models import (
    Advertisement,
    AdvertisementImage,
    AdvertisementTier,
    AdvertisementTierImage,
)

ADVERTISEMENT_ORDER_FIELDS = ("title", "start_date", "end_date", "status", "created_on")

_TIER_IMAGES = (
    Include(Advertisement.advertisement_tier)
    .then(AdvertisementTier.images)
    .then(AdvertisementTierImage.image)
)
_IMAGES = Include(Advertisement.images).then(AdvertisementImage.image)


class AdvertisementQueryService:
    """Lists and looks up advertisements as DTOs."""

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

    async def all_advertisements_async(self) -> Result[list[AdvertisementDto]]:
        result = await self.advertisement_repository.list_async(LambdaSpec(None, _IMAGES))
        return result.map(
            lambda advertisements: [
                self.mapper.to_dto(advertisement)
                for advertisement in sorted(
                    advertisements, key=lambda advertisement: advertisement.created_on, reverse=True
                )
            ]
        )

    async def active_advertisements_async(
        self, now: datetime | None = None
    ) -> Result[list[AdvertisementDto]]:
        """
        Advertisements that may be shown right now.

        Active means approved, set up, and running: start_date <= now <= end_date.
        """
        now = now or datetime.now(UTC)
        predicate = (
            PredicateBuilder.new(True)
            .and_(Advertisement.status == ReviewStatus.APPROVED)
            .and_(Advertisement.setup_completed.is_(True))
            .and_(Advertisement.start_date <= now)
            .and_(Advertisement.end_date >= now)
        )
        result = await self.advertisement_repository.list_async(
            LambdaSpec(predicate.build(), _IMAGES)
        )
        return result.map(
            lambda advertisements: [
                self.mapper.to_dto(advertisement)
                for advertisement in sorted(
                    advertisements, key=lambda advertisement: advertisement.start_date
                )
            ]
        )

    async def paged_listings_async(
        self, params: AdvertisementListingPageParameters
    ) -> PaginatedResult[AdvertisementDto]:
        """
        One page of advertisements.

        Status, owner and search filters are only applied when supplied.
        """
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(params.status, lambda status: Advertisement.status == status)
            .and_if(params.user_id, lambda user_id: Advertisement.user_id == user_id)
            .and_if(
                search or None, lambda text: Advertisement.title.icontains(text, autoescape=True)
            )
        )
        page = await self.advertisement_repository.paged_list_async(
            LambdaSpec(predicate.build(), _IMAGES),
            params.to_pagination(),
            params.order_by or "CreatedOn desc",
            ADVERTISEMENT_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(advertisement) for advertisement in page.data)

    async def advertisement_async(self, advertisement_id: str) -> Result[AdvertisementDto]:
        spec = LambdaSpec(Advertisement.id == advertisement_id, _TIER_IMAGES, _IMAGES)
        result = await self.advertisement_repository.first_or_default_async(spec)
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("Advertisement not found.")
        return Result.success(self.mapper.to_dto(result.data))

    async def images_async(self, advertisement_id: str) -> Result[list[EntityImageDto]]:
        return await self.image_links.images_async(advertisement_id)
