"""Read side of the affiliate module."""

from bizhub.application.advertising.dtos import AffiliateDto
from bizhub.application.advertising.mappers import AffiliateMapper
from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.filing.mappers import ImageMapper
from bizhub.config import Settings
from bizhub.models import Affiliate, AffiliateImage

AFFILIATE_ORDER_FIELDS = ("display_order", "title", "featured", "created_on")

_IMAGES = Include(Affiliate.images).then(AffiliateImage.image)


class AffiliateQueryService:
    """Lists and looks up affiliates as DTOs."""

    def __init__(
        self, affiliate_repository: RepositoryProtocol[Affiliate, str], settings: Settings
    ) -> None:
        self.affiliate_repository = affiliate_repository
        self.mapper = AffiliateMapper(ImageMapper(settings.API_BASE_ADDRESS))

    async def all_affiliates_async(self) -> Result[list[AffiliateDto]]:
        """Every affiliate, by display order then title."""
        result = await self.affiliate_repository.list_async(LambdaSpec(None, _IMAGES))
        return result.map(
            lambda affiliates: [
                self.mapper.to_dto(affiliate)
                for affiliate in sorted(
                    affiliates, key=lambda affiliate: (affiliate.display_order, affiliate.title)
                )
            ]
        )

    async def paged_affiliates_async(
        self, params: RequestParameters
    ) -> PaginatedResult[AffiliateDto]:
        search = params.search_text.strip() if params.search_text else None
        predicate = PredicateBuilder.new(True).and_if(
            search or None, lambda text: Affiliate.title.icontains(text, autoescape=True)
        )
        page = await self.affiliate_repository.paged_list_async(
            LambdaSpec(predicate.build(), _IMAGES),
            params.to_pagination(),
            params.order_by or "DisplayOrder",
            AFFILIATE_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(affiliate) for affiliate in page.data)

    async def affiliate_async(self, affiliate_id: str) -> Result[AffiliateDto]:
        result = await self.affiliate_repository.first_or_default_async(
            LambdaSpec(Affiliate.id == affiliate_id, _IMAGES)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("Affiliate not found.")
        return Result.success(self.mapper.to_dto(result.data))
