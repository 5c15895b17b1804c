"""Read side of the product module."""

from sqlalchemy import or_

from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.filing.dtos import EntityImageDto, EntityVideoDto
from bizhub.application.filing.entity_links import EntityImageLinker, EntityVideoLinker
from bizhub.application.filing.mappers import ImageMapper, VideoMapper
from bizhub.application.products.dtos import ProductDto, ProductPageParameters
from bizhub.application.products.mappers import ProductMapper
from bizhub.config import Settings
from bizhub.models import Product, ProductImage, ProductVideo

PRODUCT_ORDER_FIELDS = ("name", "display_name", "sku", "rating", "featured", "created_on")

_PRICING = Include(Product.pricing)
_IMAGES = Include(Product.images).then(ProductImage.image)
_VIDEOS = Include(Product.videos).then(ProductVideo.video)
_VARIANTS = Include(Product.variants).then(Product.pricing)


def product_not_found(product_id: str) -> str:
    return f"No product with id matching '{product_id}' was found in the database"


class ProductQueryService:
    """Lists and looks up products as DTOs."""

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

    async def paged_products_async(
        self, params: ProductPageParameters
    ) -> PaginatedResult[ProductDto]:
        """
        One page of products.

        Featured, active, owner and search filters are only applied when
        supplied. Search matches the name or the description.

        Args:
            params: Paging, ordering and filters, 12 per page by name by default

        Returns:
            PaginatedResult of product DTOs with pricing and images
        """
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(params.featured, lambda featured: Product.featured.is_(featured))
            .and_if(params.active, lambda active: Product.active.is_(active))
            .and_if(params.shop_owner_id, lambda owner: Product.shop_owner_id == owner)
            .and_if(
                search or None,
                lambda text: or_(
                    Product.name.icontains(text, autoescape=True),
                    Product.description.icontains(text, autoescape=True),
                ),
            )
        )
        page = await self.product_repository.paged_list_async(
            LambdaSpec(predicate.build(), _PRICING, _IMAGES),
            params.to_pagination(),
            params.order_by,
            PRODUCT_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(product) for product in page.data)

    async def all_products_async(self) -> Result[list[ProductDto]]:
        result = await self.product_repository.list_async(LambdaSpec(None, _PRICING))
        return result.map(
            lambda products: [
                self.mapper.to_dto(product)
                for product in sorted(products, key=lambda product: product.name.lower())
            ]
        )

    async def product_async(self, product_id: str) -> Result[ProductDto]:
        spec = LambdaSpec(Product.id == product_id, _PRICING, _IMAGES, _VIDEOS, _VARIANTS)
        result = await self.product_repository.first_or_default_async(spec)
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(product_not_found(product_id))
        return Result.success(self.mapper.to_dto(result.data))

    async def variants_async(self, product_id: str) -> Result[list[ProductDto]]:
        result = await self.product_repository.list_async(
            LambdaSpec(Product.variant_parent_id == product_id, _PRICING)
        )
        return result.map(
            lambda variants: [
                self.mapper.to_dto(variant)
                for variant in sorted(variants, key=lambda variant: variant.name.lower())
            ]
        )

    async def images_async(self, product_id: str) -> Result[list[EntityImageDto]]:
        return await self.image_links.images_async(product_id)

    async def videos_async(self, product_id: str) -> Result[list[EntityVideoDto]]:
        return await self.video_links.videos_async(product_id)
