"""Mapper for Product ORM <-> DTO conversion."""

from bizhub.application.common.mapping import loaded_or_none
from bizhub.application.filing.mappers import ImageMapper, VideoMapper
from bizhub.application.products.dtos import PriceDto, ProductDto
from bizhub.domain.products import generate_slug
from bizhub.models import Price, Product


class ProductMapper:
    """Mapper for Product ORM <-> DTO conversion."""

    def __init__(
        self, image_mapper: ImageMapper | None = None, video_mapper: VideoMapper | None = None
    ) -> None:
        self.image_mapper = image_mapper or ImageMapper()
        self.video_mapper = video_mapper or VideoMapper()

    @staticmethod
    def price_to_dto(price: Price) -> PriceDto:
        return PriceDto(
            cost_excl=price.cost_excl,
            selling_price=price.selling_price,
            discount_percentage=price.discount_percentage,
            discount_end_date=price.discount_end_date,
            vatable=price.vatable,
            shipping_amount=price.shipping_amount,
        )

    @staticmethod
    def apply_price(dto: PriceDto, price: Price | None = None) -> Price:
        price = price or Price()
        price.cost_excl = dto.cost_excl
        price.selling_price = dto.selling_price
        price.discount_percentage = dto.discount_percentage
        price.discount_end_date = dto.discount_end_date
        price.vatable = dto.vatable
        price.shipping_amount = dto.shipping_amount
        return price

    def to_dto(self, product: Product) -> ProductDto:
        pricing = loaded_or_none(product, "pricing")
        variants = loaded_or_none(product, "variants") or []
        return ProductDto(
            id=product.id,
            name=product.name,
            display_name=product.display_name,
            slug=product.slug,
            sku=product.sku,
            short_description=product.short_description,
            description=product.description,
            shop_owner_id=product.shop_owner_id,
            rating=product.rating,
            featured=product.featured,
            active=product.active,
            tags=product.tags,
            variant_parent_id=product.variant_parent_id,
            pricing=self.price_to_dto(pricing) if pricing is not None else None,
            images=self.image_mapper.entity_images_to_dto(product),
            videos=self.video_mapper.entity_videos_to_dto(product),
            variants=[self.to_dto(variant) for variant in variants],
            created_on=product.created_on,
        )

    def to_entity(self, dto: ProductDto) -> Product:
        product = Product(id=dto.id) if dto.id else Product()
        product = self.apply(dto, product)
        if dto.pricing is not None:
            product.pricing = self.apply_price(dto.pricing)
        return product

    def apply(self, dto: ProductDto, product: Product) -> Product:
        """
        Copy editable fields onto an entity.

        The display name falls back to the name and the slug is always
        normalised, generated from the name when none is given.
        """
        product.name = dto.name
        product.display_name = dto.display_name or dto.name
        product.slug = generate_slug(dto.slug or dto.name)
        product.sku = dto.sku
        product.short_description = dto.short_description
        product.description = dto.description
        product.shop_owner_id = dto.shop_owner_id
        product.rating = dto.rating
        product.featured = dto.featured
        product.active = dto.active
        product.tags = dto.tags
        product.variant_parent_id = dto.variant_parent_id
        return product
