"""Mappers for advertising entities <-> DTOs."""

from bizhub.application.advertising.dtos import (
    AdvertisementDto,
    AdvertisementTierDto,
    AffiliateDto,
)
from bizhub.application.common.mapping import loaded_or_none
from bizhub.application.filing.mappers import ImageMapper
from bizhub.models import Advertisement, AdvertisementTier, Affiliate


class AdvertisementTierMapper:
    """Mapper for AdvertisementTier ORM <-> DTO conversion."""

    def __init__(self, image_mapper: ImageMapper | None = None) -> None:
        self.image_mapper = image_mapper or ImageMapper()

    def to_dto(self, tier: AdvertisementTier) -> AdvertisementTierDto:
        return AdvertisementTierDto(
            id=tier.id,
            name=tier.name,
            description=tier.description,
            price=tier.price,
            days=tier.days,
            order=tier.order,
            images=self.image_mapper.entity_images_to_dto(tier),
        )

    def to_entity(
        self, dto: AdvertisementTierDto, tier: AdvertisementTier | None = None
    ) -> AdvertisementTier:
        """Convert DTO to a new entity, or copy it onto an existing one."""
        if tier is None:
            tier = AdvertisementTier(id=dto.id) if dto.id else AdvertisementTier()
        tier.name = dto.name
        tier.description = dto.description
        tier.price = dto.price
        tier.days = dto.days
        tier.order = dto.order
        return tier


class AdvertisementMapper:
    """Mapper for Advertisement ORM <-> DTO conversion."""

    def __init__(self, image_mapper: ImageMapper | None = None) -> None:
        self.image_mapper = image_mapper or ImageMapper()
        self.tier_mapper = AdvertisementTierMapper(self.image_mapper)

    def to_dto(self, advertisement: Advertisement) -> AdvertisementDto:
        tier = loaded_or_none(advertisement, "advertisement_tier")
        return AdvertisementDto(
            id=advertisement.id,
            title=advertisement.title,
            description=advertisement.description,
            url=advertisement.url,
            start_date=advertisement.start_date,
            end_date=advertisement.end_date,
            status=advertisement.status,
            setup_completed=advertisement.setup_completed,
            advertisement_type=advertisement.advertisement_type,
            advertisement_tier_id=advertisement.advertisement_tier_id,
            advertisement_tier=self.tier_mapper.to_dto(tier) if tier is not None else None,
            user_id=advertisement.user_id,
            images=self.image_mapper.entity_images_to_dto(advertisement),
            created_on=advertisement.created_on,
        )

    def to_entity(self, dto: AdvertisementDto) -> Advertisement:
        """Build a new entity from every user-settable field of the DTO."""
        advertisement = Advertisement(
            title=dto.title,
            description=dto.description,
            url=dto.url,
            start_date=dto.start_date,
            end_date=dto.end_date,
            status=dto.status,
            setup_completed=dto.setup_completed,
            advertisement_type=dto.advertisement_type,
            advertisement_tier_id=dto.advertisement_tier_id,
            user_id=dto.user_id,
        )
        if dto.id:
            advertisement.id = dto.id
        return advertisement

    def apply(self, dto: AdvertisementDto, advertisement: Advertisement) -> Advertisement:
        """
        Copy editable fields onto a tracked entity.

        The tier is kept when the DTO names none, and the owner is only
        replaced by a non-blank user id.
        """
        advertisement.title = dto.title
        advertisement.description = dto.description
        advertisement.url = dto.url
        advertisement.start_date = dto.start_date
        advertisement.end_date = dto.end_date
        advertisement.status = dto.status
        advertisement.setup_completed = dto.setup_completed
        advertisement.advertisement_type = dto.advertisement_type
        if dto.advertisement_tier_id:
            advertisement.advertisement_tier_id = dto.advertisement_tier_id
        if dto.user_id and dto.user_id.strip():
            advertisement.user_id = dto.user_id
        return advertisement


class AffiliateMapper:
    """Mapper for Affiliate ORM <-> DTO conversion."""

    def __init__(self, image_mapper: ImageMapper | None = None) -> None:
        self.image_mapper = image_mapper or ImageMapper()

    def to_dto(self, affiliate: Affiliate) -> AffiliateDto:
        return AffiliateDto(
            id=affiliate.id,
            title=affiliate.title,
            description=affiliate.description,
            url=affiliate.url,
            featured=affiliate.featured,
            display_order=affiliate.display_order,
            images=self.image_mapper.entity_images_to_dto(affiliate),
        )

    def to_entity(self, dto: AffiliateDto, affiliate: Affiliate | None = None) -> Affiliate:
        """Convert DTO to a new entity, or copy it onto an existing one."""
        if affiliate is None:
            affiliate = Affiliate(id=dto.id) if dto.id else Affiliate()
        affiliate.title = dto.title
        affiliate.description = dto.description
        affiliate.url = dto.url
        affiliate.featured = dto.featured
        if dto.display_order is not None:
            affiliate.display_order = dto.display_order
        return affiliate
