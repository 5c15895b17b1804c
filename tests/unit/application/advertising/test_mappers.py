"""Tests for advertising mappers."""

from datetime import UTC, datetime
from decimal import Decimal

from bizhub.application.advertising.dtos import AdvertisementDto, AffiliateDto
from bizhub.application.advertising.mappers import AdvertisementMapper, AffiliateMapper
from bizhub.domain.advertising import AdvertisementType, ReviewStatus
from bizhub.models import Advertisement, AdvertisementTier


def make_dto(**overrides: object) -> AdvertisementDto:
    fields: dict[str, object] = {
        "title": "Summer Sale",
        "description": "Everything half price",
        "url": "https://shop.example.com/sale",
        "start_date": datetime(2026, 6, 1, tzinfo=UTC),
        "end_date": datetime(2026, 6, 30, tzinfo=UTC),
        "status": ReviewStatus.APPROVED,
        "setup_completed": True,
        "advertisement_type": AdvertisementType.SIDEBAR,
        "advertisement_tier_id": "tier-1",
        "user_id": "user-1",
    }
    fields.update(overrides)
    return AdvertisementDto(**fields)  # type: ignore[arg-type]


class TestAdvertisementMapper:
    def test_entity_round_trip_keeps_user_settable_fields(self) -> None:
        mapper = AdvertisementMapper()
        dto = make_dto()

        result = mapper.to_dto(mapper.to_entity(dto))

        assert result.model_dump(exclude={"id", "created_on"}) == dto.model_dump(
            exclude={"id", "created_on"}
        )

    def test_unloaded_relationships_map_to_empty(self) -> None:
        mapper = AdvertisementMapper()

        result = mapper.to_dto(Advertisement(title="Bare", status=ReviewStatus.PENDING))

        assert result.images == []
        assert result.advertisement_tier is None

    def test_loaded_tier_is_mapped(self) -> None:
        mapper = AdvertisementMapper()
        advertisement = mapper.to_entity(make_dto())
        advertisement.advertisement_tier = AdvertisementTier(
            name="Gold", price=Decimal("10.00"), days=7, order=1
        )

        result = mapper.to_dto(advertisement)

        assert result.advertisement_tier is not None
        assert result.advertisement_tier.name == "Gold"

    def test_apply_keeps_tier_and_owner_when_not_given(self) -> None:
        mapper = AdvertisementMapper()
        advertisement = mapper.to_entity(make_dto())

        mapper.apply(
            make_dto(title="Renamed", advertisement_tier_id=None, user_id="   "), advertisement
        )

        assert advertisement.title == "Renamed"
        assert advertisement.advertisement_tier_id == "tier-1"
        assert advertisement.user_id == "user-1"


class TestAffiliateMapper:
    def test_display_order_only_copied_when_supplied(self) -> None:
        mapper = AffiliateMapper()
        affiliate = mapper.to_entity(AffiliateDto(title="Partner", display_order=4))

        mapper.to_entity(AffiliateDto(title="Partner Inc"), affiliate)

        assert affiliate.title == "Partner Inc"
        assert affiliate.display_order == 4
