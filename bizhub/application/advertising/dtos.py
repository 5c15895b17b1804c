"""DTOs for advertisements, advertisement tiers and affiliates."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.filing.dtos import EntityImageDto
from bizhub.domain.advertising import AdvertisementType, ReviewStatus


class AdvertisementTierDto(BaseModel):
    """A purchasable advertising package."""

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    price: Decimal = Field(Decimal("0"), ge=0)
    days: int = Field(0, ge=0, description="How long an advertisement on this tier runs")
    order: int = 0
    images: list[EntityImageDto] = Field(default_factory=list)


class AdvertisementDto(BaseModel):
    """An advertisement as submitted and displayed."""

    id: str | None = None
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    url: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: ReviewStatus = ReviewStatus.PENDING
    setup_completed: bool = False
    advertisement_type: AdvertisementType = AdvertisementType.BANNER
    advertisement_tier_id: str | None = None
    advertisement_tier: AdvertisementTierDto | None = None
    user_id: str | None = None
    images: list[EntityImageDto] = Field(default_factory=list)
    created_on: datetime | None = None


class AdvertisementListingPageParameters(RequestParameters):
    """Paged advertisement listing, optionally filtered by status and owner."""

    status: ReviewStatus | None = None
    user_id: str | None = None


class AffiliateDto(BaseModel):
    """A partner link shown in display order."""

    id: str | None = None
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    url: str | None = None
    featured: bool = False
    display_order: int | None = Field(None, description="Assigned on create when omitted")
    images: list[EntityImageDto] = Field(default_factory=list)


class AffiliateOrderItem(BaseModel):
    id: str = Field(..., min_length=1)
    display_order: int = Field(..., ge=0)


class AffiliateOrderUpdateRequest(BaseModel):
    """New display positions for a set of affiliates."""

    items: list[AffiliateOrderItem] = Field(..., min_length=1)
