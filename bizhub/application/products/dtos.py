"""DTOs for products and their pricing."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bizhub.application.common.pagination import MAX_PAGE_SIZE
from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.filing.dtos import EntityImageDto, EntityVideoDto


class PriceDto(BaseModel):
    """Pricing of one product."""

    cost_excl: Decimal = Field(Decimal("0"), ge=0)
    selling_price: Decimal = Field(Decimal("0"), ge=0)
    discount_percentage: Decimal = Field(Decimal("0"), ge=0, le=100)
    discount_end_date: datetime | None = None
    vatable: bool = True
    shipping_amount: Decimal = Field(Decimal("0"), ge=0)


class ProductDto(BaseModel):
    """A product as listed in a shop."""

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    display_name: str | None = Field(None, description="Defaults to the name")
    slug: str | None = Field(None, description="Generated from the name when omitted")
    sku: str | None = None
    short_description: str | None = Field(None, max_length=500)
    description: str | None = None
    shop_owner_id: str | None = None
    rating: float = Field(0.0, ge=0, le=5)
    featured: bool = False
    active: bool = True
    tags: str | None = None
    variant_parent_id: str | None = None
    pricing: PriceDto | None = None
    images: list[EntityImageDto] = Field(default_factory=list)
    videos: list[EntityVideoDto] = Field(default_factory=list)
    variants: list["ProductDto"] = Field(default_factory=list)
    created_on: datetime | None = None


class ProductPageParameters(RequestParameters):
    """Paged product listing: 12 per page by name unless told otherwise."""

    page_size: int = Field(12, ge=1, le=MAX_PAGE_SIZE, description="Items per page")
    order_by: str | None = Field("Name", description='Ordering, e.g. "Name asc"')
    featured: bool | None = None
    active: bool | None = None
    shop_owner_id: str | None = None
