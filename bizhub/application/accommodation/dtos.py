"""DTOs for lodgings, rooms and vacations."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.filing.dtos import EntityImageDto, EntityVideoDto


class RoomDto(BaseModel):
    """A bookable room type."""

    id: str | None = None
    lodging_id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    bed_count: int = Field(1, ge=0)
    room_count: int = Field(1, ge=0)
    max_occupancy: int = Field(2, ge=1)
    max_adults: int = Field(2, ge=1)
    first_child_stays_free: bool = False
    rate: Decimal = Field(Decimal("0"), ge=0)


class LodgingDto(BaseModel):
    """A lodging with its rooms and media."""

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    teaser: str | None = Field(None, max_length=500)
    description: str | None = None
    facilities: str | None = None
    address: str | None = None
    suburb: str | None = None
    city: str | None = None
    email: str | None = None
    phone_nr: str | None = None
    website: str | None = None
    grading: int = Field(0, ge=0, le=5, description="Star grading")
    rating: float = Field(0.0, ge=0, le=5)
    rate: Decimal = Field(Decimal("0"), ge=0)
    discount: Decimal = Field(Decimal("0"), ge=0, le=100)
    allow_bookings: bool = False
    active: bool = True
    rooms: list[RoomDto] = Field(default_factory=list)
    images: list[EntityImageDto] = Field(default_factory=list)
    videos: list[EntityVideoDto] = Field(default_factory=list)
    created_on: datetime | None = None


class LodgingPageParameters(RequestParameters):
    order_by: str | None = Field("Name", description='Ordering, e.g. "Rating desc"')
    active: bool | None = None
    allow_bookings: bool | None = None


class VacationDto(BaseModel):
    """A packaged holiday."""

    id: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, description="Generated from the name when omitted")
    reference_nr: str | None = None
    description: str | None = None
    start_date: datetime | None = None
    availability_cut_off_date: datetime | None = None
    nights: int = Field(1, ge=1)
    room_count: int = Field(0, ge=0)
    max_booking_count: int = Field(0, ge=0)
    currency_symbol: str = Field("R", max_length=5)
    is_extension: bool = False
    published: bool = False
    lodging_id: str | None = None
    lodging: LodgingDto | None = None
    images: list[EntityImageDto] = Field(default_factory=list)
    videos: list[EntityVideoDto] = Field(default_factory=list)
    created_on: datetime | None = None


class VacationPageParameters(RequestParameters):
    order_by: str | None = Field("StartDate", description='Ordering, e.g. "Name asc"')
    published: bool | None = None
    lodging_id: str | None = None
