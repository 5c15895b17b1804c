"""Database models."""

import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from bizhub.database import Base
from bizhub.domain.advertising import AdvertisementType, ReviewStatus
from bizhub.domain.filing import UploadType
from bizhub.domain.schools import ConsentDirection, ConsentType, Gender


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid.uuid4())


class AuditMixin:
    """Key and audit columns shared by every table."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False
    )
    modified_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


# ---------------------------------------------------------------------------
# Filing
# ---------------------------------------------------------------------------


class Image(AuditMixin, Base):
    """Metadata of an uploaded image stored on local disk."""

    __tablename__ = "images"

    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    relative_path: Mapped[str] = mapped_column(String(500), nullable=False)
    image_type: Mapped[UploadType] = mapped_column(
        SAEnum(UploadType, native_enum=False, length=20), default=UploadType.IMAGE, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Image(id={self.id}, file_name='{self.file_name}')>"


class Video(AuditMixin, Base):
    """Metadata of an uploaded video stored on local disk."""

    __tablename__ = "videos"

    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    relative_path: Mapped[str] = mapped_column(String(500), nullable=False)

    def __repr__(self) -> str:
        return f"<Video(id={self.id}, file_name='{self.file_name}')>"


class EntityImageMixin:
    """Columns of a row linking an owning entity to an image."""

    image_id: Mapped[str] = mapped_column(
        ForeignKey("images.id", ondelete="CASCADE"), nullable=False, index=True
    )
    selector: Mapped[str | None] = mapped_column(String(100), nullable=True)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @declared_attr
    def image(cls) -> Mapped[Image]:
        return relationship(Image)


class EntityVideoMixin:
    """Columns of a row linking an owning entity to a video."""

    video_id: Mapped[str] = mapped_column(
        ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @declared_attr
    def video(cls) -> Mapped[Video]:
        return relationship(Video)


# ---------------------------------------------------------------------------
# Advertising
# ---------------------------------------------------------------------------


class AdvertisementTier(AuditMixin, Base):
    """A purchasable advertising package."""

    __tablename__ = "advertisement_tiers"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"), nullable=False)
    days: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    images: Mapped[list["AdvertisementTierImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="AdvertisementTierImage.order",
    )

    def __repr__(self) -> str:
        return f"<AdvertisementTier(id={self.id}, name='{self.name}')>"


class AdvertisementTierImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "advertisement_tier_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("advertisement_tiers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[AdvertisementTier] = relationship(back_populates="images")


class Advertisement(AuditMixin, Base):
    """An advertisement submitted for review and display."""

    __tablename__ = "advertisements"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[ReviewStatus] = mapped_column(
        SAEnum(ReviewStatus, native_enum=False, length=20),
        default=ReviewStatus.PENDING,
        nullable=False,
        index=True,
    )
    setup_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    advertisement_type: Mapped[AdvertisementType] = mapped_column(
        SAEnum(AdvertisementType, native_enum=False, length=20),
        default=AdvertisementType.BANNER,
        nullable=False,
    )
    advertisement_tier_id: Mapped[str | None] = mapped_column(
        ForeignKey("advertisement_tiers.id", ondelete="SET NULL"), nullable=True, index=True
    )
    user_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)

    advertisement_tier: Mapped[AdvertisementTier | None] = relationship()
    images: Mapped[list["AdvertisementImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="AdvertisementImage.order",
    )

    def __repr__(self) -> str:
        return f"<Advertisement(id={self.id}, title='{self.title}', status={self.status})>"


class AdvertisementImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "advertisement_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("advertisements.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Advertisement] = relationship(back_populates="images")


class Affiliate(AuditMixin, Base):
    """A partner link shown in the affiliates section, in display order."""

    __tablename__ = "affiliates"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    images: Mapped[list["AffiliateImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="AffiliateImage.order",
    )

    def __repr__(self) -> str:
        return f"<Affiliate(id={self.id}, title='{self.title}', order={self.display_order})>"


class AffiliateImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "affiliate_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("affiliates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Affiliate] = relationship(back_populates="images")


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class Product(AuditMixin, Base):
    """A product listed in a shop, optionally a variant of another product."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    sku: Mapped[str | None] = mapped_column(String(100), nullable=True)
    short_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    shop_owner_id: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    tags: Mapped[str | None] = mapped_column(String(500), nullable=True)
    variant_parent_id: Mapped[str | None] = mapped_column(
        ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True
    )

    variant_parent: Mapped["Product | None"] = relationship(
        back_populates="variants", remote_side="Product.id"
    )
    variants: Mapped[list["Product"]] = relationship(
        back_populates="variant_parent", passive_deletes=True
    )
    pricing: Mapped["Price | None"] = relationship(
        back_populates="product",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    images: Mapped[list["ProductImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProductImage.order",
    )
    videos: Mapped[list["ProductVideo"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProductVideo.order",
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"


class Price(AuditMixin, Base):
    """Pricing of one product."""

    __tablename__ = "prices"

    product_id: Mapped[str] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    cost_excl: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"))
    selling_price: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"))
    discount_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=Decimal("0"))
    discount_end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    vatable: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    shipping_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"))

    product: Mapped[Product] = relationship(back_populates="pricing")


class ProductImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "product_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Product] = relationship(back_populates="images")


class ProductVideo(AuditMixin, EntityVideoMixin, Base):
    __tablename__ = "product_videos"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Product] = relationship(back_populates="videos")


# ---------------------------------------------------------------------------
# Schools
# ---------------------------------------------------------------------------


class Parent(AuditMixin, Base):
    """A parent or guardian of one or more learners."""

    __tablename__ = "parents"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    id_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone_nr: Mapped[str | None] = mapped_column(String(30), nullable=True)
    require_consent: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_notifications: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_emails: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    learners: Mapped[list["LearnerParent"]] = relationship(
        back_populates="parent", cascade="all, delete-orphan", passive_deletes=True
    )
    event_consents: Mapped[list["ParentPermission"]] = relationship(
        back_populates="parent", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Parent(id={self.id}, name='{self.first_name} {self.last_name}')>"


class Learner(AuditMixin, Base):
    """A learner enrolled at the school."""

    __tablename__ = "learners"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    id_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    gender: Mapped[Gender] = mapped_column(
        SAEnum(Gender, native_enum=False, length=20), default=Gender.ALL, nullable=False
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone_nr: Mapped[str | None] = mapped_column(String(30), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    medical_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    medical_aid_parent_id: Mapped[str | None] = mapped_column(
        ForeignKey("parents.id", ondelete="SET NULL"), nullable=True
    )
    receive_notifications: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_messages: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    receive_emails: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    parents: Mapped[list["LearnerParent"]] = relationship(
        back_populates="learner", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Learner(id={self.id}, name='{self.first_name} {self.last_name}')>"


class LearnerParent(AuditMixin, Base):
    """Link between a learner and a parent."""

    __tablename__ = "learner_parents"
    __table_args__ = (UniqueConstraint("learner_id", "parent_id"),)

    learner_id: Mapped[str] = mapped_column(
        ForeignKey("learners.id", ondelete="CASCADE"), nullable=False, index=True
    )
    parent_id: Mapped[str] = mapped_column(
        ForeignKey("parents.id", ondelete="CASCADE"), nullable=False, index=True
    )
    parent_consent_required: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    learner: Mapped[Learner] = relationship(back_populates="parents")
    parent: Mapped[Parent] = relationship(back_populates="learners")


class SchoolEvent(AuditMixin, Base):
    """A school outing or function parents may have to consent to."""

    __tablename__ = "school_events"

    heading: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    google_map_link: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    home_event: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    attendance_consent_required: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    transport_consent_required: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )

    participants: Mapped[list["SchoolEventParticipant"]] = relationship(
        back_populates="event", cascade="all, delete-orphan", passive_deletes=True
    )
    images: Mapped[list["SchoolEventImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SchoolEventImage.order",
    )

    def __repr__(self) -> str:
        return f"<SchoolEvent(id={self.id}, heading='{self.heading}')>"


class SchoolEventParticipant(AuditMixin, Base):
    """A learner taking part in a school event."""

    __tablename__ = "school_event_participants"
    __table_args__ = (UniqueConstraint("event_id", "learner_id"),)

    event_id: Mapped[str] = mapped_column(
        ForeignKey("school_events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    learner_id: Mapped[str] = mapped_column(
        ForeignKey("learners.id", ondelete="CASCADE"), nullable=False, index=True
    )

    event: Mapped[SchoolEvent] = relationship(back_populates="participants")
    learner: Mapped[Learner] = relationship()


class SchoolEventImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "school_event_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("school_events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[SchoolEvent] = relationship(back_populates="images")


class ParentPermission(AuditMixin, Base):
    """A parent's answer to one consent question for one learner and event."""

    __tablename__ = "parent_permissions"
    __table_args__ = (UniqueConstraint("event_id", "parent_id", "learner_id", "consent_type"),)

    event_id: Mapped[str] = mapped_column(
        ForeignKey("school_events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    parent_id: Mapped[str] = mapped_column(
        ForeignKey("parents.id", ondelete="CASCADE"), nullable=False, index=True
    )
    learner_id: Mapped[str] = mapped_column(
        ForeignKey("learners.id", ondelete="CASCADE"), nullable=False, index=True
    )
    consent_type: Mapped[ConsentType] = mapped_column(
        SAEnum(ConsentType, native_enum=False, length=20), nullable=False
    )
    granted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    consent_direction: Mapped[ConsentDirection | None] = mapped_column(
        SAEnum(ConsentDirection, native_enum=False, length=20), nullable=True
    )

    parent: Mapped[Parent] = relationship(back_populates="event_consents")
    learner: Mapped[Learner] = relationship()


# ---------------------------------------------------------------------------
# Accommodation
# ---------------------------------------------------------------------------


class Lodging(AuditMixin, Base):
    """A guest house, lodge or hotel offering rooms."""

    __tablename__ = "lodgings"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    teaser: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    facilities: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    suburb: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_nr: Mapped[str | None] = mapped_column(String(30), nullable=True)
    website: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    grading: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(5, 2), default=Decimal("0"), nullable=False)
    allow_bookings: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    rooms: Mapped[list["Room"]] = relationship(
        back_populates="lodging",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Room.name",
    )
    images: Mapped[list["LodgingImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LodgingImage.order",
    )
    videos: Mapped[list["LodgingVideo"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="LodgingVideo.order",
    )

    def __repr__(self) -> str:
        return f"<Lodging(id={self.id}, name='{self.name}')>"


class Room(AuditMixin, Base):
    """A bookable room type at a lodging."""

    __tablename__ = "rooms"

    lodging_id: Mapped[str] = mapped_column(
        ForeignKey("lodgings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    bed_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    room_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    max_occupancy: Mapped[int] = mapped_column(Integer, default=2, nullable=False)
    max_adults: Mapped[int] = mapped_column(Integer, default=2, nullable=False)
    first_child_stays_free: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    rate: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"), nullable=False)

    lodging: Mapped[Lodging] = relationship(back_populates="rooms")


class LodgingImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "lodging_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("lodgings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Lodging] = relationship(back_populates="images")


class LodgingVideo(AuditMixin, EntityVideoMixin, Base):
    __tablename__ = "lodging_videos"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("lodgings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Lodging] = relationship(back_populates="videos")


class Vacation(AuditMixin, Base):
    """A packaged holiday, optionally hosted at a lodging."""

    __tablename__ = "vacations"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    reference_nr: Mapped[str | None] = mapped_column(String(50), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    availability_cut_off_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    nights: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    room_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    max_booking_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    currency_symbol: Mapped[str] = mapped_column(String(5), default="R", nullable=False)
    is_extension: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    lodging_id: Mapped[str | None] = mapped_column(
        ForeignKey("lodgings.id", ondelete="SET NULL"), nullable=True, index=True
    )

    lodging: Mapped[Lodging | None] = relationship()
    images: Mapped[list["VacationImage"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VacationImage.order",
    )
    videos: Mapped[list["VacationVideo"]] = relationship(
        back_populates="entity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VacationVideo.order",
    )

    def __repr__(self) -> str:
        return f"<Vacation(id={self.id}, slug='{self.slug}')>"


class VacationImage(AuditMixin, EntityImageMixin, Base):
    __tablename__ = "vacation_images"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("vacations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Vacation] = relationship(back_populates="images")


class VacationVideo(AuditMixin, EntityVideoMixin, Base):
    __tablename__ = "vacation_videos"

    entity_id: Mapped[str] = mapped_column(
        ForeignKey("vacations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    entity: Mapped[Vacation] = relationship(back_populates="videos")
