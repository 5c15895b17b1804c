"""Create the initial schema for media, advertising, products, schools and accommodation.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# Creation order; parents before the tables referencing them
TABLES = (
    "images",
    "videos",
    "advertisement_tiers",
    "advertisement_tier_images",
    "advertisements",
    "advertisement_images",
    "affiliates",
    "affiliate_images",
    "products",
    "prices",
    "product_images",
    "product_videos",
    "parents",
    "learners",
    "learner_parents",
    "school_events",
    "school_event_participants",
    "school_event_images",
    "parent_permissions",
    "lodgings",
    "rooms",
    "lodging_images",
    "lodging_videos",
    "vacations",
    "vacation_images",
    "vacation_videos",
)


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("created_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
    ]


def _enum(name: str, *members: str) -> sa.Enum:
    return sa.Enum(*members, name=name, native_enum=False, length=20)


def _index(table: str, *columns: str) -> None:
    for column in columns:
        op.create_index(op.f(f"ix_{table}_{column}"), table, [column], unique=False)


def _create_image_links(table: str, owner: str) -> None:
    op.create_table(
        table,
        *_audit_columns(),
        sa.Column("entity_id", sa.String(36), nullable=False),
        sa.Column("image_id", sa.String(36), nullable=False),
        sa.Column("selector", sa.String(100), nullable=True),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["entity_id"], [f"{owner}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    _index(table, "entity_id", "image_id")


def _create_video_links(table: str, owner: str) -> None:
    op.create_table(
        table,
        *_audit_columns(),
        sa.Column("entity_id", sa.String(36), nullable=False),
        sa.Column("video_id", sa.String(36), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["entity_id"], [f"{owner}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["video_id"], ["videos.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    _index(table, "entity_id", "video_id")


def _upgrade_filing() -> None:
    op.create_table(
        "images",
        *_audit_columns(),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("relative_path", sa.String(500), nullable=False),
        sa.Column(
            "image_type",
            _enum("uploadtype", "IMAGE", "COVER", "SLIDER", "BANNER", "MAP", "GALLERY"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("file_name"),
    )
    op.create_table(
        "videos",
        *_audit_columns(),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("relative_path", sa.String(500), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("file_name"),
    )


def _upgrade_advertising() -> None:
    op.create_table(
        "advertisement_tiers",
        *_audit_columns(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(18, 2), nullable=False),
        sa.Column("days", sa.Integer(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_image_links("advertisement_tier_images", "advertisement_tiers")

    op.create_table(
        "advertisements",
        *_audit_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "status", _enum("reviewstatus", "PENDING", "APPROVED", "REJECTED"), nullable=False
        ),
        sa.Column("setup_completed", sa.Boolean(), nullable=False),
        sa.Column(
            "advertisement_type",
            _enum("advertisementtype", "BANNER", "SIDEBAR", "POPUP", "LISTING"),
            nullable=False,
        ),
        sa.Column("advertisement_tier_id", sa.String(36), nullable=True),
        sa.Column("user_id", sa.String(36), nullable=True),
        sa.ForeignKeyConstraint(
            ["advertisement_tier_id"], ["advertisement_tiers.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("advertisements", "status", "advertisement_tier_id", "user_id")
    _create_image_links("advertisement_images", "advertisements")

    op.create_table(
        "affiliates",
        *_audit_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("url", sa.String(2048), nullable=True),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    _create_image_links("affiliate_images", "affiliates")


def _upgrade_products() -> None:
    op.create_table(
        "products",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(50), nullable=False),
        sa.Column("sku", sa.String(100), nullable=True),
        sa.Column("short_description", sa.String(500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("shop_owner_id", sa.String(36), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("featured", sa.Boolean(), nullable=False),
        sa.Column("tags", sa.String(500), nullable=True),
        sa.Column("variant_parent_id", sa.String(36), nullable=True),
        sa.ForeignKeyConstraint(["variant_parent_id"], ["products.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("products", "name", "slug", "shop_owner_id", "variant_parent_id")

    op.create_table(
        "prices",
        *_audit_columns(),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("cost_excl", sa.Numeric(18, 2), nullable=False),
        sa.Column("selling_price", sa.Numeric(18, 2), nullable=False),
        sa.Column("discount_percentage", sa.Numeric(5, 2), nullable=False),
        sa.Column("discount_end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("vatable", sa.Boolean(), nullable=False),
        sa.Column("shipping_amount", sa.Numeric(18, 2), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("product_id"),
    )
    _create_image_links("product_images", "products")
    _create_video_links("product_videos", "products")


def _upgrade_schools() -> None:
    op.create_table(
        "parents",
        *_audit_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("id_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone_nr", sa.String(30), nullable=True),
        sa.Column("require_consent", sa.Boolean(), nullable=False),
        sa.Column("receive_notifications", sa.Boolean(), nullable=False),
        sa.Column("receive_emails", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("parents", "email")

    op.create_table(
        "learners",
        *_audit_columns(),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("middle_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("id_number", sa.String(20), nullable=True),
        sa.Column("gender", _enum("gender", "MALE", "FEMALE", "ALL"), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone_nr", sa.String(30), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("medical_notes", sa.Text(), nullable=True),
        sa.Column("medical_aid_parent_id", sa.String(36), nullable=True),
        sa.Column("receive_notifications", sa.Boolean(), nullable=False),
        sa.Column("receive_messages", sa.Boolean(), nullable=False),
        sa.Column("receive_emails", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["medical_aid_parent_id"], ["parents.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("learners", "email")

    op.create_table(
        "learner_parents",
        *_audit_columns(),
        sa.Column("learner_id", sa.String(36), nullable=False),
        sa.Column("parent_id", sa.String(36), nullable=False),
        sa.Column("parent_consent_required", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["learner_id"], ["learners.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["parents.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("learner_id", "parent_id"),
    )
    _index("learner_parents", "learner_id", "parent_id")

    op.create_table(
        "school_events",
        *_audit_columns(),
        sa.Column("heading", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("google_map_link", sa.String(2048), nullable=True),
        sa.Column("home_event", sa.Boolean(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("attendance_consent_required", sa.Boolean(), nullable=False),
        sa.Column("transport_consent_required", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("school_events", "start_date")

    op.create_table(
        "school_event_participants",
        *_audit_columns(),
        sa.Column("event_id", sa.String(36), nullable=False),
        sa.Column("learner_id", sa.String(36), nullable=False),
        sa.ForeignKeyConstraint(["event_id"], ["school_events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["learner_id"], ["learners.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_id", "learner_id"),
    )
    _index("school_event_participants", "event_id", "learner_id")
    _create_image_links("school_event_images", "school_events")

    op.create_table(
        "parent_permissions",
        *_audit_columns(),
        sa.Column("event_id", sa.String(36), nullable=False),
        sa.Column("parent_id", sa.String(36), nullable=False),
        sa.Column("learner_id", sa.String(36), nullable=False),
        sa.Column(
            "consent_type", _enum("consenttype", "ATTENDANCE", "TRANSPORT"), nullable=False
        ),
        sa.Column("granted", sa.Boolean(), nullable=False),
        sa.Column(
            "consent_direction",
            _enum("consentdirection", "TO", "FROM", "TO_AND_FROM"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["event_id"], ["school_events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["parents.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["learner_id"], ["learners.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_id", "parent_id", "learner_id", "consent_type"),
    )
    _index("parent_permissions", "event_id", "parent_id", "learner_id")


def _upgrade_accommodation() -> None:
    op.create_table(
        "lodgings",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("teaser", sa.String(500), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("facilities", sa.Text(), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("suburb", sa.String(100), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone_nr", sa.String(30), nullable=True),
        sa.Column("website", sa.String(2048), nullable=True),
        sa.Column("grading", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("rate", sa.Numeric(18, 2), nullable=False),
        sa.Column("discount", sa.Numeric(5, 2), nullable=False),
        sa.Column("allow_bookings", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("lodgings", "name")

    op.create_table(
        "rooms",
        *_audit_columns(),
        sa.Column("lodging_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("bed_count", sa.Integer(), nullable=False),
        sa.Column("room_count", sa.Integer(), nullable=False),
        sa.Column("max_occupancy", sa.Integer(), nullable=False),
        sa.Column("max_adults", sa.Integer(), nullable=False),
        sa.Column("first_child_stays_free", sa.Boolean(), nullable=False),
        sa.Column("rate", sa.Numeric(18, 2), nullable=False),
        sa.ForeignKeyConstraint(["lodging_id"], ["lodgings.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    _index("rooms", "lodging_id")
    _create_image_links("lodging_images", "lodgings")
    _create_video_links("lodging_videos", "lodgings")

    op.create_table(
        "vacations",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(60), nullable=False),
        sa.Column("reference_nr", sa.String(50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("availability_cut_off_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("nights", sa.Integer(), nullable=False),
        sa.Column("room_count", sa.Integer(), nullable=False),
        sa.Column("max_booking_count", sa.Integer(), nullable=False),
        sa.Column("currency_symbol", sa.String(5), nullable=False),
        sa.Column("is_extension", sa.Boolean(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False),
        sa.Column("lodging_id", sa.String(36), nullable=True),
        sa.ForeignKeyConstraint(["lodging_id"], ["lodgings.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    _index("vacations", "lodging_id")
    _create_image_links("vacation_images", "vacations")
    _create_video_links("vacation_videos", "vacations")


def upgrade() -> None:
    """Create every table."""
    _upgrade_filing()
    _upgrade_advertising()
    _upgrade_products()
    _upgrade_schools()
    _upgrade_accommodation()


def downgrade() -> None:
    """Drop every table, children first."""
    for table in reversed(TABLES):
        op.drop_table(table)
