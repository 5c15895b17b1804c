"""Value objects for the advertising context."""

from enum import Enum


class ReviewStatus(str, Enum):
    """Moderation state of a submitted advertisement."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AdvertisementType(str, Enum):
    """Placement an advertisement was bought for."""

    BANNER = "banner"
    SIDEBAR = "sidebar"
    POPUP = "popup"
    LISTING = "listing"
