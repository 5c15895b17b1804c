from .value_objects import AdvertisementType, ReviewStatus

__all__ = [
    "AdvertisementType",
    "ReviewStatus",
]
