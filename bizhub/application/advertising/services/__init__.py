from .advertisement_command_service import AdvertisementCommandService
from .advertisement_query_service import AdvertisementQueryService
from .advertisement_tier_service import (
    AdvertisementTierCommandService,
    AdvertisementTierQueryService,
)
from .affiliate_command_service import AffiliateCommandService
from .affiliate_query_service import AffiliateQueryService

__all__ = [
    "AdvertisementCommandService",
    "AdvertisementQueryService",
    "AdvertisementTierCommandService",
    "AdvertisementTierQueryService",
    "AffiliateCommandService",
    "AffiliateQueryService",
]
