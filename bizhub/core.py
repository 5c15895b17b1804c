from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bizhub.application.advertising.services import (
    AdvertisementCommandService,
    AdvertisementQueryService,
    AdvertisementTierCommandService,
    AdvertisementTierQueryService,
    AffiliateCommandService,
    AffiliateQueryService,
)
from bizhub.application.filing.services import (
    ImageProcessingService,
    ParallelUploader,
    VideoProcessingService,
)
from bizhub.application.accommodation.services import LodgingService, RoomService, VacationService
from bizhub.application.products.services import ProductCommandService, ProductQueryService
from bizhub.application.schools.services import (
    LearnerCommandService,
    LearnerQueryService,
    ParentCommandService,
    ParentQueryService,
    SchoolEventCommandService,
    SchoolEventPermissionService,
    SchoolEventQueryService,
)
from bizhub.config import Settings
from bizhub.infrastructure.common.repository import Repository
from bizhub.infrastructure.filing.service_factories import (
    image_service_factory,
    video_service_factory,
)
from bizhub.infrastructure.filing.storage import FileStorage
from bizhub.models import (
    Advertisement,
    AdvertisementImage,
    AdvertisementTier,
    AdvertisementTierImage,
    Affiliate,
    AffiliateImage,
    Image,
    Learner,
    LearnerParent,
    Lodging,
    LodgingImage,
    LodgingVideo,
    Parent,
    ParentPermission,
    Product,
    ProductImage,
    ProductVideo,
    Room,
    SchoolEvent,
    SchoolEventImage,
    Vacation,
    VacationImage,
    VacationVideo,
    Video,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped values provided at runtime
    db = providers.Dependency(instance_of=AsyncSession)
    session_factory = providers.Dependency(instance_of=async_sessionmaker)
    settings = providers.Dependency(instance_of=Settings)

    # Repositories
    advertisement_repository = providers.Factory(Repository, db=db, model=Advertisement)
    advertisement_image_repository = providers.Factory(
        Repository, db=db, model=AdvertisementImage
    )
    advertisement_tier_repository = providers.Factory(Repository, db=db, model=AdvertisementTier)
    advertisement_tier_image_repository = providers.Factory(
        Repository, db=db, model=AdvertisementTierImage
    )
    affiliate_repository = providers.Factory(Repository, db=db, model=Affiliate)
    affiliate_image_repository = providers.Factory(Repository, db=db, model=AffiliateImage)
    image_repository = providers.Factory(Repository, db=db, model=Image)
    video_repository = providers.Factory(Repository, db=db, model=Video)
    product_repository = providers.Factory(Repository, db=db, model=Product)
    product_image_repository = providers.Factory(Repository, db=db, model=ProductImage)
    product_video_repository = providers.Factory(Repository, db=db, model=ProductVideo)
    learner_repository = providers.Factory(Repository, db=db, model=Learner)
    parent_repository = providers.Factory(Repository, db=db, model=Parent)
    learner_parent_repository = providers.Factory(Repository, db=db, model=LearnerParent)
    school_event_repository = providers.Factory(Repository, db=db, model=SchoolEvent)
    school_event_image_repository = providers.Factory(Repository, db=db, model=SchoolEventImage)
    parent_permission_repository = providers.Factory(Repository, db=db, model=ParentPermission)
    lodging_repository = providers.Factory(Repository, db=db, model=Lodging)
    lodging_image_repository = providers.Factory(Repository, db=db, model=LodgingImage)
    lodging_video_repository = providers.Factory(Repository, db=db, model=LodgingVideo)
    room_repository = providers.Factory(Repository, db=db, model=Room)
    vacation_repository = providers.Factory(Repository, db=db, model=Vacation)
    vacation_image_repository = providers.Factory(Repository, db=db, model=VacationImage)
    vacation_video_repository = providers.Factory(Repository, db=db, model=VacationVideo)

    file_storage = providers.Factory(
        FileStorage,
        root=settings.provided.STATIC_FILES_DIR,
        chunk_size=settings.provided.UPLOAD_CHUNK_SIZE,
    )

    # Advertising module services
    advertisement_query_service = providers.Factory(
        AdvertisementQueryService,
        advertisement_repository=advertisement_repository,
        advertisement_image_repository=advertisement_image_repository,
        settings=settings,
    )
    advertisement_command_service = providers.Factory(
        AdvertisementCommandService,
        advertisement_repository=advertisement_repository,
        advertisement_image_repository=advertisement_image_repository,
        settings=settings,
    )
    advertisement_tier_query_service = providers.Factory(
        AdvertisementTierQueryService,
        tier_repository=advertisement_tier_repository,
        settings=settings,
    )
    advertisement_tier_command_service = providers.Factory(
        AdvertisementTierCommandService,
        tier_repository=advertisement_tier_repository,
        tier_image_repository=advertisement_tier_image_repository,
        settings=settings,
    )
    affiliate_query_service = providers.Factory(
        AffiliateQueryService,
        affiliate_repository=affiliate_repository,
        settings=settings,
    )
    affiliate_command_service = providers.Factory(
        AffiliateCommandService,
        affiliate_repository=affiliate_repository,
        affiliate_image_repository=affiliate_image_repository,
        settings=settings,
    )

    # Filing module services
    image_processing_service = providers.Factory(
        ImageProcessingService,
        image_repository=image_repository,
        storage=file_storage,
        settings=settings,
    )
    video_processing_service = providers.Factory(
        VideoProcessingService,
        video_repository=video_repository,
        storage=file_storage,
        settings=settings,
    )
    image_bulk_uploader = providers.Factory(
        ParallelUploader,
        session_factory=session_factory,
        service_factory=providers.Callable(
            image_service_factory, storage=file_storage, settings=settings
        ),
        max_bytes=settings.provided.MAX_FILE_UPLOAD_BYTES,
        max_concurrency=settings.provided.UPLOAD_CONCURRENCY,
    )
    video_bulk_uploader = providers.Factory(
        ParallelUploader,
        session_factory=session_factory,
        service_factory=providers.Callable(
            video_service_factory, storage=file_storage, settings=settings
        ),
        max_bytes=settings.provided.MAX_VIDEO_STREAM_BYTES,
        max_concurrency=settings.provided.UPLOAD_CONCURRENCY,
    )

    # Products module services
    product_query_service = providers.Factory(
        ProductQueryService,
        product_repository=product_repository,
        product_image_repository=product_image_repository,
        product_video_repository=product_video_repository,
        settings=settings,
    )
    product_command_service = providers.Factory(
        ProductCommandService,
        product_repository=product_repository,
        product_image_repository=product_image_repository,
        product_video_repository=product_video_repository,
        settings=settings,
    )


    # Schools module services
    learner_query_service = providers.Factory(
        LearnerQueryService,
        learner_repository=learner_repository,
        learner_parent_repository=learner_parent_repository,
    )
    learner_command_service = providers.Factory(
        LearnerCommandService,
        learner_repository=learner_repository,
        parent_repository=parent_repository,
    )
    parent_query_service = providers.Factory(
        ParentQueryService,
        parent_repository=parent_repository,
        learner_parent_repository=learner_parent_repository,
    )
    parent_command_service = providers.Factory(
        ParentCommandService,
        parent_repository=parent_repository,
        learner_parent_repository=learner_parent_repository,
        learner_repository=learner_repository,
    )
    school_event_query_service = providers.Factory(
        SchoolEventQueryService,
        event_repository=school_event_repository,
        event_image_repository=school_event_image_repository,
        settings=settings,
    )
    school_event_command_service = providers.Factory(
        SchoolEventCommandService,
        event_repository=school_event_repository,
        event_image_repository=school_event_image_repository,
        learner_repository=learner_repository,
        settings=settings,
    )
    school_event_permission_service = providers.Factory(
        SchoolEventPermissionService,
        permission_repository=parent_permission_repository,
        event_repository=school_event_repository,
        learner_repository=learner_repository,
        learner_parent_repository=learner_parent_repository,
        parent_repository=parent_repository,
    )

    # Accommodation module services
    lodging_service = providers.Factory(
        LodgingService,
        lodging_repository=lodging_repository,
        lodging_image_repository=lodging_image_repository,
        lodging_video_repository=lodging_video_repository,
        settings=settings,
    )
    room_service = providers.Factory(RoomService, room_repository=room_repository)
    vacation_service = providers.Factory(
        VacationService,
        vacation_repository=vacation_repository,
        vacation_image_repository=vacation_image_repository,
        vacation_video_repository=vacation_video_repository,
        settings=settings,
    )


# Initialize container
container = Container()
