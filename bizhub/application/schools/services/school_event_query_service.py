"""Read side of the school event module."""

from datetime import UTC, datetime, timedelta

from sqlalchemy import exists, select

from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.filing.dtos import EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.application.schools.dtos import SchoolEventDto, SchoolEventPageParameters
from bizhub.application.schools.mappers import SchoolEventMapper
from bizhub.config import Settings
from bizhub.models import (
    LearnerParent,
    SchoolEvent,
    SchoolEventImage,
    SchoolEventParticipant,
)

EVENT_ORDER_FIELDS = ("heading", "start_date", "end_date", "created_on")

_PARTICIPANTS = Include(SchoolEvent.participants).then(SchoolEventParticipant.learner)
_IMAGES = Include(SchoolEvent.images).then(SchoolEventImage.image)


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


class SchoolEventQueryService:
    """Lists and looks up school events as DTOs."""

    def __init__(
        self,
        event_repository: RepositoryProtocol[SchoolEvent, str],
        event_image_repository: RepositoryProtocol[SchoolEventImage, str],
        settings: Settings,
    ) -> None:
        self.event_repository = event_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        self.mapper = SchoolEventMapper(image_mapper)
        self.image_links = EntityImageLinker(
            event_image_repository, SchoolEventImage, image_mapper
        )

    async def paged_events_async(
        self, params: SchoolEventPageParameters, now: datetime | None = None
    ) -> PaginatedResult[SchoolEventDto]:
        """
        One page of published school events.

        Args:
            params: Listing mode, learner or parent filter, paging and search
            now: Reference time, defaults to the current UTC time

        Returns:
            PaginatedResult of event DTOs. Upcoming and active events run by
            start date, archived events newest first.
        """
        today = start_of_day(now or datetime.now(UTC))
        tomorrow = today + timedelta(days=1)
        search = params.search_text.strip() if params.search_text else None

        predicate = PredicateBuilder.new(True).and_(SchoolEvent.published.is_(True))
        if params.archived:
            predicate.and_(SchoolEvent.start_date < today)
            default_order = "StartDate desc"
        elif params.active:
            predicate.and_(SchoolEvent.start_date >= today).and_(SchoolEvent.start_date < tomorrow)
            default_order = "StartDate"
        else:
            predicate.and_(SchoolEvent.start_date >= today)
            default_order = "StartDate"

        predicate = (
            predicate.and_if(
                params.learner_id,
                lambda learner_id: exists(
                    select(SchoolEventParticipant.id).where(
                        SchoolEventParticipant.event_id == SchoolEvent.id,
                        SchoolEventParticipant.learner_id == learner_id,
                    )
                ),
            )
            .and_if(
                params.parent_id,
                lambda parent_id: exists(
                    select(SchoolEventParticipant.id)
                    .join(
                        LearnerParent,
                        LearnerParent.learner_id == SchoolEventParticipant.learner_id,
                    )
                    .where(
                        SchoolEventParticipant.event_id == SchoolEvent.id,
                        LearnerParent.parent_id == parent_id,
                    )
                ),
            )
            .and_if(
                search or None,
                lambda text: SchoolEvent.heading.icontains(text, autoescape=True),
            )
        )
        page = await self.event_repository.paged_list_async(
            LambdaSpec(predicate.build(), _IMAGES),
            params.to_pagination(),
            params.order_by or default_order,
            EVENT_ORDER_FIELDS,
        )
        return page.with_data(self.mapper.to_dto(event) for event in page.data)

    async def event_count_async(self) -> Result[int]:
        return await self.event_repository.count_async()

    async def school_event_async(self, event_id: str) -> Result[SchoolEventDto]:
        if not event_id:
            return Result.fail("SchoolEventId is required.")

        result = await self.event_repository.first_or_default_async(
            LambdaSpec(SchoolEvent.id == event_id, _PARTICIPANTS, _IMAGES)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(f"No event found with ID '{event_id}'.")
        return Result.success(self.mapper.to_dto(result.data))

    async def images_async(self, event_id: str) -> Result[list[EntityImageDto]]:
        return await self.image_links.images_async(event_id)
