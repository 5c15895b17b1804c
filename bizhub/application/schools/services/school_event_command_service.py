"""Write side of the school event module."""

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.application.filing.entity_links import EntityImageLinker
from bizhub.application.filing.mappers import ImageMapper
from bizhub.application.schools.dtos import SchoolEventDto
from bizhub.application.schools.mappers import SchoolEventMapper
from bizhub.config import Settings
from bizhub.models import Learner, SchoolEvent, SchoolEventImage, SchoolEventParticipant

logger = structlog.get_logger(__name__)


class SchoolEventCommandService:
    """Creates, edits and removes school events and their participants."""

    def __init__(
        self,
        event_repository: RepositoryProtocol[SchoolEvent, str],
        event_image_repository: RepositoryProtocol[SchoolEventImage, str],
        learner_repository: RepositoryProtocol[Learner, str],
        settings: Settings,
    ) -> None:
        self.event_repository = event_repository
        self.learner_repository = learner_repository
        image_mapper = ImageMapper(settings.API_BASE_ADDRESS)
        self.mapper = SchoolEventMapper(image_mapper)
        self.image_links = EntityImageLinker(
            event_image_repository, SchoolEventImage, image_mapper
        )

    async def _set_participants(self, event: SchoolEvent, learner_ids: list[str]) -> Result[None]:
        """Make the participant list match; unknown learner ids are skipped."""
        wanted = list(dict.fromkeys(learner_ids))
        found = await self.learner_repository.list_async(LambdaSpec(Learner.id.in_(wanted)))
        if not found.succeeded:
            return found.cast()
        known = {learner.id for learner in found.data}

        for participant in list(event.participants):
            if participant.learner_id not in known:
                event.participants.remove(participant)

        present = {participant.learner_id for participant in event.participants}
        for learner_id in wanted:
            if learner_id in known and learner_id not in present:
                event.participants.append(SchoolEventParticipant(learner_id=learner_id))
        return Result.success()

    async def create_async(self, dto: SchoolEventDto) -> Result[SchoolEventDto]:
        event = self.mapper.to_entity(dto)
        event.participants = []
        if dto.learner_ids:
            set_result = await self._set_participants(event, dto.learner_ids)
            if not set_result.succeeded:
                return set_result.cast()

        created = await self.event_repository.create_async(event)
        if not created.succeeded:
            return created.cast()

        saved = await self.event_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "school_event_created", event_id=event.id, participants=len(event.participants)
        )
        return Result.success(self.mapper.to_dto(event))

    async def update_async(self, dto: SchoolEventDto) -> Result[SchoolEventDto]:
        """
        Update an event.

        Participants are only replaced when the DTO lists learner ids.
        """
        if not dto.id:
            return Result.fail("EventId is required.")

        found = await self.event_repository.find_by_id_async(
            dto.id, True, Include(SchoolEvent.participants)
        )
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(f"No School Event found for ID '{dto.id}'.")

        event = self.mapper.to_entity(dto, found.data)
        if dto.learner_ids is not None:
            set_result = await self._set_participants(event, dto.learner_ids)
            if not set_result.succeeded:
                return set_result.cast()

        updated = self.event_repository.update(event)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.event_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("school_event_updated", event_id=event.id, published=event.published)
        return Result.success(self.mapper.to_dto(event))

    async def remove_async(self, event_id: str) -> Result[None]:
        found = await self.event_repository.exists_async(event_id)
        if not found.succeeded:
            return found.cast()
        if not found.data:
            return Result.fail("Event not found.")

        deleted = await self.event_repository.delete_async(event_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.event_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("school_event_removed", event_id=event_id)
        return Result.success(message="Event successfully removed")

    async def add_image_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        return await self.image_links.add_async(request)

    async def remove_image_async(self, link_id: str) -> Result[None]:
        return await self.image_links.remove_async(link_id)
