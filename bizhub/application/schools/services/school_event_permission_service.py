"""
Parent consent for school events.

Each answer is stored per event, parent, learner and consent type, so a
learner with two parents can hold two answers. Only parents linked with
parent_consent_required are asked.
"""

import structlog
from sqlalchemy import ColumnElement

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.schools.dtos import (
    ConsentRequest,
    EventPermissionsDto,
    ParentPermissionDto,
)
from bizhub.application.schools.mappers import LearnerMapper, permission_to_dto
from bizhub.domain.schools import ConsentType
from bizhub.models import (
    Learner,
    LearnerParent,
    Parent,
    ParentPermission,
    SchoolEvent,
)

logger = structlog.get_logger(__name__)


def _matching(request: ConsentRequest) -> ColumnElement[bool]:
    return (
        (ParentPermission.event_id == request.event_id)
        & (ParentPermission.parent_id == request.parent_id)
        & (ParentPermission.learner_id == request.learner_id)
        & (ParentPermission.consent_type == request.consent_type)
    )


def _answers(
    permissions: list[ParentPermission], event: SchoolEvent, learner: Learner
) -> EventPermissionsDto:
    dto = EventPermissionsDto(
        event_id=event.id,
        learner=LearnerMapper.to_dto(learner, with_parents=False),
        attendance_consent_required=event.attendance_consent_required,
        transport_consent_required=event.transport_consent_required,
    )
    for permission in permissions:
        if permission.consent_type == ConsentType.ATTENDANCE:
            dto.attendance_consent_given = permission.granted
        elif permission.consent_type == ConsentType.TRANSPORT:
            dto.transport_consent_given = permission.granted
            dto.consent_direction = permission.consent_direction
    return dto


class SchoolEventPermissionService:
    """Records, retracts and reports parent consent for school events."""

    def __init__(
        self,
        permission_repository: RepositoryProtocol[ParentPermission, str],
        event_repository: RepositoryProtocol[SchoolEvent, str],
        learner_repository: RepositoryProtocol[Learner, str],
        learner_parent_repository: RepositoryProtocol[LearnerParent, str],
        parent_repository: RepositoryProtocol[Parent, str],
    ) -> None:
        self.permission_repository = permission_repository
        self.event_repository = event_repository
        self.learner_repository = learner_repository
        self.learner_parent_repository = learner_parent_repository
        self.parent_repository = parent_repository

    async def give_consent_async(self, request: ConsentRequest) -> Result[None]:
        """Record an answer, replacing an earlier one for the same question."""
        existing = await self.permission_repository.first_or_default_async(
            LambdaSpec(_matching(request)), True
        )
        if not existing.succeeded:
            return existing.cast()

        if existing.data is None:
            created = await self.permission_repository.create_async(
                ParentPermission(
                    event_id=request.event_id,
                    parent_id=request.parent_id,
                    learner_id=request.learner_id,
                    consent_type=request.consent_type,
                    granted=request.granted,
                    consent_direction=request.consent_direction,
                )
            )
            if not created.succeeded:
                return created.cast()
        else:
            existing.data.granted = request.granted
            existing.data.consent_direction = request.consent_direction
            self.permission_repository.update(existing.data)

        saved = await self.permission_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "consent_recorded",
            event_id=request.event_id,
            learner_id=request.learner_id,
            consent_type=request.consent_type.value,
            granted=request.granted,
        )
        return Result.success(message="Consent granted")

    async def retract_consent_async(self, request: ConsentRequest) -> Result[None]:
        existing = await self.permission_repository.first_or_default_async(
            LambdaSpec(_matching(request))
        )
        if not existing.succeeded:
            return existing.cast()
        if existing.data is None:
            return Result.fail("No matching consent record found.")

        deleted = await self.permission_repository.delete_async(existing.data.id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.permission_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("consent_retracted", event_id=request.event_id, learner_id=request.learner_id)
        return Result.success(message="Consent was successfully retracted")

    async def learner_event_permissions_async(
        self, event_id: str, learner_id: str
    ) -> Result[EventPermissionsDto]:
        """
        Consent state of one learner for one event.

        Answers from every parent whose consent is required are combined.
        """
        if not learner_id or not event_id:
            return Result.fail("LearnerId and EventId are required.")

        learner = await self.learner_repository.find_by_id_async(learner_id)
        if not learner.succeeded:
            return learner.cast()
        if learner.data is None:
            return Result.fail("Learner not found.")

        event = await self.event_repository.find_by_id_async(event_id)
        if not event.succeeded:
            return event.cast()
        if event.data is None:
            return Result.fail(f"No event found with ID '{event_id}'.")

        links = await self.learner_parent_repository.list_async(
            LambdaSpec(
                (LearnerParent.learner_id == learner_id)
                & LearnerParent.parent_consent_required.is_(True)
            )
        )
        if not links.succeeded:
            return links.cast()
        parent_ids = [link.parent_id for link in links.data]

        permissions = await self.permission_repository.list_async(
            LambdaSpec(
                (ParentPermission.event_id == event_id)
                & (ParentPermission.learner_id == learner_id)
                & ParentPermission.parent_id.in_(parent_ids)
            )
        )
        if not permissions.succeeded:
            return permissions.cast()

        ordered = sorted(permissions.data, key=lambda permission: permission.modified_on)
        return Result.success(_answers(ordered, event.data, learner.data))

    async def parent_event_permissions_async(
        self, parent_email: str, event_id: str
    ) -> Result[list[EventPermissionsDto]]:
        """
        Consent state for each of a parent's learners taking part in an event.

        An unknown parent has nothing to answer and gets an empty list.
        """
        if not parent_email or not event_id:
            return Result.fail("ParentEmail and EventId are required.")

        parent = await self.parent_repository.first_or_default_async(
            LambdaSpec(
                Parent.email == parent_email,
                Include(Parent.learners).then(LearnerParent.learner),
            )
        )
        if not parent.succeeded:
            return parent.cast()
        if parent.data is None:
            return Result.success([])

        event = await self.event_repository.first_or_default_async(
            LambdaSpec(SchoolEvent.id == event_id, Include(SchoolEvent.participants))
        )
        if not event.succeeded:
            return event.cast()
        if event.data is None:
            return Result.fail(f"No event found with ID '{event_id}'.")
        participating = {participant.learner_id for participant in event.data.participants}

        permissions = await self.permission_repository.list_async(
            LambdaSpec(
                (ParentPermission.event_id == event_id)
                & (ParentPermission.parent_id == parent.data.id)
            )
        )
        if not permissions.succeeded:
            return permissions.cast()

        answers: list[EventPermissionsDto] = []
        for link in sorted(parent.data.learners, key=lambda link: link.learner.first_name):
            if link.learner_id not in participating:
                continue
            own = [
                permission
                for permission in permissions.data
                if permission.learner_id == link.learner_id
            ]
            answers.append(_answers(own, event.data, link.learner))
        return Result.success(answers)

    async def all_event_permissions_async(
        self, event_id: str
    ) -> Result[list[ParentPermissionDto]]:
        result = await self.permission_repository.list_async(
            LambdaSpec(ParentPermission.event_id == event_id, Include(ParentPermission.learner))
        )
        return result.map(
            lambda permissions: [
                permission_to_dto(permission)
                for permission in sorted(
                    permissions,
                    key=lambda permission: (permission.learner_id, permission.consent_type.value),
                )
            ]
        )
