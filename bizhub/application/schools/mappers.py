"""Mappers for schools entities <-> DTOs."""

from bizhub.application.common.mapping import loaded_or_none
from bizhub.application.filing.mappers import ImageMapper
from bizhub.application.schools.dtos import (
    LearnerDto,
    ParentDto,
    ParentPermissionDto,
    SchoolEventDto,
)
from bizhub.domain.schools import age_from_id_number
from bizhub.models import Learner, Parent, ParentPermission, SchoolEvent


class ParentMapper:
    """Mapper for Parent ORM <-> DTO conversion."""

    @staticmethod
    def to_dto(parent: Parent, with_learners: bool = True) -> ParentDto:
        links = (loaded_or_none(parent, "learners") or []) if with_learners else []
        learners = [loaded_or_none(link, "learner") for link in links]
        return ParentDto(
            id=parent.id,
            first_name=parent.first_name,
            last_name=parent.last_name,
            id_number=parent.id_number,
            email=parent.email,
            phone_nr=parent.phone_nr,
            require_consent=parent.require_consent,
            receive_notifications=parent.receive_notifications,
            receive_emails=parent.receive_emails,
            learners=[
                LearnerMapper.to_dto(learner, with_parents=False)
                for learner in learners
                if learner is not None
            ],
            created_on=parent.created_on,
        )

    @staticmethod
    def to_entity(dto: ParentDto, parent: Parent | None = None) -> Parent:
        """Convert DTO to a new entity, or copy it onto an existing one."""
        if parent is None:
            parent = Parent(id=dto.id) if dto.id else Parent()
        parent.first_name = dto.first_name
        parent.last_name = dto.last_name
        parent.id_number = dto.id_number
        parent.email = dto.email
        parent.phone_nr = dto.phone_nr
        parent.require_consent = dto.require_consent
        parent.receive_notifications = dto.receive_notifications
        parent.receive_emails = dto.receive_emails
        return parent


class LearnerMapper:
    """Mapper for Learner ORM <-> DTO conversion."""

    @staticmethod
    def to_dto(learner: Learner, with_parents: bool = True) -> LearnerDto:
        links = (loaded_or_none(learner, "parents") or []) if with_parents else []
        parents = [loaded_or_none(link, "parent") for link in links]
        return LearnerDto(
            id=learner.id,
            first_name=learner.first_name,
            middle_name=learner.middle_name,
            last_name=learner.last_name,
            id_number=learner.id_number,
            age=age_from_id_number(learner.id_number),
            gender=learner.gender,
            email=learner.email,
            phone_nr=learner.phone_nr,
            description=learner.description,
            medical_notes=learner.medical_notes,
            medical_aid_parent_id=learner.medical_aid_parent_id,
            receive_notifications=learner.receive_notifications,
            receive_messages=learner.receive_messages,
            receive_emails=learner.receive_emails,
            parents=[
                ParentMapper.to_dto(parent, with_learners=False)
                for parent in parents
                if parent is not None
            ],
            created_on=learner.created_on,
        )

    @staticmethod
    def to_entity(dto: LearnerDto, learner: Learner | None = None) -> Learner:
        if learner is None:
            learner = Learner(id=dto.id) if dto.id else Learner()
        learner.first_name = dto.first_name
        learner.middle_name = dto.middle_name
        learner.last_name = dto.last_name
        learner.id_number = dto.id_number
        learner.gender = dto.gender
        learner.email = dto.email
        learner.phone_nr = dto.phone_nr
        learner.description = dto.description
        learner.medical_notes = dto.medical_notes
        learner.medical_aid_parent_id = dto.medical_aid_parent_id
        learner.receive_notifications = dto.receive_notifications
        learner.receive_messages = dto.receive_messages
        learner.receive_emails = dto.receive_emails
        return learner


class SchoolEventMapper:
    """Mapper for SchoolEvent ORM <-> DTO conversion."""

    def __init__(self, image_mapper: ImageMapper | None = None) -> None:
        self.image_mapper = image_mapper or ImageMapper()

    def to_dto(self, event: SchoolEvent) -> SchoolEventDto:
        participants = loaded_or_none(event, "participants") or []
        learners = [loaded_or_none(participant, "learner") for participant in participants]
        return SchoolEventDto(
            id=event.id,
            heading=event.heading,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            address=event.address,
            google_map_link=event.google_map_link,
            home_event=event.home_event,
            published=event.published,
            attendance_consent_required=event.attendance_consent_required,
            transport_consent_required=event.transport_consent_required,
            participants=[
                LearnerMapper.to_dto(learner, with_parents=False)
                for learner in learners
                if learner is not None
            ],
            images=self.image_mapper.entity_images_to_dto(event),
            created_on=event.created_on,
        )

    @staticmethod
    def to_entity(dto: SchoolEventDto, event: SchoolEvent | None = None) -> SchoolEvent:
        if event is None:
            event = SchoolEvent(id=dto.id) if dto.id else SchoolEvent()
        event.heading = dto.heading
        event.description = dto.description
        event.start_date = dto.start_date
        event.end_date = dto.end_date
        event.address = dto.address
        event.google_map_link = dto.google_map_link
        event.home_event = dto.home_event
        event.published = dto.published
        event.attendance_consent_required = dto.attendance_consent_required
        event.transport_consent_required = dto.transport_consent_required
        return event


def permission_to_dto(permission: ParentPermission) -> ParentPermissionDto:
    learner = loaded_or_none(permission, "learner")
    return ParentPermissionDto(
        id=permission.id,
        event_id=permission.event_id,
        parent_id=permission.parent_id,
        learner_id=permission.learner_id,
        learner_name=f"{learner.first_name} {learner.last_name}" if learner else None,
        consent_type=permission.consent_type,
        granted=permission.granted,
        consent_direction=permission.consent_direction,
    )
