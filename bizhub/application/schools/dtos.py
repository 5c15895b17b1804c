"""DTOs for learners, parents, school events and consent."""

from datetime import datetime

from pydantic import BaseModel, Field

from bizhub.application.common.request_parameters import RequestParameters
from bizhub.application.filing.dtos import EntityImageDto
from bizhub.domain.schools import ConsentDirection, ConsentType, Gender


class ParentDto(BaseModel):
    """A parent or guardian."""

    id: str | None = None
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    id_number: str | None = Field(None, max_length=20)
    email: str | None = None
    phone_nr: str | None = None
    require_consent: bool = Field(True, description="Whether this parent answers consent forms")
    receive_notifications: bool = True
    receive_emails: bool = True
    learner_ids: list[str] | None = Field(
        None, description="Learners to link on save, None leaves the links untouched"
    )
    learners: list["LearnerDto"] = Field(default_factory=list)
    created_on: datetime | None = None


class LearnerDto(BaseModel):
    """A learner with the parents linked to it."""

    id: str | None = None
    first_name: str = Field(..., min_length=1, max_length=100)
    middle_name: str | None = None
    last_name: str = Field(..., min_length=1, max_length=100)
    id_number: str | None = Field(None, max_length=20)
    age: int = Field(0, description="Derived from the identity number")
    gender: Gender = Gender.ALL
    email: str | None = None
    phone_nr: str | None = None
    description: str | None = None
    medical_notes: str | None = None
    medical_aid_parent_id: str | None = None
    receive_notifications: bool = True
    receive_messages: bool = True
    receive_emails: bool = True
    parent_ids: list[str] | None = Field(
        None, description="Parents to link on save, None leaves the links untouched"
    )
    parents: list[ParentDto] = Field(default_factory=list)
    created_on: datetime | None = None


ParentDto.model_rebuild()


class LearnerPageParameters(RequestParameters):
    order_by: str | None = Field("LastName, FirstName", description='e.g. "LastName desc"')
    gender: Gender | None = None
    parent_id: str | None = None


class LearnerFilter(BaseModel):
    """Filters for the unpaged learner listing."""

    learner_id: str | None = None
    gender: Gender | None = None
    min_age: int | None = Field(None, ge=0)
    max_age: int | None = Field(None, ge=0)


class ParentPageParameters(RequestParameters):
    order_by: str | None = Field("LastName, FirstName", description='e.g. "LastName desc"')
    learner_id: str | None = None


class LearnerParentsRequest(BaseModel):
    learner_id: str
    parent_ids: list[str] = Field(default_factory=list)


class SchoolEventDto(BaseModel):
    """A school event with its participating learners."""

    id: str | None = None
    heading: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    start_date: datetime
    end_date: datetime | None = None
    address: str | None = None
    google_map_link: str | None = None
    home_event: bool = True
    published: bool = False
    attendance_consent_required: bool = False
    transport_consent_required: bool = False
    learner_ids: list[str] | None = Field(
        None, description="Participating learners to set on save, None leaves them untouched"
    )
    participants: list[LearnerDto] = Field(default_factory=list)
    images: list[EntityImageDto] = Field(default_factory=list)
    created_on: datetime | None = None


class SchoolEventPageParameters(RequestParameters):
    """
    Paged listing of published events.

    Upcoming events (starting today or later) are listed by default,
    archived lists past events newest first and active only today's events.
    """

    order_by: str | None = Field(None, description="Defaults to start date for the listing")
    archived: bool = False
    active: bool = False
    learner_id: str | None = None
    parent_id: str | None = None


class ConsentRequest(BaseModel):
    """A parent's answer to one consent question."""

    event_id: str
    parent_id: str
    learner_id: str
    consent_type: ConsentType
    granted: bool = True
    consent_direction: ConsentDirection | None = None


class ParentPermissionDto(BaseModel):
    id: str
    event_id: str
    parent_id: str
    learner_id: str
    learner_name: str | None = None
    consent_type: ConsentType
    granted: bool
    consent_direction: ConsentDirection | None = None


class EventPermissionsDto(BaseModel):
    """
    Consent state of one learner for one event.

    A None answer means the parent has not responded yet.
    """

    event_id: str
    learner: LearnerDto
    attendance_consent_required: bool = False
    transport_consent_required: bool = False
    attendance_consent_given: bool | None = None
    transport_consent_given: bool | None = None
    consent_direction: ConsentDirection | None = None
