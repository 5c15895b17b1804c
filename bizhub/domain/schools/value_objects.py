"""Value objects for the schools context."""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    ALL = "all"


class ConsentType(str, Enum):
    """What a parent is asked to consent to for a school event."""

    ATTENDANCE = "attendance"
    TRANSPORT = "transport"


class ConsentDirection(str, Enum):
    """Legs of the trip a transport consent covers."""

    TO = "to"
    FROM = "from"
    TO_AND_FROM = "to_and_from"
