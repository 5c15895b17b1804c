from .lodging_service import LodgingService
from .room_service import RoomService
from .vacation_service import VacationService

__all__ = [
    "LodgingService",
    "RoomService",
    "VacationService",
]
