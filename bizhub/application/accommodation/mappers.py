"""Mappers for accommodation entities <-> DTOs."""

from bizhub.application.accommodation.dtos import LodgingDto, RoomDto, VacationDto
from bizhub.application.common.mapping import loaded_or_none
from bizhub.application.filing.mappers import ImageMapper, VideoMapper
from bizhub.models import Lodging, Room, Vacation


class RoomMapper:
    """Mapper for Room ORM <-> DTO conversion."""

    @staticmethod
    def to_dto(room: Room) -> RoomDto:
        return RoomDto(
            id=room.id,
            lodging_id=room.lodging_id,
            name=room.name,
            description=room.description,
            bed_count=room.bed_count,
            room_count=room.room_count,
            max_occupancy=room.max_occupancy,
            max_adults=room.max_adults,
            first_child_stays_free=room.first_child_stays_free,
            rate=room.rate,
        )

    @staticmethod
    def to_entity(dto: RoomDto, room: Room | None = None) -> Room:
        if room is None:
            room = Room(id=dto.id) if dto.id else Room()
        room.lodging_id = dto.lodging_id
        room.name = dto.name
        room.description = dto.description
        room.bed_count = dto.bed_count
        room.room_count = dto.room_count
        room.max_occupancy = dto.max_occupancy
        room.max_adults = dto.max_adults
        room.first_child_stays_free = dto.first_child_stays_free
        room.rate = dto.rate
        return room


class LodgingMapper:
    """Mapper for Lodging ORM <-> DTO conversion."""

    def __init__(
        self, image_mapper: ImageMapper | None = None, video_mapper: VideoMapper | None = None
    ) -> None:
        self.image_mapper = image_mapper or ImageMapper()
        self.video_mapper = video_mapper or VideoMapper()

    def to_dto(self, lodging: Lodging) -> LodgingDto:
        rooms = loaded_or_none(lodging, "rooms") or []
        return LodgingDto(
            id=lodging.id,
            name=lodging.name,
            teaser=lodging.teaser,
            description=lodging.description,
            facilities=lodging.facilities,
            address=lodging.address,
            suburb=lodging.suburb,
            city=lodging.city,
            email=lodging.email,
            phone_nr=lodging.phone_nr,
            website=lodging.website,
            grading=lodging.grading,
            rating=lodging.rating,
            rate=lodging.rate,
            discount=lodging.discount,
            allow_bookings=lodging.allow_bookings,
            active=lodging.active,
            rooms=[RoomMapper.to_dto(room) for room in rooms],
            images=self.image_mapper.entity_images_to_dto(lodging),
            videos=self.video_mapper.entity_videos_to_dto(lodging),
            created_on=lodging.created_on,
        )

    @staticmethod
    def to_entity(dto: LodgingDto, lodging: Lodging | None = None) -> Lodging:
        """Convert DTO to a new entity, or copy it onto an existing one."""
        if lodging is None:
            lodging = Lodging(id=dto.id) if dto.id else Lodging()
        lodging.name = dto.name
        lodging.teaser = dto.teaser
        lodging.description = dto.description
        lodging.facilities = dto.facilities
        lodging.address = dto.address
        lodging.suburb = dto.suburb
        lodging.city = dto.city
        lodging.email = dto.email
        lodging.phone_nr = dto.phone_nr
        lodging.website = dto.website
        lodging.grading = dto.grading
        lodging.rating = dto.rating
        lodging.rate = dto.rate
        lodging.discount = dto.discount
        lodging.allow_bookings = dto.allow_bookings
        lodging.active = dto.active
        return lodging


class VacationMapper:
    """Mapper for Vacation ORM <-> DTO conversion."""

    def __init__(self, lodging_mapper: LodgingMapper | None = None) -> None:
        self.lodging_mapper = lodging_mapper or LodgingMapper()

    def to_dto(self, vacation: Vacation) -> VacationDto:
        lodging = loaded_or_none(vacation, "lodging")
        return VacationDto(
            id=vacation.id,
            name=vacation.name,
            slug=vacation.slug,
            reference_nr=vacation.reference_nr,
            description=vacation.description,
            start_date=vacation.start_date,
            availability_cut_off_date=vacation.availability_cut_off_date,
            nights=vacation.nights,
            room_count=vacation.room_count,
            max_booking_count=vacation.max_booking_count,
            currency_symbol=vacation.currency_symbol,
            is_extension=vacation.is_extension,
            published=vacation.published,
            lodging_id=vacation.lodging_id,
            lodging=self.lodging_mapper.to_dto(lodging) if lodging is not None else None,
            images=self.lodging_mapper.image_mapper.entity_images_to_dto(vacation),
            videos=self.lodging_mapper.video_mapper.entity_videos_to_dto(vacation),
            created_on=vacation.created_on,
        )

    @staticmethod
    def apply(dto: VacationDto, vacation: Vacation) -> Vacation:
        """Copy editable fields; the slug is left to the caller."""
        vacation.name = dto.name
        vacation.reference_nr = dto.reference_nr
        vacation.description = dto.description
        vacation.start_date = dto.start_date
        vacation.availability_cut_off_date = dto.availability_cut_off_date
        vacation.nights = dto.nights
        vacation.room_count = dto.room_count
        vacation.max_booking_count = dto.max_booking_count
        vacation.currency_symbol = dto.currency_symbol
        vacation.is_extension = dto.is_extension
        vacation.published = dto.published
        vacation.lodging_id = dto.lodging_id
        return vacation
