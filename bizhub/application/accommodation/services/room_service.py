"""Rooms offered by a lodging."""

import structlog

from bizhub.application.accommodation.dtos import RoomDto
from bizhub.application.accommodation.mappers import RoomMapper
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import LambdaSpec
from bizhub.models import Room

logger = structlog.get_logger(__name__)


def room_not_found(room_id: str) -> str:
    return f"No room matching id '{room_id}' was found"


class RoomService:
    def __init__(self, room_repository: RepositoryProtocol[Room, str]) -> None:
        self.room_repository = room_repository

    async def rooms_async(self, lodging_id: str) -> Result[list[RoomDto]]:
        result = await self.room_repository.list_async(LambdaSpec(Room.lodging_id == lodging_id))
        return result.map(
            lambda rooms: [
                RoomMapper.to_dto(room) for room in sorted(rooms, key=lambda room: room.name)
            ]
        )

    async def room_async(self, room_id: str) -> Result[RoomDto]:
        result = await self.room_repository.find_by_id_async(room_id)
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(room_not_found(room_id))
        return Result.success(RoomMapper.to_dto(result.data))

    async def create_async(self, dto: RoomDto) -> Result[RoomDto]:
        room = RoomMapper.to_entity(dto)

        created = await self.room_repository.create_async(room)
        if not created.succeeded:
            return created.cast()

        saved = await self.room_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("room_created", room_id=room.id, lodging_id=room.lodging_id)
        return Result.success(RoomMapper.to_dto(room))

    async def update_async(self, dto: RoomDto) -> Result[RoomDto]:
        found = await self.room_repository.find_by_id_async(dto.id or "", True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(room_not_found(dto.id or ""))

        room = RoomMapper.to_entity(dto, found.data)
        updated = self.room_repository.update(room)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.room_repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(
            RoomMapper.to_dto(room), message=f"{room.name} was successfully updated"
        )

    async def remove_async(self, room_id: str) -> Result[None]:
        deleted = await self.room_repository.delete_async(room_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.room_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("room_removed", room_id=room_id)
        return Result.success(message="Room was successfully removed")
