"""API routes for rooms."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bizhub.application.accommodation.dtos import RoomDto
from bizhub.application.accommodation.services import RoomService
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import ResultResponse

router = APIRouter(prefix="/rooms", tags=["rooms"])

Service = Annotated[RoomService, Depends(inject_service(container.room_service))]


@router.get("/{room_id}", response_model=ResultResponse[RoomDto])
async def get_room(room_id: str, service: Service) -> ResultResponse[RoomDto]:
    try:
        result = await service.room_async(room_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get room {room_id}", e) from e
    return ResultResponse[RoomDto].from_result(result)


@router.put("", response_model=ResultResponse[RoomDto])
async def create_room(dto: RoomDto, service: Service) -> ResultResponse[RoomDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create room", e) from e
    return ResultResponse[RoomDto].from_result(result)


@router.post("", response_model=ResultResponse[RoomDto])
async def update_room(dto: RoomDto, service: Service) -> ResultResponse[RoomDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update room {dto.id}", e) from e
    return ResultResponse[RoomDto].from_result(result)


@router.delete("/{room_id}", response_model=ResultResponse[None])
async def delete_room(room_id: str, service: Service) -> ResultResponse[None]:
    try:
        result = await service.remove_async(room_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete room {room_id}", e) from e
    return ResultResponse[None].from_result(result)
