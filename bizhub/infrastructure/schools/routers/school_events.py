"""API routes for school events and parent consent."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.filing.dtos import AddEntityImageRequest, EntityImageDto
from bizhub.application.schools.dtos import (
    ConsentRequest,
    EventPermissionsDto,
    ParentPermissionDto,
    SchoolEventDto,
    SchoolEventPageParameters,
)
from bizhub.application.schools.services import (
    SchoolEventCommandService,
    SchoolEventPermissionService,
    SchoolEventQueryService,
)
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/school-events", tags=["school-events"])

QueryService = Annotated[
    SchoolEventQueryService, Depends(inject_service(container.school_event_query_service))
]
CommandService = Annotated[
    SchoolEventCommandService, Depends(inject_service(container.school_event_command_service))
]
PermissionService = Annotated[
    SchoolEventPermissionService,
    Depends(inject_service(container.school_event_permission_service)),
]


@router.get("/paged", response_model=PaginatedResponse[SchoolEventDto])
async def get_paged_events(
    params: Annotated[SchoolEventPageParameters, Query()], service: QueryService
) -> PaginatedResponse[SchoolEventDto]:
    """
    Get one page of published school events.

    Args:
        params: archived or active listing, learner or parent filter, paging
        service: SchoolEventQueryService injected via dependency container

    Returns:
        Upcoming events by default
    """
    try:
        page = await service.paged_events_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page school events", e) from e
    return PaginatedResponse[SchoolEventDto].from_page(page)


@router.get("/count", response_model=ResultResponse[int])
async def get_event_count(service: QueryService) -> ResultResponse[int]:
    try:
        result = await service.event_count_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to count school events", e) from e
    return ResultResponse[int].from_result(result)


@router.get("/permissions", response_model=ResultResponse[list[EventPermissionsDto]])
async def get_parent_event_permissions(
    parent_email: Annotated[str, Query()],
    event_id: Annotated[str, Query()],
    service: PermissionService,
) -> ResultResponse[list[EventPermissionsDto]]:
    """Get the consent state of each of a parent's learners in an event."""
    try:
        result = await service.parent_event_permissions_async(parent_email, event_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list permissions for event {event_id}", e) from e
    return ResultResponse[list[EventPermissionsDto]].from_result(result)


@router.put("/permissions", response_model=ResultResponse[None])
async def give_consent(request: ConsentRequest, service: PermissionService) -> ResultResponse[None]:
    try:
        result = await service.give_consent_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to record consent for event {request.event_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/permissions/retract", response_model=ResultResponse[None])
async def retract_consent(
    request: ConsentRequest, service: PermissionService
) -> ResultResponse[None]:
    try:
        result = await service.retract_consent_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to retract consent for event {request.event_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.get("/{event_id}", response_model=ResultResponse[SchoolEventDto])
async def get_event(event_id: str, service: QueryService) -> ResultResponse[SchoolEventDto]:
    try:
        result = await service.school_event_async(event_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get school event {event_id}", e) from e
    return ResultResponse[SchoolEventDto].from_result(result)


@router.get("/{event_id}/images", response_model=ResultResponse[list[EntityImageDto]])
async def get_event_images(
    event_id: str, service: QueryService
) -> ResultResponse[list[EntityImageDto]]:
    try:
        result = await service.images_async(event_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list images of school event {event_id}", e) from e
    return ResultResponse[list[EntityImageDto]].from_result(result)


@router.get(
    "/{event_id}/permissions", response_model=ResultResponse[list[ParentPermissionDto]]
)
async def get_all_event_permissions(
    event_id: str, service: PermissionService
) -> ResultResponse[list[ParentPermissionDto]]:
    try:
        result = await service.all_event_permissions_async(event_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list permissions for event {event_id}", e) from e
    return ResultResponse[list[ParentPermissionDto]].from_result(result)


@router.get(
    "/{event_id}/permissions/{learner_id}", response_model=ResultResponse[EventPermissionsDto]
)
async def get_learner_event_permissions(
    event_id: str, learner_id: str, service: PermissionService
) -> ResultResponse[EventPermissionsDto]:
    try:
        result = await service.learner_event_permissions_async(event_id, learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get permissions of learner {learner_id}", e) from e
    return ResultResponse[EventPermissionsDto].from_result(result)


@router.put("", response_model=ResultResponse[SchoolEventDto])
async def create_event(
    dto: SchoolEventDto, service: CommandService
) -> ResultResponse[SchoolEventDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create school event", e) from e
    return ResultResponse[SchoolEventDto].from_result(result)


@router.post("", response_model=ResultResponse[SchoolEventDto])
async def update_event(
    dto: SchoolEventDto, service: CommandService
) -> ResultResponse[SchoolEventDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update school event {dto.id}", e) from e
    return ResultResponse[SchoolEventDto].from_result(result)


@router.delete("/{event_id}", response_model=ResultResponse[None])
async def delete_event(event_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_async(event_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete school event {event_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.post("/addImage", response_model=ResultResponse[EntityImageDto])
async def add_event_image(
    request: AddEntityImageRequest, service: CommandService
) -> ResultResponse[EntityImageDto]:
    try:
        result = await service.add_image_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to add school event image", e) from e
    return ResultResponse[EntityImageDto].from_result(result)


@router.delete("/deleteImage/{link_id}", response_model=ResultResponse[None])
async def remove_event_image(link_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_image_async(link_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to remove school event image {link_id}", e) from e
    return ResultResponse[None].from_result(result)
