"""API routes for parents."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.schools.dtos import LearnerDto, ParentDto, ParentPageParameters
from bizhub.application.schools.services import ParentCommandService, ParentQueryService
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/parents", tags=["parents"])

QueryService = Annotated[
    ParentQueryService, Depends(inject_service(container.parent_query_service))
]
CommandService = Annotated[
    ParentCommandService, Depends(inject_service(container.parent_command_service))
]


@router.get("", response_model=ResultResponse[list[ParentDto]])
async def get_parents(service: QueryService) -> ResultResponse[list[ParentDto]]:
    try:
        result = await service.all_parents_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list parents", e) from e
    return ResultResponse[list[ParentDto]].from_result(result)


@router.get("/paged", response_model=PaginatedResponse[ParentDto])
async def get_paged_parents(
    params: Annotated[ParentPageParameters, Query()], service: QueryService
) -> PaginatedResponse[ParentDto]:
    try:
        page = await service.paged_parents_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page parents", e) from e
    return PaginatedResponse[ParentDto].from_page(page)


@router.get("/count", response_model=ResultResponse[int])
async def get_parent_count(service: QueryService) -> ResultResponse[int]:
    try:
        result = await service.parent_count_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to count parents", e) from e
    return ResultResponse[int].from_result(result)


@router.get("/byEmail/{email}", response_model=ResultResponse[ParentDto])
async def get_parent_by_email(email: str, service: QueryService) -> ResultResponse[ParentDto]:
    try:
        result = await service.parent_by_email_async(email)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to get parent by email", e) from e
    return ResultResponse[ParentDto].from_result(result)


@router.get("/{parent_id}", response_model=ResultResponse[ParentDto])
async def get_parent(parent_id: str, service: QueryService) -> ResultResponse[ParentDto]:
    try:
        result = await service.parent_async(parent_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get parent {parent_id}", e) from e
    return ResultResponse[ParentDto].from_result(result)


@router.get("/{parent_id}/learners", response_model=ResultResponse[list[LearnerDto]])
async def get_parent_learners(
    parent_id: str, service: QueryService
) -> ResultResponse[list[LearnerDto]]:
    try:
        result = await service.parent_learners_async(parent_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list learners of parent {parent_id}", e) from e
    return ResultResponse[list[LearnerDto]].from_result(result)


@router.put("", response_model=ResultResponse[ParentDto])
async def create_parent(dto: ParentDto, service: CommandService) -> ResultResponse[ParentDto]:
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create parent", e) from e
    return ResultResponse[ParentDto].from_result(result)


@router.post("", response_model=ResultResponse[ParentDto])
async def update_parent(dto: ParentDto, service: CommandService) -> ResultResponse[ParentDto]:
    """Update a parent and carry its consent preference onto its learner links."""
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update parent {dto.id}", e) from e
    return ResultResponse[ParentDto].from_result(result)


@router.delete("/{parent_id}", response_model=ResultResponse[None])
async def delete_parent(parent_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_async(parent_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete parent {parent_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.put("/{parent_id}/learners/{learner_id}", response_model=ResultResponse[None])
async def add_parent_learner(
    parent_id: str, learner_id: str, service: CommandService
) -> ResultResponse[None]:
    try:
        result = await service.add_learner_async(parent_id, learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to link learner {learner_id} to {parent_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.delete("/{parent_id}/learners/{learner_id}", response_model=ResultResponse[None])
async def remove_parent_learner(
    parent_id: str, learner_id: str, service: CommandService
) -> ResultResponse[None]:
    try:
        result = await service.remove_learner_async(parent_id, learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to unlink learner {learner_id} from {parent_id}", e) from e
    return ResultResponse[None].from_result(result)
