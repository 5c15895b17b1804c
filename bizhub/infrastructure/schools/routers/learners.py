"""API routes for learners."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from bizhub.application.schools.dtos import (
    LearnerDto,
    LearnerFilter,
    LearnerPageParameters,
    LearnerParentsRequest,
    ParentDto,
)
from bizhub.application.schools.services import LearnerCommandService, LearnerQueryService
from bizhub.core import container
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.common.di import inject_service
from bizhub.infrastructure.common.errors import internal_error
from bizhub.infrastructure.common.schemas import PaginatedResponse, ResultResponse

router = APIRouter(prefix="/learners", tags=["learners"])

QueryService = Annotated[
    LearnerQueryService, Depends(inject_service(container.learner_query_service))
]
CommandService = Annotated[
    LearnerCommandService, Depends(inject_service(container.learner_command_service))
]


@router.get("", response_model=ResultResponse[list[LearnerDto]])
async def get_learners(
    filters: Annotated[LearnerFilter, Query()], service: QueryService
) -> ResultResponse[list[LearnerDto]]:
    """
    Get every learner matching the filters.

    Args:
        filters: Optional learner id, gender and age range
        service: LearnerQueryService injected via dependency container

    Returns:
        Learners ordered by surname, with their parents
    """
    try:
        result = await service.all_learners_async(filters)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to list learners", e) from e
    return ResultResponse[list[LearnerDto]].from_result(result)


@router.get("/paged", response_model=PaginatedResponse[LearnerDto])
async def get_paged_learners(
    params: Annotated[LearnerPageParameters, Query()], service: QueryService
) -> PaginatedResponse[LearnerDto]:
    try:
        page = await service.paged_learners_async(params)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to page learners", e) from e
    return PaginatedResponse[LearnerDto].from_page(page)


@router.get("/count", response_model=ResultResponse[int])
async def get_learner_count(service: QueryService) -> ResultResponse[int]:
    try:
        result = await service.learner_count_async()
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to count learners", e) from e
    return ResultResponse[int].from_result(result)


@router.get("/byEmail/{email}", response_model=ResultResponse[LearnerDto])
async def get_learner_by_email(email: str, service: QueryService) -> ResultResponse[LearnerDto]:
    try:
        result = await service.learner_by_email_async(email)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to get learner by email", e) from e
    return ResultResponse[LearnerDto].from_result(result)


@router.get("/exists/{email}", response_model=ResultResponse[str | None])
async def get_learner_exists(email: str, service: QueryService) -> ResultResponse[str | None]:
    """Get the id of the learner registered with this email, if any."""
    try:
        result = await service.learner_exists_async(email)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to check learner email", e) from e
    return ResultResponse[str | None].from_result(result)


@router.get("/{learner_id}", response_model=ResultResponse[LearnerDto])
async def get_learner(learner_id: str, service: QueryService) -> ResultResponse[LearnerDto]:
    try:
        result = await service.learner_async(learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to get learner {learner_id}", e) from e
    return ResultResponse[LearnerDto].from_result(result)


@router.get("/{learner_id}/parents", response_model=ResultResponse[list[ParentDto]])
async def get_learner_parents(
    learner_id: str, service: QueryService
) -> ResultResponse[list[ParentDto]]:
    try:
        result = await service.learner_parents_async(learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to list parents of learner {learner_id}", e) from e
    return ResultResponse[list[ParentDto]].from_result(result)


@router.put("", response_model=ResultResponse[LearnerDto])
async def create_learner(dto: LearnerDto, service: CommandService) -> ResultResponse[LearnerDto]:
    """Create a learner linked to the listed parents."""
    try:
        result = await service.create_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error("Failed to create learner", e) from e
    return ResultResponse[LearnerDto].from_result(result)


@router.post("", response_model=ResultResponse[LearnerDto])
async def update_learner(dto: LearnerDto, service: CommandService) -> ResultResponse[LearnerDto]:
    try:
        result = await service.update_async(dto)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update learner {dto.id}", e) from e
    return ResultResponse[LearnerDto].from_result(result)


@router.post("/parents", response_model=ResultResponse[None])
async def update_learner_parents(
    request: LearnerParentsRequest, service: CommandService
) -> ResultResponse[None]:
    try:
        result = await service.update_learner_parents_async(request)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to update parents of learner {request.learner_id}", e) from e
    return ResultResponse[None].from_result(result)


@router.delete("/{learner_id}", response_model=ResultResponse[None])
async def delete_learner(learner_id: str, service: CommandService) -> ResultResponse[None]:
    try:
        result = await service.remove_async(learner_id)
    except BizhubError:
        raise
    except Exception as e:
        raise internal_error(f"Failed to delete learner {learner_id}", e) from e
    return ResultResponse[None].from_result(result)
