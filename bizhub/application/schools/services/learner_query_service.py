"""Read side of the learner module."""

from sqlalchemy import exists, or_, select

from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.schools.dtos import (
    LearnerDto,
    LearnerFilter,
    LearnerPageParameters,
    ParentDto,
)
from bizhub.application.schools.mappers import LearnerMapper, ParentMapper
from bizhub.domain.schools import Gender, age_from_id_number
from bizhub.models import Learner, LearnerParent

LEARNER_ORDER_FIELDS = ("first_name", "last_name", "gender", "email", "created_on")

_PARENTS = Include(Learner.parents).then(LearnerParent.parent)


def learner_not_found(learner_id: str) -> str:
    return f"No learner matching id '{learner_id}' found."


def _gender_filter(gender: Gender | None) -> Gender | None:
    # Gender.ALL matches every learner
    return None if gender == Gender.ALL else gender


def _sort_key(learner: Learner) -> tuple[str, str]:
    return learner.last_name.lower(), learner.first_name.lower()


class LearnerQueryService:
    """Lists and looks up learners as DTOs."""

    def __init__(
        self,
        learner_repository: RepositoryProtocol[Learner, str],
        learner_parent_repository: RepositoryProtocol[LearnerParent, str],
    ) -> None:
        self.learner_repository = learner_repository
        self.learner_parent_repository = learner_parent_repository

    async def all_learners_async(self, filters: LearnerFilter) -> Result[list[LearnerDto]]:
        """
        Every learner matching the filters, by surname.

        Ages come from the identity number, so the age range is applied after
        loading.
        """
        predicate = (
            PredicateBuilder.new(True)
            .and_if(filters.learner_id, lambda learner_id: Learner.id == learner_id)
            .and_if(_gender_filter(filters.gender), lambda gender: Learner.gender == gender)
        )
        result = await self.learner_repository.list_async(LambdaSpec(predicate.build(), _PARENTS))
        if not result.succeeded:
            return result.cast()

        learners = sorted(result.data, key=_sort_key)
        if filters.min_age is not None:
            learners = [
                learner
                for learner in learners
                if age_from_id_number(learner.id_number) >= filters.min_age
            ]
        if filters.max_age is not None:
            learners = [
                learner
                for learner in learners
                if age_from_id_number(learner.id_number) <= filters.max_age
            ]
        return Result.success([LearnerMapper.to_dto(learner) for learner in learners])

    async def paged_learners_async(
        self, params: LearnerPageParameters
    ) -> PaginatedResult[LearnerDto]:
        """One page of learners; search matches first name, surname or email."""
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(_gender_filter(params.gender), lambda gender: Learner.gender == gender)
            .and_if(
                params.parent_id,
                lambda parent_id: exists(
                    select(LearnerParent.id).where(
                        LearnerParent.learner_id == Learner.id,
                        LearnerParent.parent_id == parent_id,
                    )
                ),
            )
            .and_if(
                search or None,
                lambda text: or_(
                    Learner.first_name.icontains(text, autoescape=True),
                    Learner.last_name.icontains(text, autoescape=True),
                    Learner.email.icontains(text, autoescape=True),
                ),
            )
        )
        page = await self.learner_repository.paged_list_async(
            LambdaSpec(predicate.build(), _PARENTS),
            params.to_pagination(),
            params.order_by,
            LEARNER_ORDER_FIELDS,
        )
        return page.with_data(LearnerMapper.to_dto(learner) for learner in page.data)

    async def learner_count_async(self) -> Result[int]:
        return await self.learner_repository.count_async()

    async def learner_async(self, learner_id: str) -> Result[LearnerDto]:
        result = await self.learner_repository.first_or_default_async(
            LambdaSpec(Learner.id == learner_id, _PARENTS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail(learner_not_found(learner_id))
        return Result.success(LearnerMapper.to_dto(result.data))

    async def learner_by_email_async(self, email: str) -> Result[LearnerDto]:
        result = await self.learner_repository.first_or_default_async(
            LambdaSpec(Learner.email == email, _PARENTS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("No learner found.")
        return Result.success(LearnerMapper.to_dto(result.data))

    async def learner_exists_async(self, email: str) -> Result[str | None]:
        """The id of the learner using this email address, None when unused."""
        result = await self.learner_repository.first_or_default_async(
            LambdaSpec(Learner.email == email)
        )
        return result.map(lambda learner: learner.id if learner is not None else None)

    async def learner_parents_async(self, learner_id: str) -> Result[list[ParentDto]]:
        result = await self.learner_parent_repository.list_async(
            LambdaSpec(LearnerParent.learner_id == learner_id, Include(LearnerParent.parent))
        )
        return result.map(
            lambda links: [
                ParentMapper.to_dto(link.parent, with_learners=False)
                for link in sorted(
                    links, key=lambda link: (link.parent.last_name, link.parent.first_name)
                )
            ]
        )
