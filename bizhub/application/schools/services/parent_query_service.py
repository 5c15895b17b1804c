"""Read side of the parent module."""

from sqlalchemy import exists, or_, select

from bizhub.application.common.pagination import PaginatedResult
from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec, PredicateBuilder
from bizhub.application.schools.dtos import LearnerDto, ParentDto, ParentPageParameters
from bizhub.application.schools.mappers import LearnerMapper, ParentMapper
from bizhub.models import LearnerParent, Parent

PARENT_ORDER_FIELDS = ("first_name", "last_name", "email", "created_on")

_LEARNERS = Include(Parent.learners).then(LearnerParent.learner)


class ParentQueryService:
    """Lists and looks up parents as DTOs."""

    def __init__(
        self,
        parent_repository: RepositoryProtocol[Parent, str],
        learner_parent_repository: RepositoryProtocol[LearnerParent, str],
    ) -> None:
        self.parent_repository = parent_repository
        self.learner_parent_repository = learner_parent_repository

    async def all_parents_async(self) -> Result[list[ParentDto]]:
        result = await self.parent_repository.list_async(LambdaSpec(None, _LEARNERS))
        return result.map(
            lambda parents: [
                ParentMapper.to_dto(parent)
                for parent in sorted(
                    parents, key=lambda parent: (parent.last_name.lower(), parent.first_name)
                )
            ]
        )

    async def paged_parents_async(
        self, params: ParentPageParameters
    ) -> PaginatedResult[ParentDto]:
        """One page of parents; search matches first name, surname or email."""
        search = params.search_text.strip() if params.search_text else None
        predicate = (
            PredicateBuilder.new(True)
            .and_if(
                params.learner_id,
                lambda learner_id: exists(
                    select(LearnerParent.id).where(
                        LearnerParent.parent_id == Parent.id,
                        LearnerParent.learner_id == learner_id,
                    )
                ),
            )
            .and_if(
                search or None,
                lambda text: or_(
                    Parent.first_name.icontains(text, autoescape=True),
                    Parent.last_name.icontains(text, autoescape=True),
                    Parent.email.icontains(text, autoescape=True),
                ),
            )
        )
        page = await self.parent_repository.paged_list_async(
            LambdaSpec(predicate.build(), _LEARNERS),
            params.to_pagination(),
            params.order_by,
            PARENT_ORDER_FIELDS,
        )
        return page.with_data(ParentMapper.to_dto(parent) for parent in page.data)

    async def parent_count_async(self) -> Result[int]:
        return await self.parent_repository.count_async()

    async def parent_async(self, parent_id: str) -> Result[ParentDto]:
        result = await self.parent_repository.first_or_default_async(
            LambdaSpec(Parent.id == parent_id, _LEARNERS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("No parent found")
        return Result.success(ParentMapper.to_dto(result.data))

    async def parent_by_email_async(self, email: str) -> Result[ParentDto]:
        result = await self.parent_repository.first_or_default_async(
            LambdaSpec(Parent.email == email, _LEARNERS)
        )
        if not result.succeeded:
            return result.cast()
        if result.data is None:
            return Result.fail("No parent found")
        return Result.success(ParentMapper.to_dto(result.data))

    async def parent_learners_async(self, parent_id: str) -> Result[list[LearnerDto]]:
        result = await self.learner_parent_repository.list_async(
            LambdaSpec(LearnerParent.parent_id == parent_id, Include(LearnerParent.learner))
        )
        return result.map(
            lambda links: [
                LearnerMapper.to_dto(link.learner, with_parents=False)
                for link in sorted(
                    links, key=lambda link: (link.learner.last_name, link.learner.first_name)
                )
            ]
        )
