"""Write side of the parent module."""

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.schools.dtos import ParentDto
from bizhub.application.schools.mappers import ParentMapper
from bizhub.models import Learner, LearnerParent, Parent

logger = structlog.get_logger(__name__)


class ParentCommandService:
    """Creates, edits and removes parents and their learner links."""

    def __init__(
        self,
        parent_repository: RepositoryProtocol[Parent, str],
        learner_parent_repository: RepositoryProtocol[LearnerParent, str],
        learner_repository: RepositoryProtocol[Learner, str],
    ) -> None:
        self.parent_repository = parent_repository
        self.learner_parent_repository = learner_parent_repository
        self.learner_repository = learner_repository

    async def _link_learners(self, parent: Parent, learner_ids: list[str]) -> Result[None]:
        """Make the parent's learner links match; unknown learner ids are skipped."""
        wanted = list(dict.fromkeys(learner_ids))
        found = await self.learner_repository.list_async(LambdaSpec(Learner.id.in_(wanted)))
        if not found.succeeded:
            return found.cast()
        known = {learner.id for learner in found.data}

        for link in list(parent.learners):
            if link.learner_id not in known:
                parent.learners.remove(link)

        linked = {link.learner_id for link in parent.learners}
        for learner_id in wanted:
            if learner_id in known and learner_id not in linked:
                parent.learners.append(
                    LearnerParent(
                        learner_id=learner_id, parent_consent_required=parent.require_consent
                    )
                )
        return Result.success()

    async def create_async(self, dto: ParentDto) -> Result[ParentDto]:
        parent = ParentMapper.to_entity(dto)
        parent.learners = []
        if dto.learner_ids:
            linked = await self._link_learners(parent, dto.learner_ids)
            if not linked.succeeded:
                return linked.cast()

        created = await self.parent_repository.create_async(parent)
        if not created.succeeded:
            return created.cast()

        saved = await self.parent_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("parent_created", parent_id=parent.id)
        return Result.success(ParentMapper.to_dto(parent, with_learners=False))

    async def update_async(self, dto: ParentDto) -> Result[ParentDto]:
        """
        Update a parent.

        The parent's consent preference is copied onto every learner link.
        Learner links are only replaced when the DTO lists learner ids.
        """
        found = await self.parent_repository.find_by_id_async(
            dto.id or "", True, Include(Parent.learners)
        )
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail("No parent found")

        parent = ParentMapper.to_entity(dto, found.data)
        if dto.learner_ids is not None:
            linked = await self._link_learners(parent, dto.learner_ids)
            if not linked.succeeded:
                return linked.cast()
        for link in parent.learners:
            link.parent_consent_required = parent.require_consent

        updated = self.parent_repository.update(parent)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.parent_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("parent_updated", parent_id=parent.id, require_consent=parent.require_consent)
        return Result.success(
            ParentMapper.to_dto(parent, with_learners=False),
            message="Parent updated successfully.",
        )

    async def remove_async(self, parent_id: str) -> Result[None]:
        deleted = await self.parent_repository.delete_async(parent_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.parent_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("parent_removed", parent_id=parent_id)
        return Result.success(message="Parent Removed successfully")

    async def add_learner_async(self, parent_id: str, learner_id: str) -> Result[None]:
        """Link one learner to a parent; linking twice is a no-op."""
        parent_found = await self.parent_repository.find_by_id_async(parent_id)
        if not parent_found.succeeded:
            return parent_found.cast()
        if parent_found.data is None:
            return Result.fail("No parent found")

        existing = await self.learner_parent_repository.first_or_default_async(
            LambdaSpec(
                (LearnerParent.parent_id == parent_id) & (LearnerParent.learner_id == learner_id)
            )
        )
        if not existing.succeeded:
            return existing.cast()
        if existing.data is not None:
            return Result.success(message="Learner is already linked to this parent")

        created = await self.learner_parent_repository.create_async(
            LearnerParent(
                parent_id=parent_id,
                learner_id=learner_id,
                parent_consent_required=parent_found.data.require_consent,
            )
        )
        if not created.succeeded:
            return created.cast()

        saved = await self.learner_parent_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("learner_linked", parent_id=parent_id, learner_id=learner_id)
        return Result.success(message="Learner linked successfully")

    async def remove_learner_async(self, parent_id: str, learner_id: str) -> Result[None]:
        existing = await self.learner_parent_repository.first_or_default_async(
            LambdaSpec(
                (LearnerParent.parent_id == parent_id) & (LearnerParent.learner_id == learner_id)
            )
        )
        if not existing.succeeded:
            return existing.cast()
        if existing.data is None:
            return Result.fail("Learner is not linked to this parent")

        deleted = await self.learner_parent_repository.delete_async(existing.data.id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.learner_parent_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("learner_unlinked", parent_id=parent_id, learner_id=learner_id)
        return Result.success(message="Learner unlinked successfully")
