"""Write side of the learner module."""

from collections.abc import Iterable

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.schools.dtos import LearnerDto, LearnerParentsRequest
from bizhub.application.schools.mappers import LearnerMapper
from bizhub.models import Learner, LearnerParent, Parent

logger = structlog.get_logger(__name__)


def learner_not_in_store(learner_id: str) -> str:
    return f"No learner matching id '{learner_id}' found in the datastore"


class LearnerCommandService:
    """Creates, edits and removes learners and their parent links."""

    def __init__(
        self,
        learner_repository: RepositoryProtocol[Learner, str],
        parent_repository: RepositoryProtocol[Parent, str],
    ) -> None:
        self.learner_repository = learner_repository
        self.parent_repository = parent_repository

    async def _link_parents(self, learner: Learner, parent_ids: Iterable[str]) -> Result[None]:
        """
        Make the learner's parent links match the given parents.

        Links to parents no longer listed are removed. New links copy the
        parent's consent preference. Unknown parent ids are skipped.
        """
        wanted = list(dict.fromkeys(parent_ids))
        found = await self.parent_repository.list_async(LambdaSpec(Parent.id.in_(wanted)))
        if not found.succeeded:
            return found.cast()
        parents = {parent.id: parent for parent in found.data}

        for link in list(learner.parents):
            if link.parent_id not in parents:
                learner.parents.remove(link)

        linked = {link.parent_id for link in learner.parents}
        for parent_id in wanted:
            if parent_id in parents and parent_id not in linked:
                learner.parents.append(
                    LearnerParent(
                        parent_id=parent_id,
                        parent_consent_required=parents[parent_id].require_consent,
                    )
                )
        return Result.success()

    async def _load_tracked(self, learner_id: str) -> Result[Learner]:
        found = await self.learner_repository.find_by_id_async(
            learner_id, True, Include(Learner.parents)
        )
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail(learner_not_in_store(learner_id))
        return Result.success(found.data)

    async def create_async(self, dto: LearnerDto) -> Result[LearnerDto]:
        learner = LearnerMapper.to_entity(dto)
        learner.parents = []
        if dto.parent_ids:
            linked = await self._link_parents(learner, dto.parent_ids)
            if not linked.succeeded:
                return linked.cast()

        created = await self.learner_repository.create_async(learner)
        if not created.succeeded:
            return created.cast()

        saved = await self.learner_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("learner_created", learner_id=learner.id, parents=len(learner.parents))
        return Result.success(LearnerMapper.to_dto(learner, with_parents=False))

    async def update_async(self, dto: LearnerDto) -> Result[LearnerDto]:
        """
        Update a learner.

        Parent links are only replaced when the DTO lists parent ids.
        """
        loaded = await self._load_tracked(dto.id or "")
        if not loaded.succeeded:
            return loaded.cast()

        learner = LearnerMapper.to_entity(dto, loaded.data)
        if dto.parent_ids is not None:
            linked = await self._link_parents(learner, dto.parent_ids)
            if not linked.succeeded:
                return linked.cast()

        updated = self.learner_repository.update(learner)
        if not updated.succeeded:
            return updated.cast()

        saved = await self.learner_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("learner_updated", learner_id=learner.id)
        return Result.success(
            LearnerMapper.to_dto(learner, with_parents=False),
            message="Learner updated successfully",
        )

    async def update_learner_parents_async(self, request: LearnerParentsRequest) -> Result[None]:
        loaded = await self._load_tracked(request.learner_id)
        if not loaded.succeeded:
            return loaded.cast()

        linked = await self._link_parents(loaded.data, request.parent_ids)
        if not linked.succeeded:
            return linked.cast()

        saved = await self.learner_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "learner_parents_updated",
            learner_id=request.learner_id,
            parents=len(loaded.data.parents),
        )
        return Result.success(message="Learner parents updated successfully")

    async def remove_async(self, learner_id: str) -> Result[None]:
        deleted = await self.learner_repository.delete_async(learner_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.learner_repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info("learner_removed", learner_id=learner_id)
        return Result.success(message="Learner removed successfully")
