"""Attach uploaded images and videos to owning entities."""

from typing import Any

import structlog

from bizhub.application.common.protocols import RepositoryProtocol
from bizhub.application.common.result import Result
from bizhub.application.common.specification import Include, LambdaSpec
from bizhub.application.filing.dtos import (
    AddEntityImageRequest,
    AddEntityVideoRequest,
    EntityImageDto,
    EntityVideoDto,
)
from bizhub.application.filing.mappers import ImageMapper, VideoMapper

logger = structlog.get_logger(__name__)


class EntityImageLinker:
    """Creates and removes link rows between one owner type and images."""

    def __init__(
        self,
        repository: RepositoryProtocol[Any, str],
        link_model: type[Any],
        mapper: ImageMapper,
    ) -> None:
        self.repository = repository
        self.link_model = link_model
        self.mapper = mapper

    async def images_async(self, entity_id: str) -> Result[list[EntityImageDto]]:
        """All images linked to one entity, in display order."""
        spec = LambdaSpec(
            self.link_model.entity_id == entity_id, Include(self.link_model.image)
        )
        result = await self.repository.list_async(spec)
        return result.map(
            lambda links: [
                self.mapper.entity_image_to_dto(link)
                for link in sorted(links, key=lambda link: link.order)
            ]
        )

    async def add_async(self, request: AddEntityImageRequest) -> Result[EntityImageDto]:
        link = self.link_model(
            entity_id=request.entity_id,
            image_id=request.image_id,
            selector=request.selector,
            order=request.order,
        )

        created = await self.repository.create_async(link)
        if not created.succeeded:
            return created.cast()

        saved = await self.repository.save_async()
        if not saved.succeeded:
            return saved.cast()

        logger.info(
            "image_linked",
            owner=self.link_model.__tablename__,
            entity_id=request.entity_id,
            image_id=request.image_id,
        )
        return Result.success(self.mapper.entity_image_to_dto(link))

    async def remove_async(self, link_id: str) -> Result[None]:
        deleted = await self.repository.delete_async(link_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(message="Image was successfully unlinked")


class EntityVideoLinker:
    """Creates and removes link rows between one owner type and videos."""

    def __init__(
        self,
        repository: RepositoryProtocol[Any, str],
        link_model: type[Any],
        mapper: VideoMapper,
    ) -> None:
        self.repository = repository
        self.link_model = link_model
        self.mapper = mapper

    async def videos_async(self, entity_id: str) -> Result[list[EntityVideoDto]]:
        spec = LambdaSpec(
            self.link_model.entity_id == entity_id, Include(self.link_model.video)
        )
        result = await self.repository.list_async(spec)
        return result.map(
            lambda links: [
                self.mapper.entity_video_to_dto(link)
                for link in sorted(links, key=lambda link: link.order)
            ]
        )

    async def add_async(self, request: AddEntityVideoRequest) -> Result[EntityVideoDto]:
        link = self.link_model(
            entity_id=request.entity_id, video_id=request.video_id, order=request.order
        )

        created = await self.repository.create_async(link)
        if not created.succeeded:
            return created.cast()

        saved = await self.repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(self.mapper.entity_video_to_dto(link))

    async def remove_async(self, link_id: str) -> Result[None]:
        deleted = await self.repository.delete_async(link_id)
        if not deleted.succeeded:
            return deleted.cast()

        saved = await self.repository.save_async()
        if not saved.succeeded:
            return saved.cast()
        return Result.success(message="Video was successfully unlinked")
