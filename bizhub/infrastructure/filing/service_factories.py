"""Per-upload service factories for bulk uploads."""

from collections.abc import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from bizhub.application.filing.protocols import FileStorageProtocol
from bizhub.application.filing.services import ImageProcessingService, VideoProcessingService
from bizhub.config import Settings
from bizhub.infrastructure.common.repository import Repository
from bizhub.models import Image, Video


def image_service_factory(
    storage: FileStorageProtocol, settings: Settings
) -> Callable[[AsyncSession], ImageProcessingService]:
    """Build an image service bound to its own session for each upload."""

    def create(session: AsyncSession) -> ImageProcessingService:
        return ImageProcessingService(Repository(session, Image), storage, settings)

    return create


def video_service_factory(
    storage: FileStorageProtocol, settings: Settings
) -> Callable[[AsyncSession], VideoProcessingService]:
    """Build a video service bound to its own session for each upload."""

    def create(session: AsyncSession) -> VideoProcessingService:
        return VideoProcessingService(Repository(session, Video), storage, settings)

    return create
