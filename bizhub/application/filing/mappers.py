"""Mappers for image and video rows to DTOs."""

from bizhub.application.common.mapping import loaded_or_none
from bizhub.application.filing.dtos import EntityImageDto, EntityVideoDto, ImageDto, VideoDto
from bizhub.models import EntityImageMixin, EntityVideoMixin, Image, Video

STATIC_URL_PATH = "/static"


class ImageMapper:
    """Mapper for Image ORM -> DTO conversion."""

    def __init__(self, base_address: str = "") -> None:
        self.base_address = base_address.rstrip("/")

    def public_url(self, relative_path: str) -> str:
        return f"{self.base_address}{STATIC_URL_PATH}/{relative_path}"

    def to_dto(self, image: Image) -> ImageDto:
        return ImageDto(
            id=image.id,
            display_name=image.display_name,
            file_name=image.file_name,
            content_type=image.content_type,
            size=image.size,
            relative_path=image.relative_path,
            image_type=image.image_type,
            url=self.public_url(image.relative_path),
            created_on=image.created_on,
        )

    def entity_image_to_dto(self, link: EntityImageMixin) -> EntityImageDto:
        image = loaded_or_none(link, "image")
        return EntityImageDto(
            id=link.id,  # type: ignore[attr-defined]
            entity_id=link.entity_id,  # type: ignore[attr-defined]
            image_id=link.image_id,
            selector=link.selector,
            order=link.order,
            image=self.to_dto(image) if image is not None else None,
        )

    def entity_images_to_dto(self, owner: object) -> list[EntityImageDto]:
        """Map an owner's image links, or nothing when they were not loaded."""
        links = loaded_or_none(owner, "images") or []
        return [self.entity_image_to_dto(link) for link in links]


class VideoMapper:
    """Mapper for Video ORM -> DTO conversion."""

    def __init__(self, base_address: str = "") -> None:
        self.base_address = base_address.rstrip("/")

    def to_dto(self, video: Video) -> VideoDto:
        return VideoDto(
            id=video.id,
            display_name=video.display_name,
            file_name=video.file_name,
            content_type=video.content_type,
            size=video.size,
            relative_path=video.relative_path,
            url=f"{self.base_address}{STATIC_URL_PATH}/{video.relative_path}",
            created_on=video.created_on,
        )

    def entity_video_to_dto(self, link: EntityVideoMixin) -> EntityVideoDto:
        video = loaded_or_none(link, "video")
        return EntityVideoDto(
            id=link.id,  # type: ignore[attr-defined]
            entity_id=link.entity_id,  # type: ignore[attr-defined]
            video_id=link.video_id,
            order=link.order,
            video=self.to_dto(video) if video is not None else None,
        )

    def entity_videos_to_dto(self, owner: object) -> list[EntityVideoDto]:
        links = loaded_or_none(owner, "videos") or []
        return [self.entity_video_to_dto(link) for link in links]
