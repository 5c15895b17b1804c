"""DTOs for uploaded images and videos and their owner links."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from bizhub.domain.filing import UploadType

T = TypeVar("T")


class ImageDto(BaseModel):
    """Image metadata as exposed to clients."""

    id: str | None = None
    display_name: str
    file_name: str
    content_type: str
    size: int = 0
    relative_path: str
    image_type: UploadType = UploadType.IMAGE
    url: str | None = None
    created_on: datetime | None = None

    model_config = {"from_attributes": True}


class VideoDto(BaseModel):
    """Video metadata as exposed to clients."""

    id: str | None = None
    display_name: str
    file_name: str
    content_type: str
    size: int = 0
    relative_path: str
    url: str | None = None
    created_on: datetime | None = None

    model_config = {"from_attributes": True}


class EntityImageDto(BaseModel):
    """Link between an owning entity and an image."""

    id: str | None = None
    entity_id: str
    image_id: str
    selector: str | None = None
    order: int = 0
    image: ImageDto | None = None


class EntityVideoDto(BaseModel):
    """Link between an owning entity and a video."""

    id: str | None = None
    entity_id: str
    video_id: str
    order: int = 0
    video: VideoDto | None = None


class AddEntityImageRequest(BaseModel):
    """Attach an existing image to an entity."""

    image_id: str = Field(..., min_length=1, description="ID of the uploaded image")
    entity_id: str = Field(..., min_length=1, description="ID of the owning entity")
    selector: str | None = Field(None, description="Where the image is used, e.g. 'cover'")
    order: int = Field(0, ge=0, description="Position among the entity's images")


class AddEntityVideoRequest(BaseModel):
    """Attach an existing video to an entity."""

    video_id: str = Field(..., min_length=1, description="ID of the uploaded video")
    entity_id: str = Field(..., min_length=1, description="ID of the owning entity")
    order: int = Field(0, ge=0, description="Position among the entity's videos")


class Base64ImageUploadRequest(BaseModel):
    """Image sent inline as base64, optionally as a data URL."""

    name: str = Field(..., min_length=1, description="Display name of the image")
    base64_string: str = Field(..., min_length=1, description="Base64 payload or data URL")
    image_type: UploadType = Field(UploadType.IMAGE, description="Usage of the image")


class FileInfoResponse(BaseModel):
    """Metadata of a stored file."""

    name: str
    length: int
    created_utc: datetime


class VideoUploadResponse(BaseModel):
    """Outcome of a single video upload."""

    id: str
    file_name: str
    size: int
    path: str


class BulkUploadItemResponse(BaseModel, Generic[T]):
    """Outcome of one file in a bulk upload."""

    file_name: str
    succeeded: bool
    messages: list[str] = Field(default_factory=list)
    data: T | None = None
