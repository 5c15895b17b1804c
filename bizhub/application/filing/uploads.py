"""Upload inputs and helpers shared by the image and video services."""

import base64
import binascii
import mimetypes
from dataclasses import dataclass
from pathlib import PurePath

from bizhub.application.filing.protocols import ReadableStream
from bizhub.exceptions import InvalidImageError


@dataclass
class FileUpload:
    """
    A file received from a client.

    Attributes:
        file_name: Original client file name, used for display and extension
        content_type: Declared MIME type, may be empty
        stream: Source of the bytes
        size: Declared size in bytes when known up front
    """

    file_name: str
    content_type: str | None
    stream: ReadableStream
    size: int | None = None

    @property
    def extension(self) -> str:
        return PurePath(self.file_name).suffix.lower()

    @property
    def display_name(self) -> str:
        return PurePath(self.file_name).stem or self.file_name

    def resolved_content_type(self, fallback: str = "application/octet-stream") -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.file_name)
        return guessed or fallback


def decode_base64_image(payload: str) -> bytes:
    """
    Decode a base64 image, accepting a data URL prefix.

    Raises:
        InvalidImageError: If the payload is empty or not valid base64
    """
    data = payload.strip()
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    data = "".join(data.split())

    try:
        content = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError("Invalid base64 image payload.") from e

    if not content:
        raise InvalidImageError("Invalid base64 image payload.")
    return content
